# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Tests for the scripted example in examples/."""

import importlib.util
import json
from pathlib import Path

import httpx
import pytest

from guessgrid.client import GradingClient

EXAMPLE = Path(__file__).resolve().parent.parent / "examples" / "guessgrid_simple.py"


def load_example():
    spec = importlib.util.spec_from_file_location("guessgrid_simple", EXAMPLE)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.asyncio
async def test_guess_after_error_is_sent_as_typed(monkeypatch, capsys):
    guesses = []

    def handler(request):
        if request.url.path.endswith("/newgame"):
            return httpx.Response(200, json={"id": "g", "wordLengths": [3]})
        guesses.append(json.loads(request.content)["guess"])
        if len(guesses) == 1:
            return httpx.Response(500, json={"message": "try again"})
        return httpx.Response(200, json={"grade": ["Correct"] * 3})

    transport = httpx.MockTransport(handler)
    example = load_example()
    monkeypatch.setattr(
        example.GradingClient,
        "from_config",
        classmethod(lambda cls, config: GradingClient(config.backend_url, transport=transport)),
    )

    await example.run(["abc", "xyz"])

    assert guesses == ["abc", "xyz"]
    out = capsys.readouterr().out
    assert "'abc': try again" in out
    assert "solved=True" in out
