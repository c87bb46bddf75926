# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Pytest configuration for guessgrid tests.

This file adds the src directory to sys.path so that tests can import
guessgrid without installing it, and provides fake grading backends.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

# Add src to path for tests to find the guessgrid package
_src_path = str(Path(__file__).resolve().parent.parent / "src")
if _src_path not in sys.path:
    sys.path.insert(0, _src_path)

import httpx  # noqa: E402

from guessgrid.models import Grade  # noqa: E402

C, W, I = Grade.CORRECT, Grade.WRONG_PLACE, Grade.INCORRECT


class FakeGrader:
    """
    In-memory stand-in for GradingClient.grade.

    Responses are consumed in order; an Exception instance is raised instead of
    returned. Setting ``gate`` holds every request until the event is set.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls: List[tuple] = []
        self.gate: Optional[asyncio.Event] = None

    async def grade(self, game_id: str, guess: str) -> List[Grade]:
        self.calls.append((game_id, guess))
        if self.gate is not None:
            await self.gate.wait()
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return list(response)


def grade_word(target: str, guess: str) -> List[str]:
    """Two-pass Wordle grading: exact matches first, then leftover letters."""
    grades = ["Incorrect"] * len(guess)
    remaining: List[Optional[str]] = list(target)
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            grades[i] = "Correct"
            remaining[i] = None
    for i, g in enumerate(guess):
        if grades[i] == "Correct":
            continue
        if g in remaining:
            grades[i] = "WrongPlace"
            remaining[remaining.index(g)] = None
    return grades


class FakeGradingServer:
    """
    httpx.MockTransport handler grading space-separated guesses against a target.

    Mirrors the real service's contract: /newgame returns id and word lengths,
    /guess returns a flat grade list or a 400/404 with a message.
    """

    def __init__(self, target: str, game_id: str = "game-1", legacy_newgame: bool = False):
        self.target = target
        self.game_id = game_id
        self.legacy_newgame = legacy_newgame
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/newgame"):
            lengths = [len(w) for w in self.target.split(" ")]
            if self.legacy_newgame:
                return httpx.Response(200, json={"id": self.game_id, "len": lengths[0]})
            return httpx.Response(200, json={"id": self.game_id, "wordLengths": lengths})
        if request.url.path.endswith("/guess"):
            body: Dict = json.loads(request.content)
            if body["id"] != self.game_id:
                return httpx.Response(404, json={"message": "no such session"})
            guess = body["guess"].replace(" ", "")
            target = self.target.replace(" ", "")
            if len(guess) != len(target):
                return httpx.Response(
                    400,
                    json={"message": f"Wrong Length (expected {len(target)}, have {len(guess)})"},
                )
            return httpx.Response(200, json={"grade": grade_word(target, guess)})
        return httpx.Response(404, json={"message": "not found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)
