# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Wire payloads exchanged with the grading service."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator

from .models import Grade


class GuessArgs(BaseModel):
    """Body of ``POST /guess``."""

    id: str
    guess: str


class GuessResult(BaseModel):
    """Success body of ``POST /guess``: one grade per letter, left to right."""

    grade: List[Grade]


class NewGameResult(BaseModel):
    """Success body of ``POST /newgame``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    word_lengths: List[PositiveInt] = Field(alias="wordLengths", min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _accept_single_length(cls, data: Any) -> Any:
        # Single-word servers answer {"id": ..., "len": n}.
        if isinstance(data, dict) and "wordLengths" not in data and "word_lengths" not in data:
            if "len" in data:
                data = {**data, "wordLengths": [data["len"]]}
        return data


class ErrorResponse(BaseModel):
    """Body of a non-2xx response."""

    message: Optional[str] = None
