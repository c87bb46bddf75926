# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
guessgrid: input and guess-submission engine for multi-word guessing games.

Players type into a grid of slots split into one or more target words, submit
the whole grid as one guess, and get one grade per letter back from a remote
grading service.
"""

from .client import GradingClient
from .client_types import NewGameResult
from .config import GuessGridConfig
from .errors import (
    GradingServiceError,
    GradingTimeoutError,
    GuessGridError,
    InvalidWordLengthsError,
    MalformedResponseError,
)
from .game import Game
from .grid import GuessGrid, split_by_lengths
from .history import History
from .models import Grade, GuessRecord, WordResult
from .router import BACKSPACE, ENTER, InputRouter
from .submitter import GuessSubmitter, SubmitState

__all__ = [
    "BACKSPACE",
    "ENTER",
    "Game",
    "Grade",
    "GradingClient",
    "GradingServiceError",
    "GradingTimeoutError",
    "GuessGrid",
    "GuessGridConfig",
    "GuessGridError",
    "GuessRecord",
    "GuessSubmitter",
    "History",
    "InputRouter",
    "InvalidWordLengthsError",
    "MalformedResponseError",
    "NewGameResult",
    "SubmitState",
    "WordResult",
    "split_by_lengths",
]
