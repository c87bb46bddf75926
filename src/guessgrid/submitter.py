# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Guess submission lifecycle.

IDLE --trigger()--> PENDING --success--> IDLE (history appended, grid reset)
                            --failure--> IDLE (error set, grid untouched)
                            --cancel---> IDLE (error unchanged, grid untouched)

Only one grading request may be outstanding. The pending flag is set
synchronously inside trigger(), before the request task is scheduled, so any
further Enter press is rejected until the first request settles.
"""

import asyncio
import logging
from enum import Enum
from typing import List, Optional, Protocol

from .errors import GradingServiceError, GradingTimeoutError, MalformedResponseError
from .grid import GuessGrid, split_by_lengths
from .history import History
from .models import Grade, GuessRecord, WordResult
from .notify import ChangeNotifier

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "failed to submit guess"


class SubmitState(Enum):
    IDLE = "idle"
    PENDING = "pending"


class Grader(Protocol):
    """What the submitter needs from a grading client."""

    async def grade(self, game_id: str, guess: str) -> List[Grade]: ...


class GuessSubmitter(ChangeNotifier):
    """
    Sends the typed guess for grading and folds the answer into History.

    Grading failures never escape: they end up in ``error`` as a message for
    the player, and the grid is left as it was so the guess can be fixed and
    sent again.
    """

    def __init__(
        self,
        game_id: str,
        grid: GuessGrid,
        history: History,
        grader: Grader,
        timeout_s: float = 15.0,
    ):
        super().__init__()
        self._game_id = game_id
        self._grid = grid
        self._history = history
        self._grader = grader
        self._timeout_s = timeout_s
        self._state = SubmitState.IDLE
        self._error: Optional[str] = None

    @property
    def state(self) -> SubmitState:
        return self._state

    @property
    def pending(self) -> bool:
        return self._state is SubmitState.PENDING

    @property
    def error(self) -> Optional[str]:
        """Message from the last failed submission, until the next request starts."""
        return self._error

    @property
    def history(self) -> History:
        return self._history

    def trigger(self) -> Optional["asyncio.Task[bool]"]:
        """
        Start grading the current grid.

        Must be called from a running event loop.

        Returns:
            The request task, or None when nothing was sent because a request
            is already in flight, the game is solved, or a slot is empty.
        """
        if self.pending:
            logger.debug("Submit ignored: a guess is already being graded")
            return None
        if self._history.solved:
            logger.debug("Submit ignored: game already solved")
            return None
        if not self._grid.is_complete():
            logger.debug("Submit ignored: grid incomplete")
            return None

        words = self._grid.word_texts()
        self._state = SubmitState.PENDING
        self._error = None
        self._notify()
        task = asyncio.get_running_loop().create_task(self._run(words))
        task.add_done_callback(self._settle)
        return task

    async def submit(self) -> bool:
        """Trigger and wait for the result. Returns True if a guess was graded."""
        task = self.trigger()
        if task is None:
            return False
        return await task

    def _settle(self, task: "asyncio.Task[bool]") -> None:
        # A task cancelled before its first step never enters _run.
        if task.cancelled() and self.pending:
            self._state = SubmitState.IDLE
            self._notify()

    async def _run(self, words: List[str]) -> bool:
        guess = " ".join(words)
        try:
            grades = await self._request(guess)
            record = self._build_record(words, grades)
        except GradingServiceError as e:
            logger.warning("Guess %r failed: %s", guess, e.message)
            self._error = e.message
            return False
        except Exception:
            logger.exception("Guess %r failed unexpectedly", guess)
            self._error = UNEXPECTED_ERROR_MESSAGE
            return False
        else:
            self._history.append(record)
            self._grid.reset()
            self._error = None
            logger.info("Guess %r graded (%d in history)", guess, len(self._history))
            return True
        finally:
            self._state = SubmitState.IDLE
            self._notify()

    async def _request(self, guess: str) -> List[Grade]:
        try:
            return await asyncio.wait_for(
                self._grader.grade(self._game_id, guess), timeout=self._timeout_s
            )
        except asyncio.TimeoutError as e:
            raise GradingTimeoutError(
                f"grading service did not respond within {self._timeout_s:g}s"
            ) from e

    def _build_record(self, words: List[str], grades: List[Grade]) -> GuessRecord:
        lengths = self._grid.word_lengths
        if len(grades) != sum(lengths):
            raise MalformedResponseError(
                f"malformed grading response: expected {sum(lengths)} grades, got {len(grades)}"
            )
        chunks = split_by_lengths(grades, lengths)
        return GuessRecord(
            words=tuple(
                WordResult(text=text, grades=tuple(chunk)) for text, chunk in zip(words, chunks)
            )
        )
