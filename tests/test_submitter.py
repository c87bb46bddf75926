# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Tests for the guess submission lifecycle."""

import asyncio

import pytest

from conftest import C, I, W, FakeGrader
from guessgrid.errors import GradingServiceError
from guessgrid.grid import GuessGrid
from guessgrid.history import History
from guessgrid.submitter import UNEXPECTED_ERROR_MESSAGE, GuessSubmitter, SubmitState


def make_submitter(lengths, grader, timeout_s=15.0):
    grid = GuessGrid(lengths)
    history = History(lengths)
    return grid, history, GuessSubmitter("game-1", grid, history, grader, timeout_s=timeout_s)


def fill(grid, text):
    for c in text:
        grid.write(c)


class TestSuccess:
    @pytest.mark.asyncio
    async def test_grades_split_by_requested_lengths(self):
        grades = [C, I, W, I, C, W, W, I, C]
        grader = FakeGrader(grades)
        grid, history, submitter = make_submitter([5, 4], grader)
        fill(grid, "abbeyroad")

        assert await submitter.submit() is True

        assert grader.calls == [("game-1", "abbey road")]
        (entry,) = history.records
        assert entry[0].text == "abbey"
        assert entry[0].grades == tuple(grades[0:5])
        assert entry[1].text == "road"
        assert entry[1].grades == tuple(grades[5:9])

    @pytest.mark.asyncio
    async def test_success_resets_grid_and_clears_error(self):
        grader = FakeGrader(GradingServiceError("nope"), [I, I, I])
        grid, history, submitter = make_submitter([3], grader)
        fill(grid, "abc")
        await submitter.submit()
        assert submitter.error == "nope"

        await submitter.submit()

        assert submitter.error is None
        assert grid.cursor == 0
        assert grid.words == ((None, None, None),)
        assert submitter.state is SubmitState.IDLE

    @pytest.mark.asyncio
    async def test_history_keeps_submission_order(self):
        grader = FakeGrader([I, I], [W, I], [C, C])
        grid, history, submitter = make_submitter([2], grader)
        for text in ["ab", "cd", "ef"]:
            fill(grid, text)
            await submitter.submit()
        first = history[0]
        assert [r.text for r in history] == ["ab", "cd", "ef"]
        assert history[0] is first
        assert first[0].grades == (I, I)


class TestGate:
    @pytest.mark.asyncio
    async def test_incomplete_grid_sends_nothing(self):
        grader = FakeGrader()
        grid, history, submitter = make_submitter([3, 3], grader)
        fill(grid, "abc")

        assert submitter.trigger() is None
        assert await submitter.submit() is False

        assert grader.calls == []
        assert grid.words == (("a", "b", "c"), (None, None, None))
        assert grid.cursor == 3
        assert len(history) == 0

    @pytest.mark.asyncio
    async def test_second_trigger_while_pending_is_rejected(self):
        grader = FakeGrader([C, C])
        grader.gate = asyncio.Event()
        grid, history, submitter = make_submitter([2], grader)
        fill(grid, "ab")

        task = submitter.trigger()
        assert task is not None
        assert submitter.pending
        assert submitter.trigger() is None
        await asyncio.sleep(0)
        assert submitter.trigger() is None

        grader.gate.set()
        assert await task is True
        assert len(grader.calls) == 1
        assert len(history) == 1
        assert not submitter.pending

    @pytest.mark.asyncio
    async def test_solved_game_rejects_submissions(self):
        grader = FakeGrader([C, C])
        grid, history, submitter = make_submitter([2], grader)
        fill(grid, "ab")
        await submitter.submit()
        assert history.solved

        fill(grid, "ab")
        assert submitter.trigger() is None
        assert len(grader.calls) == 1

    @pytest.mark.asyncio
    async def test_edits_while_pending_do_not_change_request(self):
        grader = FakeGrader([I, I])
        grader.gate = asyncio.Event()
        grid, history, submitter = make_submitter([2], grader)
        fill(grid, "ab")
        task = submitter.trigger()
        grid.erase()
        grid.write("z")
        grader.gate.set()
        await task
        assert grader.calls == [("game-1", "ab")]
        assert history[0].text == "ab"


class TestFailure:
    @pytest.mark.asyncio
    async def test_service_error_keeps_grid(self):
        grader = FakeGrader(GradingServiceError("unknown id", status_code=404))
        grid, history, submitter = make_submitter([3], grader)
        fill(grid, "abc")

        assert await submitter.submit() is False

        assert submitter.error == "unknown id"
        assert grid.words == (("a", "b", "c"),)
        assert grid.cursor == 3
        assert len(history) == 0
        assert submitter.state is SubmitState.IDLE

    @pytest.mark.asyncio
    @pytest.mark.parametrize("grades", [[C, C], [C, C, C, C]])
    async def test_wrong_grade_count_is_failure(self, grades):
        grader = FakeGrader(grades)
        grid, history, submitter = make_submitter([3], grader)
        fill(grid, "abc")

        assert await submitter.submit() is False

        assert submitter.error == f"malformed grading response: expected 3 grades, got {len(grades)}"
        assert len(history) == 0
        assert grid.cursor == 3

    @pytest.mark.asyncio
    async def test_timeout_sets_timeout_error(self):
        grader = FakeGrader([C])
        grader.gate = asyncio.Event()
        grid, history, submitter = make_submitter([1], grader, timeout_s=0.01)
        fill(grid, "a")

        assert await submitter.submit() is False

        assert submitter.error == "grading service did not respond within 0.01s"
        assert not submitter.pending
        assert grid.cursor == 1

    @pytest.mark.asyncio
    async def test_error_cleared_when_next_request_starts(self):
        grader = FakeGrader(GradingServiceError("boom"), [I])
        grader.gate = None
        grid, history, submitter = make_submitter([1], grader)
        fill(grid, "a")
        await submitter.submit()
        assert submitter.error == "boom"

        grader.gate = asyncio.Event()
        task = submitter.trigger()
        assert submitter.error is None
        grader.gate.set()
        await task

    @pytest.mark.asyncio
    async def test_unexpected_grader_error_is_recoverable(self):
        grader = FakeGrader(RuntimeError("boom"), [C, C])
        grid, history, submitter = make_submitter([2], grader)
        fill(grid, "ab")

        assert await submitter.submit() is False

        assert submitter.error == UNEXPECTED_ERROR_MESSAGE
        assert not submitter.pending
        assert grid.cursor == 2
        assert await submitter.submit() is True
        assert history.solved

    @pytest.mark.asyncio
    async def test_cancel_in_flight_returns_to_idle(self):
        grader = FakeGrader([C, C])
        grader.gate = asyncio.Event()
        grid, history, submitter = make_submitter([2], grader)
        fill(grid, "ab")
        task = submitter.trigger()
        await asyncio.sleep(0)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert not submitter.pending
        assert submitter.error is None
        assert grid.cursor == 2
        assert len(history) == 0
        grader.gate.set()
        assert await submitter.submit() is True

    @pytest.mark.asyncio
    async def test_cancel_before_start_returns_to_idle(self):
        grader = FakeGrader([C, C])
        grid, history, submitter = make_submitter([2], grader)
        fill(grid, "ab")
        states = []
        submitter.subscribe(lambda s: states.append(s.state))

        task = submitter.trigger()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert grader.calls == []
        assert states == [SubmitState.PENDING, SubmitState.IDLE]
        assert await submitter.submit() is True


class TestNotifications:
    @pytest.mark.asyncio
    async def test_state_transitions_notified(self):
        grader = FakeGrader([I])
        grid, history, submitter = make_submitter([1], grader)
        states = []
        submitter.subscribe(lambda s: states.append(s.state))
        fill(grid, "a")
        await submitter.submit()
        assert states == [SubmitState.PENDING, SubmitState.IDLE]
