# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
The guess grid: editable slots grouped into words plus one flat cursor.

Slots are addressed either by a flat position over all words concatenated or
by a ``(word, slot)`` coordinate. Translation is pure prefix-sum arithmetic, so
typing past the end of one word moves into the next one automatically.

Example:
    >>> grid = GuessGrid([3, 2])
    >>> grid.to_coordinate(4)
    (1, 1)
    >>> grid.from_coordinate(1, 0)
    3
    >>> for c in "abcde":
    ...     _ = grid.write(c)
    >>> grid.guess_text()
    'abc de'
"""

from bisect import bisect_right
from itertools import accumulate
from typing import List, Optional, Sequence, Tuple, TypeVar

from .errors import InvalidWordLengthsError
from .notify import ChangeNotifier

T = TypeVar("T")


def validate_word_lengths(word_lengths: Sequence[int]) -> Tuple[int, ...]:
    """Return word lengths as a tuple, rejecting empty or non-positive input."""
    lengths = tuple(word_lengths)
    if not lengths:
        raise InvalidWordLengthsError("A game needs at least one word")
    for n in lengths:
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise InvalidWordLengthsError(f"Word lengths must be positive integers, got {lengths}")
    return lengths


def split_by_lengths(items: Sequence[T], lengths: Sequence[int]) -> List[List[T]]:
    """
    Chunk a flat sequence into consecutive runs of the given lengths.

    Raises:
        ValueError: If ``len(items)`` differs from ``sum(lengths)``.
    """
    if len(items) != sum(lengths):
        raise ValueError(f"Expected {sum(lengths)} items, got {len(items)}")
    chunks = []
    start = 0
    for n in lengths:
        chunks.append(list(items[start : start + n]))
        start += n
    return chunks


class GuessGrid(ChangeNotifier):
    """
    Slots for the guess being typed, and the cursor over them.

    The cursor always satisfies ``0 <= cursor <= total_slots``. It equals
    ``total_slots`` when every slot has been typed, resting one past the end.
    """

    def __init__(self, word_lengths: Sequence[int]):
        super().__init__()
        self._word_lengths = validate_word_lengths(word_lengths)
        # _ends[i] is the flat position one past the last slot of word i.
        self._ends = tuple(accumulate(self._word_lengths))
        self._total = self._ends[-1]
        self._slots: List[Optional[str]] = [None] * self._total
        self._cursor = 0

    @property
    def word_lengths(self) -> Tuple[int, ...]:
        return self._word_lengths

    @property
    def total_slots(self) -> int:
        return self._total

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def words(self) -> Tuple[Tuple[Optional[str], ...], ...]:
        """Current slot contents grouped by word."""
        return tuple(tuple(w) for w in split_by_lengths(self._slots, self._word_lengths))

    # ---------- Coordinate translation ----------

    def to_coordinate(self, position: int) -> Tuple[int, int]:
        """
        Translate a flat position to ``(word, slot)``.

        ``total_slots`` maps to the last word with ``slot == len(word)``.

        Raises:
            IndexError: If ``position`` is outside ``[0, total_slots]``.
        """
        if not 0 <= position <= self._total:
            raise IndexError(f"Position {position} outside [0, {self._total}]")
        if position == self._total:
            last = len(self._word_lengths) - 1
            return last, self._word_lengths[last]
        word = bisect_right(self._ends, position)
        start = self._ends[word - 1] if word else 0
        return word, position - start

    def from_coordinate(self, word: int, slot: int) -> int:
        """
        Translate ``(word, slot)`` to a flat position.

        Raises:
            IndexError: If the word does not exist or ``slot`` is outside
                ``[0, word_lengths[word]]``.
        """
        if not 0 <= word < len(self._word_lengths):
            raise IndexError(f"Word {word} outside [0, {len(self._word_lengths)})")
        if not 0 <= slot <= self._word_lengths[word]:
            raise IndexError(f"Slot {slot} outside [0, {self._word_lengths[word]}] for word {word}")
        start = self._ends[word - 1] if word else 0
        return start + slot

    # ---------- Reads ----------

    def slot(self, word: int, slot: int) -> Optional[str]:
        if not 0 <= word < len(self._word_lengths) or not 0 <= slot < self._word_lengths[word]:
            raise IndexError(f"No slot ({word}, {slot})")
        return self._slots[self.from_coordinate(word, slot)]

    def is_complete(self) -> bool:
        """True when every slot holds a character."""
        return all(c is not None for c in self._slots)

    def word_texts(self) -> List[str]:
        """Per-word strings; empty slots are left out."""
        return ["".join(c for c in w if c is not None) for w in self.words]

    def guess_text(self) -> str:
        return " ".join(self.word_texts())

    # ---------- Edits ----------

    def write(self, char: str) -> bool:
        """
        Put ``char`` at the cursor and advance it.

        Returns:
            False, with nothing changed, when the cursor is already past the
            last slot.
        """
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        if self._cursor >= self._total:
            return False
        self._slots[self._cursor] = char
        self._cursor += 1
        self._notify()
        return True

    def erase(self) -> None:
        """Step the cursor back (never below 0) and clear the slot under it."""
        self._cursor = max(self._cursor - 1, 0)
        self._slots[self._cursor] = None
        self._notify()

    def reset(self) -> None:
        """Clear every slot and move the cursor to 0."""
        self._slots = [None] * self._total
        self._cursor = 0
        self._notify()
