# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Data models for graded guesses.

A guess covers every target word at once. The grading service answers with one
Grade per letter, which is folded into a GuessRecord holding one WordResult per
target word.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class Grade(str, Enum):
    """Outcome for a single letter of a guess."""

    CORRECT = "Correct"  # Letter is in the correct position
    WRONG_PLACE = "WrongPlace"  # Letter is in the word but wrong position
    INCORRECT = "Incorrect"  # Letter is not in the word

    @property
    def rank(self) -> int:
        """Strength of the grade; a letter keeps its strongest grade across guesses."""
        return _GRADE_RANK[self]


_GRADE_RANK = {
    Grade.INCORRECT: 0,
    Grade.WRONG_PLACE: 1,
    Grade.CORRECT: 2,
}


@dataclass(frozen=True)
class WordResult:
    """Graded result for one target word."""

    text: str
    grades: Tuple[Grade, ...]

    def __post_init__(self):
        if len(self.text) != len(self.grades):
            raise ValueError(
                f"WordResult {self.text!r} has {len(self.text)} letters but {len(self.grades)} grades"
            )

    @property
    def solved(self) -> bool:
        return all(g is Grade.CORRECT for g in self.grades)


@dataclass(frozen=True)
class GuessRecord:
    """Graded result of one submitted guess, one WordResult per target word."""

    words: Tuple[WordResult, ...]

    def __iter__(self) -> Iterator[WordResult]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> WordResult:
        return self.words[index]

    @property
    def text(self) -> str:
        """The guess as it was sent: words joined by single spaces."""
        return " ".join(w.text for w in self.words)

    @property
    def solved(self) -> bool:
        return all(w.solved for w in self.words)
