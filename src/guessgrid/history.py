# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Append-only log of graded guesses for one game."""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .grid import validate_word_lengths
from .models import Grade, GuessRecord
from .notify import ChangeNotifier


class History(ChangeNotifier):
    """
    Graded guesses in submission order.

    Records are frozen dataclasses and the log only exposes tuples, so nothing
    already appended can be edited, removed or reordered.
    """

    def __init__(self, word_lengths: Sequence[int]):
        super().__init__()
        self._word_lengths = validate_word_lengths(word_lengths)
        self._records: List[GuessRecord] = []

    def append(self, record: GuessRecord) -> None:
        """
        Add a graded guess.

        Raises:
            ValueError: If the record's shape does not match the game's word lengths.
        """
        if len(record) != len(self._word_lengths):
            raise ValueError(
                f"Record has {len(record)} words, game has {len(self._word_lengths)}"
            )
        for i, (word, expected) in enumerate(zip(record, self._word_lengths)):
            if len(word.grades) != expected:
                raise ValueError(f"Word {i} has {len(word.grades)} grades, expected {expected}")
        self._records.append(record)
        self._notify()

    @property
    def records(self) -> Tuple[GuessRecord, ...]:
        return tuple(self._records)

    @property
    def latest(self) -> Optional[GuessRecord]:
        return self._records[-1] if self._records else None

    @property
    def solved(self) -> bool:
        """True once a guess got every letter of every word right."""
        return self.latest is not None and self.latest.solved

    def letter_grades(self) -> Dict[str, Grade]:
        """Strongest grade seen for each guessed letter, for keyboard hints."""
        best: Dict[str, Grade] = {}
        for record in self._records:
            for word in record:
                for letter, grade in zip(word.text, word.grades):
                    current = best.get(letter)
                    if current is None or grade.rank > current.rank:
                        best[letter] = grade
        return best

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[GuessRecord]:
        return iter(tuple(self._records))

    def __getitem__(self, index: int) -> GuessRecord:
        return self._records[index]
