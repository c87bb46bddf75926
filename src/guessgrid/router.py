# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Key events to grid edits."""

import asyncio
import logging
import re
from typing import Optional

from .grid import GuessGrid
from .submitter import GuessSubmitter

logger = logging.getLogger(__name__)

BACKSPACE = "Backspace"
ENTER = "Enter"


class InputRouter:
    """
    Applies one key press at a time to the grid.

    Recognised keys are single characters matching the character class,
    "Backspace" and "Enter". Anything else is dropped without effect.
    """

    def __init__(self, grid: GuessGrid, submitter: GuessSubmitter, char_class: "re.Pattern[str]"):
        self._grid = grid
        self._submitter = submitter
        self._char_class = char_class

    def handle_key(self, key: str) -> Optional["asyncio.Task[bool]"]:
        """
        Handle one key press.

        Returns:
            The grading task when Enter sent a guess, otherwise None.
        """
        if self._submitter.history.solved:
            return None
        if key == ENTER:
            return self._submitter.trigger()
        if key == BACKSPACE:
            self._grid.erase()
        elif len(key) == 1 and self._char_class.fullmatch(key):
            if not self._grid.write(key.lower()):
                logger.debug("Key %r ignored: grid full", key)
        else:
            logger.debug("Key %r ignored", key)
        return None
