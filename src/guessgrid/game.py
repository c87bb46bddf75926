# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
One game session: grid, history, submitter and key router wired together.

Example:
    >>> async with GradingClient.from_config(config) as client:
    ...     game = await Game.start(client, config)
    ...     for key in "crane":
    ...         game.press(key)
    ...     task = game.press("Enter")
    ...     await task
    ...     print(game.history.latest)
"""

import asyncio
import logging
from typing import Optional, Sequence

from .client import GradingClient
from .config import GuessGridConfig
from .grid import GuessGrid
from .history import History
from .router import InputRouter
from .submitter import Grader, GuessSubmitter

logger = logging.getLogger(__name__)


class Game:
    """A single game against the grading service."""

    def __init__(
        self,
        game_id: str,
        word_lengths: Sequence[int],
        grader: Grader,
        config: Optional[GuessGridConfig] = None,
    ):
        self.config = config or GuessGridConfig()
        self.game_id = game_id
        self.grid = GuessGrid(word_lengths)
        self.history = History(self.grid.word_lengths)
        self.submitter = GuessSubmitter(
            game_id,
            self.grid,
            self.history,
            grader,
            timeout_s=self.config.request_timeout_s,
        )
        self.router = InputRouter(self.grid, self.submitter, self.config.char_class())

    @classmethod
    async def start(
        cls,
        client: GradingClient,
        config: Optional[GuessGridConfig] = None,
        user: Optional[str] = None,
    ) -> "Game":
        """
        Ask the server for a new game and build a session for it.

        Raises:
            GradingServiceError: If the server could not create a game.
        """
        config = config or GuessGridConfig()
        result = await client.new_game(user=user or config.user)
        logger.info("Started game %s with word lengths %s", result.id, result.word_lengths)
        return cls(result.id, result.word_lengths, client, config)

    @property
    def word_lengths(self):
        return self.grid.word_lengths

    def press(self, key: str) -> Optional["asyncio.Task[bool]"]:
        return self.router.handle_key(key)

    @property
    def solved(self) -> bool:
        return self.history.solved

    @property
    def pending(self) -> bool:
        return self.submitter.pending

    @property
    def error(self) -> Optional[str]:
        return self.submitter.error
