# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Runtime configuration for a guessgrid client.

Values default to environment variables so the same code runs against a local
grading server or a deployed one without changes:

    GUESSGRID_BACKEND_URL    Base URL of the grading API (default: http://localhost:3000/api/v1)
    GUESSGRID_ALLOWED_CHARS  Regex character class accepted as letter input (default: [a-z0-9])
    GUESSGRID_TIMEOUT_S      Seconds before an outstanding request is abandoned (default: 15)
    GUESSGRID_USER           Optional user whose library seeds new games
"""

import os
import re
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_BACKEND_URL = "http://localhost:3000/api/v1"
DEFAULT_ALLOWED_CHARS = "[a-z0-9]"
DEFAULT_TIMEOUT_S = 15.0


@dataclass
class GuessGridConfig:
    """Client-side settings fixed for the lifetime of a game."""

    backend_url: str = field(
        default_factory=lambda: os.environ.get("GUESSGRID_BACKEND_URL", DEFAULT_BACKEND_URL)
    )
    # Matched with re.fullmatch against a single key, case-insensitively.
    allowed_chars: str = field(
        default_factory=lambda: os.environ.get("GUESSGRID_ALLOWED_CHARS", DEFAULT_ALLOWED_CHARS)
    )
    request_timeout_s: float = field(
        default_factory=lambda: float(os.environ.get("GUESSGRID_TIMEOUT_S", DEFAULT_TIMEOUT_S))
    )
    user: Optional[str] = field(default_factory=lambda: os.environ.get("GUESSGRID_USER"))

    def __post_init__(self):
        try:
            self._char_class = re.compile(self.allowed_chars, re.IGNORECASE)
        except re.error as e:
            raise ValueError(f"Invalid allowed_chars pattern {self.allowed_chars!r}: {e}") from e
        self.request_timeout_s = float(self.request_timeout_s)
        if self.request_timeout_s <= 0:
            raise ValueError(f"request_timeout_s must be positive, got {self.request_timeout_s}")
        self.backend_url = self.backend_url.rstrip("/")

    def char_class(self) -> "re.Pattern[str]":
        """Compiled pattern for accepted letter keys."""
        return self._char_class
