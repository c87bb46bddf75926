# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Exceptions raised by guessgrid.
"""

from typing import Optional


class GuessGridError(Exception):
    """Base class for all guessgrid errors."""

    pass


class InvalidWordLengthsError(GuessGridError, ValueError):
    """Raised when a game is created with an empty or non-positive word length list."""

    pass


class GradingServiceError(GuessGridError):
    """Raised when the grading service rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MalformedResponseError(GradingServiceError):
    """Raised when a success response does not match the expected shape."""

    pass


class GradingTimeoutError(GradingServiceError):
    """Raised when the grading service does not answer in time."""

    pass
