# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Level control for the ``guessgrid`` logger hierarchy."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "GUESSGRID_LOG_LEVEL"

_root = logging.getLogger("guessgrid")
if _root.level == logging.NOTSET:
    _root.setLevel(logging.WARNING)


def _parse_level(level: str | int) -> str | int:
    if isinstance(level, int):
        return level
    level = level.strip()
    return int(level) if level.isdigit() else level.upper()


def configure_logging(log_level: str | int | None = None) -> None:
    """
    Set the level of every guessgrid logger.

    ``$GUESSGRID_LOG_LEVEL`` wins over ``log_level``. Names are case-insensitive
    and numeric strings are accepted; an unknown name raises ValueError.
    """
    level = os.getenv(LOG_LEVEL_ENV) or log_level
    if level is not None:
        _root.setLevel(_parse_level(level))
