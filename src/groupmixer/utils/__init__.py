"""Utility helpers shared across Group Mixer."""

# Group Mixer
# Copyright (C) 2025  Group Mixer developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "GROUPMIXER_LOG_LEVEL"


def _default_level() -> int:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    return getattr(logging, level_name, logging.WARNING)


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger writing to stderr.

    The level defaults to ``GROUPMIXER_LOG_LEVEL`` (WARNING when unset).
    Calling this twice for the same name does not add a second handler.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_default_level())
        logger.propagate = False
    return logger


def set_log_level(level: int) -> None:
    """Change the level of every Group Mixer logger already created."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("groupmixer") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
