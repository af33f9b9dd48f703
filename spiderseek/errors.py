# File: spiderseek/errors.py
"""spiderseek.errors: иерархия исключений инжектора."""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import Union

__all__ = ["SpiderseekError", "ConfigurationError", "RootNotFoundError"]


class SpiderseekError(Exception):
    """Base class for every error raised by spiderseek itself."""


class ConfigurationError(SpiderseekError, ValueError):
    """Invalid configuration: empty site id, malformed matcher, unreadable config file."""


class RootNotFoundError(SpiderseekError, FileNotFoundError):
    """The build output directory does not exist or is not a directory."""

    def __init__(self, root: Union[str, Path]) -> None:
        super().__init__(errno.ENOENT, os.strerror(errno.ENOENT), str(root))
