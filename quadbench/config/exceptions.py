# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Failures of sweep configuration loading.

Both carry the offending path so the CLI can report it as a structured log
field rather than parsing it back out of the message.
"""

from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    """A sweep config could not be turned into a QuadBenchConfig."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigLoadError(ConfigError):
    """The file is missing, unreadable, not YAML, or not a YAML mapping."""


class ConfigValidationError(ConfigError):
    """
    The YAML parsed but the schema rejected it.

    `fields` lists the dotted location of every rejected value, e.g.
    "sweep.workers", in the order pydantic reported them.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        fields: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message, path)
        self.fields = fields
