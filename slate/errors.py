from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class SlateError(Exception):
    """Base class for errors that stop a slate command."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


class ConfigError(SlateError):
    """The site config file could not be read or decoded."""


class PreconditionError(SlateError):
    """A required directory or template is missing."""


class LoadError(SlateError):
    """A discovered content file could not be read or converted."""


class RenderError(SlateError):
    """Writing an output file or executing a template failed."""
