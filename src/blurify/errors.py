"""
Exceptions raised by the blur pipeline.
"""
from __future__ import annotations


class BlurError(Exception):
    """Base class for all blurify errors."""


class ConfigurationError(BlurError, ValueError):
    """Blur options are inconsistent (even kernel size, bad sigma, ...)."""


class InvalidFilter(BlurError, ValueError):
    """Requested filter kind is not one of the supported families."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid filter type: {value!r}")
