#!/usr/bin/env python3
"""
Exceptions raised by the paste uploader.
"""

from typing import Iterable, Optional


class PasteError(Exception):
    """Base class for paste upload failures."""


class ValidationError(PasteError):
    """An argument is outside its accepted set of values."""

    def __init__(self, kind: str, value: str, allowed: Iterable[str], allowed_label: Optional[str] = None):
        self.kind = kind
        self.allowed_label = allowed_label or kind
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(f"Unsupported {kind}: {value}")


class TokenNotFoundError(PasteError):
    """The landing page did not contain the anti-forgery token."""
