#!/usr/bin/env python3
"""
Request types and expiry codes for paste uploads.
"""

from dataclasses import dataclass
from types import MappingProxyType

DEFAULT_EXPIRY = "once"

# CLI expiry code -> value of the "expires" form field
EXPIRY_TOKENS = MappingProxyType({
    "once": "onetime",
    "1h": "3600",
    "1d": "86400",
    "1w": "604800",
    "21d": "2073600",
})

SUPPORTED_EXPIRY = tuple(EXPIRY_TOKENS)


def expiry_token(code: str) -> str:
    """
    Translate an expiry code into the token the service expects.

    Raises:
        KeyError: If the code is not one of SUPPORTED_EXPIRY
    """
    return EXPIRY_TOKENS[code]


@dataclass(frozen=True)
class PasteRequest:
    """A single paste: file content, expiry code and lexer tag."""

    content: str
    expiry: str
    language: str

    @property
    def expires(self) -> str:
        return expiry_token(self.expiry)
