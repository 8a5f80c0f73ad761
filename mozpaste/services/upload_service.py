#!/usr/bin/env python3
"""
Upload Service Module

Turns a file path and CLI choices into a validated paste and uploads it.
"""

import os
import logging
from typing import Optional

from ..paste_client import PasteClient
from ..exceptions import ValidationError
from ..languages import SUPPORTED_LANGUAGES, is_supported_language, resolve_language
from ..models import EXPIRY_TOKENS, SUPPORTED_EXPIRY, PasteRequest
from ..utils import format_size

logger = logging.getLogger("mozpaste")


class UploadService:
    """Service for handling paste upload operations."""

    def __init__(self, client: PasteClient):
        """
        Initialize the upload service.

        Args:
            client: Paste client instance
        """
        self.client = client

    @staticmethod
    def validate_expiry(expiry: str) -> None:
        if expiry not in EXPIRY_TOKENS:
            raise ValidationError("expire time", expiry, SUPPORTED_EXPIRY)

    @staticmethod
    def validate_language(language: Optional[str]) -> None:
        if language is not None and not is_supported_language(language):
            raise ValidationError("language", language, SUPPORTED_LANGUAGES, "languages")

    def read_content(self, file_path: str) -> str:
        """
        Read the file to paste as UTF-8 text.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        if not os.path.exists(file_path):
            logger.error(f"File not found: {file_path}")
            raise FileNotFoundError(f"File not found: {file_path}")

        # newline="" keeps CRLF and lone CR as they are on disk
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            content = f.read()

        logger.debug(f"Read {format_size(len(content.encode('utf-8')))} from {file_path}")
        return content

    def build_request(
        self, file_path: str, expiry: str, language: Optional[str] = None
    ) -> PasteRequest:
        """
        Validate the arguments and assemble the paste.

        Arguments are checked before the file is opened, so a bad expiry or
        language never causes I/O or network traffic.

        Args:
            file_path: Path to the file to paste
            expiry: Expiry code, one of SUPPORTED_EXPIRY
            language: Explicit lexer tag, or None to detect it from the file name

        Returns:
            PasteRequest ready for upload
        """
        self.validate_expiry(expiry)
        self.validate_language(language)

        content = self.read_content(file_path)
        lexer = resolve_language(os.path.basename(file_path), language)
        if language is None:
            logger.debug(f"Detected language '{lexer}' for {file_path}")

        return PasteRequest(content=content, expiry=expiry, language=lexer)

    def upload(
        self, file_path: str, expiry: str, language: Optional[str] = None
    ) -> str:
        """
        Upload a file as a paste.

        Returns:
            str: The paste URL
        """
        request = self.build_request(file_path, expiry, language)
        logger.info(
            f"Uploading {file_path} (lexer={request.language}, expires={request.expires})"
        )
        return self.client.upload(request)
