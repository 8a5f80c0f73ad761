#!/usr/bin/env python3
"""
Command Handlers Module

Contains handler functions for each CLI command.
Separates command routing from business logic.
"""

import logging
from typing import Optional

import requests

from .paste_client import PasteClient
from .exceptions import PasteError, ValidationError
from .languages import SUPPORTED_LANGUAGES
from .models import SUPPORTED_EXPIRY
from .services import UploadService
from .utils import colorize_link, print_info, print_success, print_multi_column_list

logger = logging.getLogger("mozpaste")


def handle_list_languages_command() -> None:
    """Handle the list languages command."""
    print_info("Supported languages:")
    print_multi_column_list(list(SUPPORTED_LANGUAGES))


def handle_list_expiry_command() -> None:
    """Handle the list expiry times command."""
    print_info(f"Supported expire time: {', '.join(SUPPORTED_EXPIRY)}")


def report_validation_error(error: ValidationError) -> None:
    """
    Print the rejected value and everything that would have been accepted.

    Args:
        error: The validation failure to report
    """
    print_info(f"Unsupported {error.kind}: {error.value}")
    print_info(f"Supported {error.allowed_label}: {', '.join(error.allowed)}")


def handle_upload_command(
    client: PasteClient,
    file_path: str,
    expiry: str,
    language: Optional[str] = None,
) -> int:
    """
    Handle the paste upload command.

    Args:
        client: Paste client instance
        file_path: File whose content is pasted
        expiry: Expiry code
        language: Optional explicit lexer tag

    Returns:
        int: Process exit code (0 on success)
    """
    upload_service = UploadService(client)

    try:
        url = upload_service.upload(file_path, expiry, language)
    except ValidationError as e:
        report_validation_error(e)
        return 1
    except KeyboardInterrupt:
        logger.warning(f"Upload of {file_path} cancelled by user")
        return 130
    except (PasteError, OSError, UnicodeDecodeError, requests.exceptions.RequestException) as e:
        logger.error(f"Upload failed: {e}")
        return 1

    print_success(f"Paste url: {colorize_link(url)}")
    return 0
