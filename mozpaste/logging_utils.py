#!/usr/bin/env python3
"""
Logging utilities for moz-paste.
Provides console output on stderr plus an optional rotating file logger.
"""

import os
import sys
import logging
from logging.handlers import RotatingFileHandler


def setup_logging(log_folder=None, log_basename='mozpaste', max_bytes=5*1024*1024, backup_count=10, verbose=False):
    """
    Configure the root logger.

    Args:
        log_folder: Folder for rotating log files (default: None, no log file)
        log_basename: Base name for log files (default: 'mozpaste')
        max_bytes: Maximum size of the log file before rotation in bytes (default: 5MB)
        backup_count: Number of backup files to keep (default: 10)
        verbose: Whether to show debug output in the console

    Returns:
        The configured root logger
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Clear existing handlers to avoid duplication
    logger.handlers = []

    if log_folder:
        os.makedirs(log_folder, exist_ok=True)
        log_file = os.path.join(log_folder, f"{log_basename}_0.log")
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    # stdout is reserved for the paste URL
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.DEBUG if verbose else logging.WARNING)

    return logger


def get_logger(name):
    """
    Get a named logger.

    Args:
        name: The name for the logger

    Returns:
        A named logger
    """
    return logging.getLogger(name)
