#!/usr/bin/env python3
"""
Services package initialization.
"""

from .upload_service import UploadService

__all__ = ["UploadService"]
