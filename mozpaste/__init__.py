#!/usr/bin/env python3
"""
moz-paste - upload files to paste.mozilla.org from the command line.
"""

__version__ = "1.0.0"
