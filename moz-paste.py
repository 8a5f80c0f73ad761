#!/usr/bin/env python3
"""
moz-paste - Command Line Interface
Upload a file to paste.mozilla.org and print the paste URL
"""

import sys

from mozpaste import cli

if __name__ == "__main__":
    sys.exit(cli.main())
