#!/usr/bin/env python3
"""
TextSub Entry Point Script

This script initializes the CLI handler and converts one document to subtitles.
"""

import sys
from textsub.cli import CLIHandler

if __name__ == "__main__":
    if sys.version_info < (3, 8):
        sys.stderr.write("TextSub requires Python 3.8 or later.\n")
        sys.exit(1)

    cli = CLIHandler()
    cli.run()
