#!/usr/bin/env python3
"""
Run script for post-card.

Provides a convenient entry point to render a card without installing the
`post-card` console script.
"""

import sys

from post_card.cli import main


if __name__ == "__main__":
    sys.exit(main())
