#!/usr/bin/env python3
"""
Main CLI for the Nerd Font Installer
====================================

This CLI provides commands to list, download and install Nerd Fonts.
Installing the package also provides the ``nerd-font-installer`` command.
"""

import logging
import sys

logger = logging.getLogger(__name__)

try:
    from nerdfonts.cli import cli
except ImportError as e:
    logging.basicConfig(level=logging.INFO)
    logger.exception(f"Import failed: {e}")
    logger.exception("Make sure the package is installed, e.g. with: pip install -e .")
    sys.exit(1)


if __name__ == "__main__":
    cli()
