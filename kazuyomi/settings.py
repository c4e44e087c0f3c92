"""
Settings and configuration for Kazuyomi.

All values can be overridden through environment variables.
"""

import logging
import os

# Debug mode
DEBUG = os.environ.get("KAZUYOMI_DEBUG", "").lower() in ("1", "true", "yes")

# Logging level name, e.g. INFO or DEBUG
LOG_LEVEL = os.environ.get("KAZUYOMI_LOG_LEVEL", "DEBUG" if DEBUG else "WARNING").upper()

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Prefix that marks a chat message as a bot command, e.g. ".ns 123"
COMMAND_PREFIX = os.environ.get("KAZUYOMI_COMMAND_PREFIX", ".")

# What a command reply shows: kanji, reading or both
REPLY_FORMAT = os.environ.get("KAZUYOMI_REPLY_FORMAT", "both").lower()

# Script used for readings: hiragana, katakana or romaji
SCRIPT = os.environ.get("KAZUYOMI_SCRIPT", "hiragana").lower()


def configure_logging(level=None):
    """Configure root logging with the Kazuyomi format."""
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
