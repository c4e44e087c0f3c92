"""
Chat command handling for Kazuyomi.

Turns a bot command such as ".ns 12345" into the reply text. Sending and
receiving messages is left to the caller; every function here maps text
to an optional reply.
"""

import logging
from typing import Callable, Dict, Optional

from kazuyomi import settings
from kazuyomi.characters import SCRIPTS, convert_script
from kazuyomi.numbers import Spelling, spell_full

logger = logging.getLogger(__name__)

DESCRIPTION = "Spells out numbers in Japanese."
COMMANDS = {
    "ns": "spells out the specified number",
}


def format_reply(spelling: Spelling, reply_format: Optional[str] = None,
                 script: Optional[str] = None) -> str:
    """
    Format a spelling for a chat reply.

    Args:
        spelling: Result of spell_full().
        reply_format: 'kanji', 'reading' or 'both'. Defaults to settings.
        script: Script for the reading. Defaults to settings.

    Returns:
        Reply text, e.g. "一万 (いちまん)".
    """
    reply_format = reply_format or settings.REPLY_FORMAT
    script = script or settings.SCRIPT
    if script not in SCRIPTS:
        logger.warning(f"Unknown script {script!r}, using hiragana")
        script = "hiragana"
    reading = convert_script(spelling.reading, script)

    if reply_format == "kanji":
        return spelling.kanji
    if reply_format == "reading":
        return reading
    return f"{spelling.kanji} ({reading})"


def number_spell(tail: str) -> Optional[str]:
    """Reply to the ns command, None when the argument is not a number."""
    spelling = spell_full(tail)
    if spelling is None:
        return None
    return format_reply(spelling)


HANDLERS: Dict[str, Callable[[str], Optional[str]]] = {
    "ns": number_spell,
}


def handle_command(command: str, tail: str) -> Optional[str]:
    """
    Dispatch a bot command.

    Args:
        command: Command name without prefix, e.g. 'ns'.
        tail: Everything after the command name.

    Returns:
        Reply text, or None if there is nothing to reply.
    """
    handler = HANDLERS.get(command.lower())
    if handler is None:
        return None

    reply = handler(tail)
    if reply is not None:
        logger.info(f"{command}: {tail!r} -> {reply}")
    return reply


def on_message(text: str, prefix: Optional[str] = None) -> Optional[str]:
    """
    Reply to a chat message if it is a known bot command.

    Example:
        >>> on_message(".ns 300", prefix=".")
        '三百 (さんびゃく)'
    """
    if prefix is None:
        prefix = settings.COMMAND_PREFIX
    if not text or not prefix or not text.startswith(prefix):
        return None

    parts = text[len(prefix):].split(None, 1)
    if not parts:
        return None
    command = parts[0]
    tail = parts[1] if len(parts) > 1 else ""
    return handle_command(command, tail)
