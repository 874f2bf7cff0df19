"""Command table for the cleanup toolbar.

• @command(...) registers a transform under an action identifier
• dispatch() runs a registered transform against a ``BufferController``
• list_commands() returns the toolbar entries in registration order
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List

from logic.buffer_controller import BufferController
from utils.text_cleanup import clean_formatting, fix_spacing, sentence_case, title_case

logger = logging.getLogger(__name__)

__all__ = ["Command", "command", "dispatch", "get_command", "list_commands"]


@dataclass(frozen=True)
class Command:
    name: str
    label: str
    handler: Callable[[str], str]
    help: str = ""


_COMMAND_REGISTRY: Dict[str, Command] = {}  # name -> command


def command(*, name: str, label: str, help: str = ""):
    """Decorator registering a ``str -> str`` transform as a toolbar command."""

    def decorator(func: Callable[[str], str]):
        _COMMAND_REGISTRY[name] = Command(name=name, label=label, handler=func, help=help)
        return func

    return decorator


def get_command(name: str) -> Command:
    """Look up a command by identifier.

    Raises:
        KeyError: If no command is registered under ``name``.
    """
    try:
        return _COMMAND_REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown command: {name!r}") from None


def list_commands() -> List[Command]:
    return list(_COMMAND_REGISTRY.values())


def dispatch(name: str, controller: BufferController) -> str:
    """Apply command ``name`` to the buffer.

    Returns:
        The new buffer text.
    """
    cmd = get_command(name)
    result = controller.apply(cmd.handler)
    logger.info("Command %s applied (%d chars)", name, len(result))
    return result


# Toolbar transforms
command(
    name="clean",
    label="Clean Formatting",
    help="Remove markdown markers, curly quotes, dashes and invisible characters.",
)(clean_formatting)
command(
    name="spacing",
    label="Fix Spacing",
    help="Collapse repeated spaces and blank lines, trim the text.",
)(fix_spacing)
command(
    name="sentence",
    label="Sentence case",
    help="Lowercase everything and capitalise the start of each sentence.",
)(sentence_case)
command(
    name="title",
    label="Title Case",
    help="Capitalise the first letter of every word.",
)(title_case)
