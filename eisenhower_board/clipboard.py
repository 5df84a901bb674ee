"""Clipboard collaborator for copying the organized summary."""

from __future__ import annotations

import asyncio
import logging
import shutil
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

ClipboardWriter = Callable[[str], Awaitable[None]]

_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class ClipboardError(RuntimeError):
    """Raised when text could not be placed on the system clipboard."""


def _find_command() -> tuple[str, ...]:
    for command in _COMMANDS:
        if shutil.which(command[0]):
            return command
    raise ClipboardError("No clipboard tool found (tried pbcopy, wl-copy, xclip, xsel, clip)")


async def system_clipboard(text: str) -> None:
    """Pipe ``text`` into the first available platform clipboard tool."""

    command = _find_command()
    process = await asyncio.create_subprocess_exec(
        *command,
        stdin=asyncio.subprocess.PIPE,
        stdout=asyncio.subprocess.DEVNULL,
        stderr=asyncio.subprocess.PIPE,
    )
    _, stderr = await process.communicate(text.encode("utf-8"))
    if process.returncode != 0:
        detail = stderr.decode("utf-8", errors="replace").strip()
        raise ClipboardError(f"{command[0]} exited with {process.returncode}: {detail}")


async def copy_text(text: str, writer: ClipboardWriter = system_clipboard) -> bool:
    """Copy ``text`` once; failures are logged and reported as ``False``."""

    try:
        await writer(text)
    except (ClipboardError, OSError) as exc:
        logger.error("Failed to copy to clipboard: %s", exc)
        return False
    logger.info("Organized tasks copied to clipboard (%d chars)", len(text))
    return True
