"""Owner-only shell execution."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from aemy.config import core
from aemy.errors import ShellError
from aemy.messages import Message, Responder

from ..base import Command

logger = logging.getLogger(__name__)

# Keep replies under WhatsApp's practical message size
MAX_OUTPUT_CHARS = 60_000


async def run_shell(command: str, timeout: float) -> tuple[int, str]:
    """
    Run ``command`` through the system shell.

    :returns: ``(exit_code, combined stdout/stderr)``.
    :raises ShellError: If the command does not finish within ``timeout``.
    """
    proc = await asyncio.create_subprocess_shell(
        command,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.STDOUT,
    )
    try:
        out, _ = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        raise ShellError(f"command timed out after {timeout:g}s") from None
    finally:
        # timeout or cancellation: never leave the child running
        if proc.returncode is None:
            proc.kill()
            await proc.wait()
    return proc.returncode or 0, out.decode(errors="replace").strip()


class ExecCommand(Command):
    """Run a shell command on the host and reply with its output."""

    names = ("exec",)
    category = "owner"

    async def handle(self, client: Any, message: Message, responder: Responder) -> None:
        if not message.is_owner:
            return

        command = message.text.strip()
        if not command:
            await responder.reply("Send a command to run, e.g. exec ls -la")
            return

        logger.info("Owner %s executing shell command: %s", message.sender, command)
        try:
            code, output = await run_shell(command, core.EXEC_TIMEOUT)
        except ShellError as exc:
            await responder.reply(f"Error: {exc}")
            raise

        if len(output) > MAX_OUTPUT_CHARS:
            output = output[:MAX_OUTPUT_CHARS] + "\n...(truncated)"

        if code != 0:
            await responder.reply(f"{output}\n\nError: exit status {code}".strip())
            raise ShellError(f"'{command}' exited with status {code}")

        await responder.reply(output or "(no output)")
