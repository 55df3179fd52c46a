import asyncio
import logging
from typing import Any, Callable

from aemy.commands import Dispatcher
from aemy.config import core
from aemy.errors import AemyError
from aemy.events import MessageReceived
from aemy.messages import Message, Responder, normalize

logger = logging.getLogger(__name__)

# Strong references so in-flight command tasks are not garbage collected
_tasks: set[asyncio.Task] = set()


def _log_background_task(task: asyncio.Task) -> None:
    _tasks.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Command task failed", exc_info=exc)


async def handle(
    client: Any,
    event: MessageReceived,
    *,
    dispatcher: Dispatcher,
    make_responder: Callable[[Any, Message], Responder],
    read_status: bool | None = None,
) -> asyncio.Task | None:
    """
    Handle an incoming WhatsApp message.

    Marks status updates as read when enabled, then hands command messages to
    the dispatcher on a background task so a slow handler never holds up the
    next event. Returns that task, or ``None`` when nothing was scheduled.
    """
    message = normalize(event.raw)
    responder = make_responder(client, message)

    # 1) Status updates: optional read receipt, never a command
    if read_status is None:
        read_status = core.READ_STATUS
    if message.is_broadcast_status and not message.is_from_self and read_status:
        try:
            await responder.mark_read()
        except AemyError as exc:
            logger.warning("Failed to mark status %s as read: %s", message.id, exc)

    # 2) Cheap pre-check before paying for a task
    if message.is_broadcast_status or not message.is_command:
        return None

    logger.debug(
        "Command message %s in %s from %s (%s)",
        message.id,
        message.chat,
        message.sender,
        message.push_name,
    )
    task = asyncio.create_task(dispatcher.dispatch(client, message, responder))
    _tasks.add(task)
    task.add_done_callback(_log_background_task)
    return task
