"""Turn runner.

Serializes turns per conversation, drives the dispatcher and delivers
each reply through the caller's send coroutine in order.
"""

import time
from collections.abc import Awaitable, Callable
from contextlib import aclosing

import structlog

from ebobot.bot.dispatcher import TurnDispatcher
from ebobot.bot.replies import reply_kind
from ebobot.conversation.models import Activity, ActivityType
from ebobot.conversation.mutex import ConversationMutex
from ebobot.errors import ConstructionError, ConversationBusyError, EboBotError
from ebobot.observability.logging import get_logger
from ebobot.observability.metrics import ACTIVITIES_SENT, ERRORS, TURN_LATENCY, TURNS

logger = get_logger(__name__)

SendCallback = Callable[[Activity], Awaitable[None]]

_KNOWN_TYPES = frozenset(t.value for t in ActivityType)


def _type_label(activity: Activity) -> str:
    # Bound label cardinality; channels may send arbitrary type names
    return activity.type if activity.type in _KNOWN_TYPES else "other"


class TurnRunner:
    """Runs one turn to completion under the conversation lock."""

    def __init__(
        self,
        dispatcher: TurnDispatcher | None,
        mutex: ConversationMutex | None,
    ) -> None:
        if dispatcher is None:
            raise ConstructionError("TurnRunner requires a dispatcher")
        if mutex is None:
            raise ConstructionError("TurnRunner requires a conversation mutex")
        self._dispatcher = dispatcher
        self._mutex = mutex

    async def run(
        self,
        activity: Activity,
        send: SendCallback | None = None,
    ) -> list[Activity]:
        """Process an activity and deliver its replies.

        Args:
            activity: Inbound activity
            send: Coroutine delivering one reply; replies are only
                collected when omitted

        Returns:
            Replies delivered, in order

        Raises:
            ConversationBusyError: If another turn holds the conversation
            StateAccessError: If the state store fails mid-turn; replies
                delivered before the failure are on its `delivered` list
        """
        type_label = _type_label(activity)
        start = time.perf_counter()
        context = {"activity_id": activity.id, "activity_type": activity.type}
        if activity.conversation is not None:
            context["conversation_key"] = str(activity.conversation_key)
        structlog.contextvars.bind_contextvars(**context)

        sent: list[Activity] = []
        try:
            logger.debug("turn_started")
            lock_key = context.get("conversation_key")
            if lock_key is None:
                await self._deliver(activity, send, sent)
            else:
                async with self._mutex.acquire(lock_key) as acquired:
                    if not acquired:
                        raise ConversationBusyError(lock_key)
                    await self._deliver(activity, send, sent)
        except Exception as e:
            if isinstance(e, EboBotError):
                e.delivered = list(sent)
            TURNS.labels(activity_type=type_label, outcome="error").inc()
            ERRORS.labels(error_type=type(e).__name__).inc()
            logger.warning(
                "turn_failed",
                error=str(e),
                error_type=type(e).__name__,
                activities_sent=len(sent),
            )
            raise
        finally:
            TURN_LATENCY.labels(activity_type=type_label).observe(
                time.perf_counter() - start
            )
            structlog.contextvars.unbind_contextvars(*context)

        TURNS.labels(activity_type=type_label, outcome="ok").inc()
        logger.info("turn_completed", activities_sent=len(sent))
        return sent

    async def _deliver(
        self,
        activity: Activity,
        send: SendCallback | None,
        sent: list[Activity],
    ) -> None:
        async with aclosing(self._dispatcher.handle_turn(activity)) as replies:
            async for reply in replies:
                if send is not None:
                    await send(reply)
                sent.append(reply)
                ACTIVITIES_SENT.labels(kind=reply_kind(reply)).inc()
