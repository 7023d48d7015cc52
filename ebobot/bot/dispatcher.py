"""Turn dispatcher.

Classifies one inbound activity and produces the replies for it,
reading and committing conversation state along the way. Replies are
produced lazily: any state mutation a reply depends on is committed
before that reply is yielded, so a welcome is never sent for a turn
whose welcome transition failed to persist.
"""

from collections.abc import AsyncIterator

from ebobot.bot import replies
from ebobot.bot.commands import GREETINGS, Command, parse_command
from ebobot.config.models.bot import BotConfig
from ebobot.conversation.models import (
    Activity,
    ActivityType,
    ConversationKey,
    CounterState,
    StateRecord,
    WelcomeState,
)
from ebobot.conversation.store import ConversationStateStore
from ebobot.errors import ConstructionError, StateAccessError
from ebobot.observability.logging import get_logger
from ebobot.observability.metrics import STATE_COMMITS, WELCOMES

logger = get_logger(__name__)


class TurnDispatcher:
    """Routes an activity to its response behavior.

    Holds no state between turns; all state lives in the injected
    ConversationStateStore and is fetched fresh on every turn.
    """

    def __init__(
        self,
        store: ConversationStateStore | None,
        bot_config: BotConfig | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            store: Conversation state store (required)
            bot_config: Image and card content (defaults if not provided)

        Raises:
            ConstructionError: If no store is supplied
        """
        if store is None:
            raise ConstructionError("TurnDispatcher requires a conversation state store")
        self._store = store
        self._config = bot_config or BotConfig()

    async def handle_turn(self, activity: Activity) -> AsyncIterator[Activity]:
        """Yield the replies for one activity.

        The iterator is finite and single-use. StateAccessError raised by
        the store ends it; replies already yielded stay yielded.
        """
        if activity.is_type(ActivityType.CONVERSATION_UPDATE):
            for reply in self._greet_new_members(activity):
                yield reply
        elif activity.is_type(ActivityType.MESSAGE):
            async for reply in self._handle_message(activity):
                yield reply
        else:
            logger.debug("unrecognized_activity", activity_type=activity.type)
            yield replies.unrecognized_activity(activity)

    def _greet_new_members(self, activity: Activity) -> list[Activity]:
        # The bot itself shows up in membersAdded when it joins
        greetings = [
            replies.member_greeting(activity, member)
            for member in activity.members_added or ()
            if member.id != activity.recipient_id
        ]
        logger.debug("members_greeted", count=len(greetings))
        return greetings

    async def _handle_message(self, activity: Activity) -> AsyncIterator[Activity]:
        key = activity.conversation_key

        welcome = await self._store.get(key, WelcomeState)
        if not welcome.welcomed:
            welcome.welcomed = True
            await self._store.set(key, welcome)
            await self._commit(key, WelcomeState)
            WELCOMES.inc()
            logger.info("user_welcomed", conversation_key=str(key))
            for reply in replies.welcome(activity):
                yield reply
            return

        command = parse_command(activity.text)
        if command in GREETINGS:
            yield replies.echo_greeting(activity, command.value)
        elif command is Command.IMAGE:
            yield replies.image(activity, self._config)
            return
        elif command is Command.CARD:
            yield replies.color_card(activity, self._config)
            return

        counter = await self._store.get(key, CounterState)
        counter.turn_count += 1
        await self._store.set(key, counter)
        await self._commit(key, CounterState)
        logger.debug(
            "turn_counter_incremented",
            conversation_key=str(key),
            turn_count=counter.turn_count,
        )
        yield replies.turn_echo(activity, counter.turn_count)

    async def _commit(self, key: ConversationKey, record_type: type[StateRecord]) -> None:
        try:
            await self._store.commit(key, record_type)
        except StateAccessError:
            STATE_COMMITS.labels(state=record_type.state_name, outcome="error").inc()
            raise
        STATE_COMMITS.labels(state=record_type.state_name, outcome="ok").inc()
