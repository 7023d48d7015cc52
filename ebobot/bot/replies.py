"""Outbound activity factories.

Every reply is built fresh from the inbound activity with
Activity.create_reply(), so it is addressed back to the sender in the
same conversation.
"""

from ebobot.config.models.bot import BotConfig
from ebobot.conversation.models import (
    ActionType,
    Activity,
    Attachment,
    CardAction,
    ChannelAccount,
    SuggestedActions,
)

WELCOME_INTRO = (
    "You are seeing this message because this was your first message ever to this bot."
)
WELCOME_GREETING = (
    "It is a good practice to welcome the user and provide personal greeting. "
    "For example, welcome {name}."
)
MEMBER_GREETING = (
    "Hi there - {name}. This message shows that you've just joined the channel with this bot."
)
ECHO_GREETING = "You said {text}."
TURN_ECHO = "Turn {count}: You sent '{text}'"
UNRECOGNIZED_ACTIVITY = "{type} activity detected"


def welcome(activity: Activity) -> list[Activity]:
    """The two one-time messages sent on a conversation's first message."""
    return [
        activity.create_reply(WELCOME_INTRO),
        activity.create_reply(WELCOME_GREETING.format(name=activity.sender_name or "")),
    ]


def member_greeting(activity: Activity, member: ChannelAccount) -> Activity:
    return activity.create_reply(MEMBER_GREETING.format(name=member.name or ""))


def echo_greeting(activity: Activity, text: str) -> Activity:
    return activity.create_reply(ECHO_GREETING.format(text=text))


def turn_echo(activity: Activity, turn_count: int) -> Activity:
    return activity.create_reply(
        TURN_ECHO.format(count=turn_count, text=activity.text or "")
    )


def image(activity: Activity, config: BotConfig) -> Activity:
    """A message carrying a single image attachment."""
    attachment = Attachment(
        content_type=config.image_content_type,
        content_url=config.image_url,
        name=config.image_name,
    )
    return activity.create_reply(attachments=[attachment])


def color_card(activity: Activity, config: BotConfig) -> Activity:
    """A prompt with quick replies; each choice posts its label back."""
    actions = tuple(
        CardAction(type=ActionType.IM_BACK, title=choice, value=choice)
        for choice in config.card_choices
    )
    return activity.create_reply(
        config.card_prompt,
        suggested_actions=SuggestedActions(actions=actions),
    )


def unrecognized_activity(activity: Activity) -> Activity:
    return activity.create_reply(UNRECOGNIZED_ACTIVITY.format(type=activity.type))


def reply_kind(activity: Activity) -> str:
    """Coarse classification of an outbound activity, for metrics."""
    if activity.attachments:
        return "attachment"
    if activity.suggested_actions:
        return "suggested_actions"
    return "text"
