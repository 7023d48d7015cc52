"""Activity models in the Bot Framework wire format."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ebobot.conversation.models.enums import ActionType, ActivityType
from ebobot.conversation.models.state import ConversationKey
from ebobot.errors import InvalidActivityError

_WIRE_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    alias_generator=to_camel,
    extra="ignore",
)


class ChannelAccount(BaseModel):
    """A participant in a conversation (user or bot)."""

    model_config = _WIRE_CONFIG

    id: str = Field(..., description="Channel-specific account id")
    name: str | None = Field(default=None, description="Display name")


class ConversationAccount(BaseModel):
    """The conversation an activity belongs to."""

    model_config = _WIRE_CONFIG

    id: str = Field(..., description="Channel-specific conversation id")
    name: str | None = Field(default=None, description="Display name")
    is_group: bool | None = Field(default=None, description="Group conversation flag")


class Attachment(BaseModel):
    """Media attached to an outbound activity."""

    model_config = _WIRE_CONFIG

    content_type: str = Field(..., description="MIME type of the content")
    content_url: str | None = Field(default=None, description="Where the content lives")
    name: str | None = Field(default=None, description="Display name")


class CardAction(BaseModel):
    """A clickable action; chosen actions send `value` back to the bot."""

    model_config = _WIRE_CONFIG

    type: ActionType = Field(default=ActionType.IM_BACK, description="Action type")
    title: str = Field(..., description="Button label")
    value: Any = Field(default=None, description="Value sent back when chosen")


class SuggestedActions(BaseModel):
    """Quick replies shown with a message."""

    model_config = _WIRE_CONFIG

    actions: tuple[CardAction, ...] = Field(default=(), description="Ordered actions")
    to: tuple[str, ...] | None = Field(
        default=None, description="Recipient ids the actions are shown to"
    )


class Activity(BaseModel):
    """One inbound or outbound conversational event.

    Inbound activities are immutable once received; replies are built
    fresh with create_reply().
    """

    model_config = _WIRE_CONFIG

    type: str = Field(..., description="Activity type name")
    id: str | None = Field(default=None, description="Channel-assigned id")
    timestamp: datetime | None = Field(default=None, description="Sent time")
    channel_id: str | None = Field(default=None, description="Channel identifier")
    service_url: str | None = Field(default=None, description="Channel callback URL")
    conversation: ConversationAccount | None = Field(default=None)
    from_property: ChannelAccount | None = Field(default=None, alias="from")
    recipient: ChannelAccount | None = Field(default=None)
    text: str | None = Field(default=None, description="Message text")
    locale: str | None = Field(default=None)
    members_added: tuple[ChannelAccount, ...] | None = Field(default=None)
    attachments: tuple[Attachment, ...] | None = Field(default=None)
    suggested_actions: SuggestedActions | None = Field(default=None)
    reply_to_id: str | None = Field(default=None)

    @property
    def sender_id(self) -> str | None:
        return self.from_property.id if self.from_property else None

    @property
    def sender_name(self) -> str | None:
        return self.from_property.name if self.from_property else None

    @property
    def recipient_id(self) -> str | None:
        return self.recipient.id if self.recipient else None

    @property
    def conversation_key(self) -> ConversationKey:
        """Key scoping state records to this activity's conversation."""
        if self.conversation is None:
            raise InvalidActivityError(
                f"Activity of type '{self.type}' has no conversation"
            )
        return ConversationKey(
            channel_id=self.channel_id or "",
            conversation_id=self.conversation.id,
        )

    def is_type(self, activity_type: ActivityType) -> bool:
        return self.type == activity_type.value

    def create_reply(
        self,
        text: str | None = None,
        *,
        attachments: list[Attachment] | None = None,
        suggested_actions: SuggestedActions | None = None,
    ) -> "Activity":
        """Build an outbound message addressed back to the sender."""
        return Activity(
            type=ActivityType.MESSAGE.value,
            timestamp=datetime.now(UTC),
            channel_id=self.channel_id,
            service_url=self.service_url,
            conversation=self.conversation,
            from_property=self.recipient,
            recipient=self.from_property,
            reply_to_id=self.id,
            locale=self.locale,
            text=text,
            attachments=tuple(attachments) if attachments else None,
            suggested_actions=suggested_actions,
        )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON shape channels expect."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
