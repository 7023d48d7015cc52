"""Turn response model."""

from pydantic import BaseModel, Field

from ebobot.conversation.models import Activity


class TurnResponse(BaseModel):
    """Replies produced for one inbound activity, in delivery order."""

    activities: list[Activity] = Field(default_factory=list)
