"""Enums for conversation domain."""

from enum import Enum


class ActivityType(str, Enum):
    """Well-known activity type names.

    Activity.type is kept as a plain string so channels can deliver types
    not listed here; they are handled by the generic fallback.
    """

    MESSAGE = "message"
    CONVERSATION_UPDATE = "conversationUpdate"
    TYPING = "typing"
    EVENT = "event"
    END_OF_CONVERSATION = "endOfConversation"
    CONTACT_RELATION_UPDATE = "contactRelationUpdate"
    INSTALLATION_UPDATE = "installationUpdate"
    MESSAGE_REACTION = "messageReaction"
    INVOKE = "invoke"
    DELETE_USER_DATA = "deleteUserData"


class ActionType(str, Enum):
    """Card action types understood by channels."""

    IM_BACK = "imBack"
    POST_BACK = "postBack"
    OPEN_URL = "openUrl"
    MESSAGE_BACK = "messageBack"
