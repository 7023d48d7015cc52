"""ConversationStateStore abstract interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import ValidationError

from ebobot.conversation.models import ConversationKey, StateRecord
from ebobot.errors import StateAccessError
from ebobot.observability.logging import get_logger

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=StateRecord)


class ConversationStateStore(ABC):
    """Keyed store of per-conversation state records.

    Records are addressed by ConversationKey and record kind. Writes are
    staged with set() and only become durable on commit(); a commit can
    be narrowed to a single kind so the other kinds are left untouched.
    Records handed out by get() are copies owned by the caller.

    Backends implement the `_load`, `_persist` and `_delete` hooks and
    raise StateAccessError for backend failures.
    """

    def __init__(self) -> None:
        self._staged: dict[ConversationKey, dict[str, StateRecord]] = {}

    async def get(
        self,
        key: ConversationKey,
        record_type: type[RecordT],
        factory: Callable[[], RecordT] | None = None,
    ) -> RecordT:
        """Get a record, creating a default one if absent.

        The created default is neither staged nor persisted.
        """
        staged = self._staged.get(key, {}).get(record_type.state_name)
        if staged is not None:
            return record_type.model_validate(staged.model_dump())

        data = await self._load(key, record_type.state_name)
        if data is None:
            return factory() if factory is not None else record_type()

        try:
            return record_type.model_validate(data)
        except ValidationError as e:
            raise StateAccessError(
                f"Stored {record_type.state_name} state for {key} is invalid",
                cause=e,
            ) from e

    async def set(self, key: ConversationKey, record: StateRecord) -> None:
        """Stage a record for the next commit."""
        self._staged.setdefault(key, {})[record.state_name] = record.model_copy()

    async def commit(
        self,
        key: ConversationKey,
        record_type: type[StateRecord] | None = None,
    ) -> None:
        """Durably persist staged records for a conversation.

        With record_type given only that kind is persisted. Staged values
        are removed before persisting, so a failed commit never carries
        over into a later turn.
        """
        staged = self._staged.get(key)
        if not staged:
            return

        if record_type is None:
            pending = staged
            del self._staged[key]
        else:
            record = staged.pop(record_type.state_name, None)
            if not staged:
                del self._staged[key]
            if record is None:
                return
            pending = {record_type.state_name: record}

        payload = {
            name: record.model_dump(mode="json") for name, record in pending.items()
        }
        await self._persist(key, payload)
        logger.debug(
            "state_committed",
            conversation_key=str(key),
            states=sorted(payload),
        )

    async def discard(self, key: ConversationKey) -> None:
        """Drop staged, uncommitted records for a conversation."""
        self._staged.pop(key, None)

    async def delete(self, key: ConversationKey) -> bool:
        """Remove all persisted records for a conversation."""
        self._staged.pop(key, None)
        return await self._delete(key)

    @abstractmethod
    async def _load(self, key: ConversationKey, state_name: str) -> dict[str, Any] | None:
        """Load the persisted payload for one record kind."""
        pass

    @abstractmethod
    async def _persist(self, key: ConversationKey, payload: dict[str, dict[str, Any]]) -> None:
        """Persist payloads keyed by state name."""
        pass

    @abstractmethod
    async def _delete(self, key: ConversationKey) -> bool:
        """Delete every record kind stored for a conversation."""
        pass
