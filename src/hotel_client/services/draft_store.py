import logging
import time
import uuid
from dataclasses import dataclass
from typing import Callable, Dict

from hotel_client.models.drafts import BookingDraft
from hotel_client.utils.custom_exceptions import NotFoundException

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    draft: BookingDraft
    touched_at: float


class DraftStore:
    """Holds in-progress booking drafts between views, keyed by flow id.

    A draft lives from the moment a room is selected until the flow discards
    it (booking created or user abandons), or until it has been left untouched
    for ``ttl_seconds``.
    """

    def __init__(self, ttl_seconds: int, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._entries: Dict[str, _Entry] = {}

    def create(self, draft: BookingDraft) -> str:
        self.purge_expired()
        flow_id = str(uuid.uuid4())
        self._entries[flow_id] = _Entry(draft=draft, touched_at=self.clock())
        logger.info(f"Started booking flow {flow_id} for hotel {draft.hotel_id}")
        return flow_id

    def get(self, flow_id: str) -> BookingDraft:
        entry = self._entries.get(flow_id)
        if entry is None:
            raise NotFoundException("booking flow", flow_id, 404)
        if self._is_expired(entry):
            del self._entries[flow_id]
            logger.info(f"Booking flow {flow_id} expired")
            raise NotFoundException("booking flow", flow_id, 404)
        entry.touched_at = self.clock()
        return entry.draft

    def discard(self, flow_id: str):
        if self._entries.pop(flow_id, None) is not None:
            logger.info(f"Discarded booking flow {flow_id}")

    def purge_expired(self) -> int:
        expired = [key for key, entry in self._entries.items() if self._is_expired(entry)]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def __len__(self):
        return len(self._entries)

    def _is_expired(self, entry: _Entry) -> bool:
        return self.clock() - entry.touched_at > self.ttl_seconds
