"""Domain models for content verification."""

from stakevote.domain.models.content_id import compute_content_id, is_fingerprint
from stakevote.domain.models.dispute_record import DisputeRecord
from stakevote.domain.models.history_record import HistoryRecord
from stakevote.domain.models.queue_entry import (
    STATUS_TRANSITION_MATRIX,
    QueueEntry,
    QueueStatus,
)
from stakevote.domain.models.vote_record import VoteRecord

__all__: list[str] = [
    "DisputeRecord",
    "HistoryRecord",
    "QueueEntry",
    "QueueStatus",
    "STATUS_TRANSITION_MATRIX",
    "VoteRecord",
    "compute_content_id",
    "is_fingerprint",
]
