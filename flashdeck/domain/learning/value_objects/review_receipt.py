from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.value_object import ValueObject
from flashdeck.domain.common.value_objects import CardId


@dataclass(frozen=True)
class ReviewReceipt(ValueObject):
    """Outcome of one recorded review, with the set statistics it produced."""

    card_id: CardId
    is_correct: bool
    reviewed_at: datetime
    review_count: int
    total_reviews: int
    average_score: int
