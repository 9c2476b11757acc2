"""
Pure derivation of a set's average score from its card states.

No state, no side effects: the aggregate calls calculate_average_score after
every review and stores the result.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from flashdeck.domain.learning.entities.card import Card, Correctness


def round_percentage(part: int, whole: int) -> int:
    """
    Return 100 * part / whole rounded half up to an integer.

    Rounds half up, so 12.5 becomes 13.
    Returns 0 when whole is 0.
    """
    if whole <= 0:
        return 0
    ratio = Decimal(100 * part) / Decimal(whole)
    return int(ratio.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def count_outcomes(cards: Iterable[Card]) -> tuple[int, int]:
    """Return (reviewed, correct) counts over the current card states."""
    reviewed = 0
    correct = 0
    for card in cards:
        if card.correctness is Correctness.UNATTEMPTED:
            continue
        reviewed += 1
        if card.correctness is Correctness.CORRECT:
            correct += 1
    return reviewed, correct


def calculate_average_score(cards: Iterable[Card]) -> int:
    """
    Percentage of reviewed cards whose latest outcome is correct.

    Unattempted cards are ignored; a set with no reviewed card scores 0.
    """
    reviewed, correct = count_outcomes(cards)
    return round_percentage(correct, reviewed)
