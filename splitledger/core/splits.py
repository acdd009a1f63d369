"""
Split calculation.

Turns a total, a split method and the submitted participant shares into
the amount each participant owes. Pure: the only outside fact it needs,
which user ids exist, is handed in by the caller.

    equal       total / n for everyone (rounded to cents, no remainder
                redistribution)
    percentage  total * pct / 100, percentages must add up to exactly 100
    exact       the submitted amounts, which must add up to exactly total
"""
import logging
from collections import Counter
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from splitledger.core.enums import SplitMethod
from splitledger.core.exceptions import (
    AmountMismatch,
    DuplicateParticipant,
    EmptyParticipantList,
    InvalidAmount,
    InvalidSplitMethod,
    PercentageMismatch,
    UnknownParticipant,
)
from splitledger.core.utils import HUNDRED, ZERO, qround, to_decimal

logger = logging.getLogger(__name__)


@dataclass
class ParticipantShare:
    user_id: int
    amount: Optional[Decimal] = None
    percentage_owed: Optional[Decimal] = None


@dataclass
class ComputedShare:
    user_id: int
    amount_owed: Decimal
    percentage_owed: Optional[Decimal] = None


def _split_equal(total: Decimal, participants: Sequence[ParticipantShare]) -> List[ComputedShare]:
    share = qround(total / len(participants))
    return [ComputedShare(user_id=p.user_id, amount_owed=share) for p in participants]


def _split_percentage(total: Decimal, participants: Sequence[ParticipantShare]) -> List[ComputedShare]:
    percentages = []
    for p in participants:
        pct = to_decimal(p.percentage_owed)
        if pct is None:
            raise PercentageMismatch(
                None, f"Participant {p.user_id} has no percentage_owed"
            )
        if pct < ZERO or pct > HUNDRED:
            raise PercentageMismatch(
                pct, f"Percentage for participant {p.user_id} must be between 0 and 100"
            )
        percentages.append(pct)

    total_percentage = sum(percentages, ZERO)
    if total_percentage != HUNDRED:
        raise PercentageMismatch(total_percentage)

    return [
        ComputedShare(
            user_id=p.user_id,
            amount_owed=qround(total * pct / HUNDRED),
            percentage_owed=pct,
        )
        for p, pct in zip(participants, percentages)
    ]


def _split_exact(total: Decimal, participants: Sequence[ParticipantShare]) -> List[ComputedShare]:
    amounts = []
    for p in participants:
        amount = to_decimal(p.amount)
        if amount is None:
            raise AmountMismatch(None, total, f"Participant {p.user_id} has no amount")
        if amount < ZERO:
            raise AmountMismatch(
                None, total, f"Amount for participant {p.user_id} must not be negative"
            )
        amounts.append(amount)

    total_owed = sum(amounts, ZERO)
    if total_owed != total:
        raise AmountMismatch(total_owed, total)

    return [
        ComputedShare(user_id=p.user_id, amount_owed=amount)
        for p, amount in zip(participants, amounts)
    ]


SPLITTERS: Dict[SplitMethod, Callable[[Decimal, Sequence[ParticipantShare]], List[ComputedShare]]] = {
    SplitMethod.EQUAL: _split_equal,
    SplitMethod.PERCENTAGE: _split_percentage,
    SplitMethod.EXACT: _split_exact,
}


def parse_split_method(value) -> SplitMethod:
    if isinstance(value, SplitMethod):
        return value
    try:
        return SplitMethod(value)
    except ValueError:
        raise InvalidSplitMethod(value)


def compute_split(
    total_amount,
    split_method,
    participants: Sequence[ParticipantShare],
    known_user_ids: Optional[Iterable[int]] = None,
) -> List[ComputedShare]:
    """
    Compute what every participant owes.

    Args:
        total_amount: expense total, any finite non-negative number
        split_method: SplitMethod or its string value
        participants: shares in submission order
        known_user_ids: ids present in the user store; when given, every
            participant must be one of them

    Returns:
        ComputedShare list, parallel to ``participants``

    Raises:
        SplitError subclass describing which constraint failed
    """
    method = parse_split_method(split_method)

    total = to_decimal(total_amount)
    if total is None or total < ZERO:
        raise InvalidAmount(total_amount)

    if not participants:
        raise EmptyParticipantList()

    user_ids = [p.user_id for p in participants]
    if len(user_ids) != len(set(user_ids)):
        counts = Counter(user_ids)
        raise DuplicateParticipant(sorted(uid for uid, n in counts.items() if n > 1))

    if known_user_ids is not None:
        missing = set(user_ids) - set(known_user_ids)
        if missing:
            raise UnknownParticipant(sorted(missing))

    shares = SPLITTERS[method](total, participants)

    logger.debug(
        "Split %s of %s among %d participants", method.value, total, len(shares)
    )
    return shares
