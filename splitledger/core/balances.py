"""
Balance aggregation for a single user.

    total_owed  sum of the user's amount_owed over expenses they take part in
    total_paid  sum of total_amount over expenses the user created
    balance     total_owed - total_paid

A positive balance is what the user owes others, a negative one what
others owe the user. An expense the user paid for and also takes part in
counts toward both totals.
"""
from decimal import Decimal
from typing import Iterable, List

from splitledger.core.exceptions import NoExpensesFound
from splitledger.core.utils import ZERO, qround
from splitledger.schemas.balances import (
    BalanceSheet,
    ExpenseLineItem,
    ParticipantLine,
    PartyRef,
)


def _name_of(user):
    return user.name if user is not None else None


def build_line_item(expense) -> ExpenseLineItem:
    return ExpenseLineItem(
        expense_id=expense.id,
        total_amount=qround(Decimal(str(expense.total_amount))),
        split_method=expense.split_method,
        paid_by=PartyRef(user_id=expense.created_by, name=_name_of(expense.creator)),
        participants=[
            ParticipantLine(
                user_id=p.user_id,
                name=_name_of(p.user),
                amount_owed=qround(Decimal(str(p.amount_owed))),
            )
            for p in expense.participants
        ],
    )


def compute_balance_sheet(user_id: int, expenses: Iterable) -> BalanceSheet:
    """
    Aggregate expenses involving ``user_id`` into a BalanceSheet.

    ``expenses`` are Expense rows (or anything shaped like them) with the
    creator and participant users already loaded. Raises NoExpensesFound
    when there is nothing to aggregate.
    """
    total_owed = ZERO
    total_paid = ZERO
    line_items: List[ExpenseLineItem] = []

    for expense in expenses:
        for p in expense.participants:
            if p.user_id == user_id:
                total_owed += Decimal(str(p.amount_owed))
                break

        if expense.created_by == user_id:
            total_paid += Decimal(str(expense.total_amount))

        line_items.append(build_line_item(expense))

    if not line_items:
        raise NoExpensesFound(user_id)

    return BalanceSheet(
        user_id=user_id,
        total_owed=qround(total_owed),
        total_paid=qround(total_paid),
        balance=qround(total_owed - total_paid),
        expenses=line_items,
    )
