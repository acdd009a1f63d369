from decimal import Decimal
from types import SimpleNamespace

import pytest

from splitledger.core.balances import compute_balance_sheet
from splitledger.core.enums import SplitMethod
from splitledger.core.exceptions import NoExpensesFound

USERS = {
    1: SimpleNamespace(id=1, name="User 1"),
    2: SimpleNamespace(id=2, name="User 2"),
    3: SimpleNamespace(id=3, name="User 3"),
    4: SimpleNamespace(id=4, name="User 4"),
}


def expense(expense_id, total, paid_by, owed, method=SplitMethod.EQUAL):
    return SimpleNamespace(
        id=expense_id,
        total_amount=Decimal(str(total)),
        split_method=method,
        created_by=paid_by,
        creator=USERS[paid_by],
        participants=[
            SimpleNamespace(user_id=uid, user=USERS[uid], amount_owed=Decimal(str(amt)))
            for uid, amt in owed
        ],
    )


def test_payer_and_participant_scenario():
    a = expense(1, 300, paid_by=1, owed=[(1, 100), (2, 100), (3, 100)])
    b = expense(2, 150, paid_by=2, owed=[(1, 50), (2, 50), (3, 50)])

    sheet = compute_balance_sheet(1, [a, b])

    assert sheet.total_owed == Decimal("150")
    assert sheet.total_paid == Decimal("300")
    assert sheet.balance == Decimal("-150")


def test_participant_only_has_positive_balance():
    a = expense(1, 300, paid_by=1, owed=[(1, 100), (2, 100), (3, 100)])

    sheet = compute_balance_sheet(2, [a])

    assert sheet.total_owed == Decimal("100")
    assert sheet.total_paid == Decimal("0")
    assert sheet.balance == Decimal("100")


def test_payer_not_participating_counts_only_paid():
    a = expense(1, 200, paid_by=4, owed=[(2, 100), (3, 100)])

    sheet = compute_balance_sheet(4, [a])

    assert sheet.total_owed == Decimal("0")
    assert sheet.total_paid == Decimal("200")
    assert sheet.balance == Decimal("-200")


def test_self_paid_expense_counts_toward_both_totals():
    a = expense(1, 80, paid_by=1, owed=[(1, 80)], method=SplitMethod.EXACT)

    sheet = compute_balance_sheet(1, [a])

    assert sheet.total_owed == Decimal("80")
    assert sheet.total_paid == Decimal("80")
    assert sheet.balance == Decimal("0")


def test_line_items_carry_every_participant():
    a = expense(7, 300, paid_by=1, owed=[(1, 100), (2, 100), (3, 100)])

    sheet = compute_balance_sheet(2, [a])

    (item,) = sheet.expenses
    assert item.expense_id == 7
    assert item.total_amount == Decimal("300")
    assert item.split_method == SplitMethod.EQUAL
    assert item.paid_by.user_id == 1
    assert item.paid_by.name == "User 1"
    assert [(p.user_id, p.name, p.amount_owed) for p in item.participants] == [
        (1, "User 1", Decimal("100")),
        (2, "User 2", Decimal("100")),
        (3, "User 3", Decimal("100")),
    ]


def test_no_expenses_is_not_found():
    with pytest.raises(NoExpensesFound) as exc:
        compute_balance_sheet(1, [])

    assert exc.value.status_code == 404
    assert exc.value.details == {"user_id": 1}
