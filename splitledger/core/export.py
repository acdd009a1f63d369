import csv
import io

from splitledger.schemas.balances import BalanceSheet

CSV_HEADER = [
    "expense_id",
    "total_amount",
    "split_method",
    "paid_by_id",
    "paid_by_name",
    "participant_id",
    "participant_name",
    "amount_owed",
]


def balance_sheet_rows(sheet: BalanceSheet):
    """One row per (expense, participant), then the three totals."""
    yield CSV_HEADER

    for item in sheet.expenses:
        for p in item.participants:
            yield [
                item.expense_id,
                item.total_amount,
                item.split_method.value,
                item.paid_by.user_id,
                item.paid_by.name or "",
                p.user_id,
                p.name or "",
                p.amount_owed,
            ]

    yield []
    yield ["total_owed", sheet.total_owed]
    yield ["total_paid", sheet.total_paid]
    yield ["balance", sheet.balance]


def balance_sheet_to_csv(sheet: BalanceSheet) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerows(balance_sheet_rows(sheet))
    return buf.getvalue()
