from decimal import Decimal
from pydantic import BaseModel
from typing import List

from splitledger.core.enums import SplitMethod

class PartyRef(BaseModel):
    user_id: int
    name: str | None

class ParticipantLine(PartyRef):
    amount_owed: Decimal

class ExpenseLineItem(BaseModel):
    expense_id: int
    total_amount: Decimal
    split_method: SplitMethod
    paid_by: PartyRef
    participants: List[ParticipantLine]

class BalanceSheet(BaseModel):
    user_id: int
    total_owed: Decimal
    total_paid: Decimal
    balance: Decimal
    expenses: List[ExpenseLineItem]
