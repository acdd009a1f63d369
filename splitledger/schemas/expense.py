from decimal import Decimal
from datetime import datetime
from pydantic import BaseModel, Field
from typing import List

from splitledger.core.enums import SplitMethod

class ParticipantInput(BaseModel):
    user_id: int
    # exact split only
    amount: Decimal | None = Field(default=None, ge=0, decimal_places=2)
    # percentage split only
    percentage_owed: Decimal | None = Field(default=None, ge=0, le=100, decimal_places=4)

class ExpenseCreate(BaseModel):
    total_amount: Decimal = Field(ge=0, decimal_places=2)
    created_by: int
    split_method: SplitMethod
    participants: List[ParticipantInput] = Field(min_length=1)

class ParticipantOut(BaseModel):
    user_id: int
    amount_owed: Decimal
    percentage_owed: Decimal | None = None

    class Config:
        from_attributes = True

class ExpenseOut(BaseModel):
    id: int
    total_amount: Decimal
    created_by: int
    split_method: SplitMethod
    created_at: datetime | None = None
    participants: List[ParticipantOut]

    class Config:
        from_attributes = True
