from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from splitledger.core.dependencies import get_db, get_path_user
from splitledger.core.export import balance_sheet_to_csv
from splitledger.schemas.balances import BalanceSheet
from splitledger.schemas.expense import ExpenseCreate, ExpenseOut
from splitledger.services.expense_services import (
    create_expense,
    get_balance_sheet,
    get_expense,
    get_expenses_created_by,
)

router = APIRouter()

@router.post("", response_model=ExpenseOut, status_code=status.HTTP_201_CREATED)
async def add_expense(data: ExpenseCreate, db: AsyncSession = Depends(get_db)):
    return await create_expense(db, data)

@router.get("/created-by/{user_id}", response_model=list[ExpenseOut])
async def expenses_created_by(
    user = Depends(get_path_user),
    db: AsyncSession = Depends(get_db),
):
    return await get_expenses_created_by(db, user.id)

@router.get("/balance-sheet/{user_id}", response_model=BalanceSheet)
async def balance_sheet(
    download: bool = False,
    user = Depends(get_path_user),
    db: AsyncSession = Depends(get_db),
):
    sheet = await get_balance_sheet(db, user.id)

    if download:
        return Response(
            content=balance_sheet_to_csv(sheet),
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="balance_sheet.csv"'},
        )

    return sheet

@router.get("/{expense_id}", response_model=ExpenseOut)
async def fetch(expense_id: int, db: AsyncSession = Depends(get_db)):
    return await get_expense(db, expense_id)
