from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_
from sqlalchemy.orm import selectinload
from splitledger.models.expense import Expense
from splitledger.models.expense_participant import ExpenseParticipant

# creator and participant users resolved up front; lazy loads are not
# available on an AsyncSession
_with_people = (
    selectinload(Expense.creator),
    selectinload(Expense.participants).selectinload(ExpenseParticipant.user),
)

_newest_first = (Expense.created_at.desc(), Expense.id.desc())


async def save_expense(db: AsyncSession, expense: Expense) -> Expense:
    db.add(expense)
    await db.commit()
    return await get_expense_by_id(db, expense.id)

async def get_expense_by_id(db: AsyncSession, expense_id: int):
    q = (
        select(Expense)
        .options(*_with_people)
        .where(Expense.id == expense_id)
        .execution_options(populate_existing=True)
    )
    res = await db.execute(q)
    return res.scalar_one_or_none()

async def get_expenses_by_creator(db: AsyncSession, user_id: int):
    q = (
        select(Expense)
        .options(*_with_people)
        .where(Expense.created_by == user_id)
        .order_by(*_newest_first)
    )
    res = await db.execute(q)
    return res.scalars().all()

async def get_expenses_by_participant(db: AsyncSession, user_id: int):
    q = (
        select(Expense)
        .options(*_with_people)
        .where(Expense.participants.any(ExpenseParticipant.user_id == user_id))
        .order_by(*_newest_first)
    )
    res = await db.execute(q)
    return res.scalars().all()

async def get_expenses_involving(db: AsyncSession, user_id: int):
    """Expenses the user created or takes part in, newest first."""
    q = (
        select(Expense)
        .options(*_with_people)
        .where(
            or_(
                Expense.created_by == user_id,
                Expense.participants.any(ExpenseParticipant.user_id == user_id),
            )
        )
        .order_by(*_newest_first)
    )
    res = await db.execute(q)
    return res.scalars().all()
