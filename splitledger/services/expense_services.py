import logging
from sqlalchemy.ext.asyncio import AsyncSession
from splitledger.core.balances import compute_balance_sheet
from splitledger.core.exceptions import ExpenseNotFound, NoExpensesFound, SplitError, UserNotFound
from splitledger.core.splits import ParticipantShare, compute_split
from splitledger.models.expense import Expense
from splitledger.models.expense_participant import ExpenseParticipant
from splitledger.schemas.expense import ExpenseCreate
from splitledger.services.expense_queries import (
    get_expense_by_id,
    get_expenses_by_creator,
    get_expenses_involving,
    save_expense,
)
from splitledger.services.user_queries import get_user_by_id, get_users_by_ids

logger = logging.getLogger(__name__)


async def create_expense(db: AsyncSession, data: ExpenseCreate):
    # -----------------------------------
    # 1. Creator must exist
    # -----------------------------------
    creator = await get_user_by_id(db, data.created_by)
    if not creator:
        raise UserNotFound(data.created_by)

    # -----------------------------------
    # 2. Resolve participants
    # -----------------------------------
    member_ids = [p.user_id for p in data.participants]
    known = await get_users_by_ids(db, member_ids)

    shares = [
        ParticipantShare(
            user_id=p.user_id,
            amount=p.amount,
            percentage_owed=p.percentage_owed,
        )
        for p in data.participants
    ]

    # -----------------------------------
    # 3. Split
    # -----------------------------------
    try:
        computed = compute_split(
            data.total_amount,
            data.split_method,
            shares,
            known_user_ids={u.id for u in known},
        )
    except SplitError as e:
        logger.warning("Rejected %s split: %s %s", data.split_method.value, e.message, e.details)
        raise

    # -----------------------------------
    # 4. Persist
    # -----------------------------------
    expense = Expense(
        total_amount=data.total_amount,
        created_by=data.created_by,
        split_method=data.split_method,
        participants=[
            ExpenseParticipant(
                user_id=c.user_id,
                position=i,
                amount_owed=c.amount_owed,
                percentage_owed=c.percentage_owed,
            )
            for i, c in enumerate(computed)
        ],
    )

    expense = await save_expense(db, expense)

    logger.info(
        "Created expense %s (%s, %d participants) by user %s",
        expense.id, expense.split_method.value, len(computed), expense.created_by,
    )
    return expense

async def get_expense(db: AsyncSession, expense_id: int):
    expense = await get_expense_by_id(db, expense_id)

    if not expense:
        raise ExpenseNotFound(expense_id)

    return expense

async def get_expenses_created_by(db: AsyncSession, user_id: int):
    expenses = await get_expenses_by_creator(db, user_id)

    if not expenses:
        raise NoExpensesFound(user_id)

    return expenses

async def get_balance_sheet(db: AsyncSession, user_id: int):
    # caller has already resolved the user (see get_path_user)
    expenses = await get_expenses_involving(db, user_id)

    try:
        return compute_balance_sheet(user_id, expenses)
    except NoExpensesFound:
        logger.info("No expenses found for user %s", user_id)
        raise
