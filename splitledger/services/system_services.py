import logging
from splitledger.db.session import engine
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from splitledger.models.user import User
from splitledger.models.expense import Expense

logger = logging.getLogger(__name__)

async def check_db_service():
    try:
        async with engine.connect() as conn:
            await conn.exec_driver_sql("SELECT 1")
        return {"db": True, "message":"Database is connected"}
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database health check failed: %s", e)
        return {"db": False, "error": str(e)}

async def system_health():
    return {
        "status": "ok"
    }

async def system_metrics(db: AsyncSession):
    users_q = select(func.count(User.id))
    expenses_q = select(func.count(Expense.id))

    users_res = await db.execute(users_q)
    expenses_res = await db.execute(expenses_q)

    return {
        "users": users_res.scalar(),
        "expenses": expenses_res.scalar()
    }
