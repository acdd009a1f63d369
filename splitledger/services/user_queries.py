import logging
from typing import Iterable
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from splitledger.models.counter import Counter
from splitledger.models.user import User

logger = logging.getLogger(__name__)

async def get_user_by_id(db: AsyncSession, user_id: int):
    res = await db.execute(select(User).where(User.id == user_id))
    return res.scalar_one_or_none()

async def get_user_by_email(db: AsyncSession, email: str):
    res = await db.execute(select(User).where(User.email == email))
    return res.scalar_one_or_none()

async def get_users_by_ids(db: AsyncSession, user_ids: Iterable[int]):
    ids = set(user_ids)
    if not ids:
        return []
    res = await db.execute(select(User).where(User.id.in_(ids)))
    return res.scalars().all()

async def next_serial_id(db: AsyncSession, model: str = "User") -> int:
    """
    Atomically take the next value of the ``model`` sequence.

    The increment is one UPDATE ... RETURNING statement, so concurrent
    callers (in this process or another) never read the same value. The
    counter row is created on first use; losing that insert race just
    means retrying the increment. Commits its own transaction.
    """
    stmt = (
        update(Counter)
        .where(Counter.model == model)
        .values(count=Counter.count + 1)
        .returning(Counter.count)
        .execution_options(synchronize_session=False)
    )

    while True:
        res = await db.execute(stmt)
        value = res.scalar_one_or_none()

        if value is not None:
            await db.commit()
            return value

        db.add(Counter(model=model, count=1))
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.debug("Counter %s created concurrently, retrying increment", model)
            continue

        logger.info("Counter %s created", model)
        return 1
