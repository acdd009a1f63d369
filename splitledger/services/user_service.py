import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from splitledger.core.exceptions import DuplicateEmail, UserNotFound
from splitledger.models.user import User
from splitledger.schemas.user import UserCreate
from splitledger.services.user_queries import get_user_by_email, get_user_by_id, next_serial_id

logger = logging.getLogger(__name__)

async def create_user(db: AsyncSession, data: UserCreate):
    existing = await get_user_by_email(db, data.email)
    if existing:
        raise DuplicateEmail(data.email)

    serial_id = await next_serial_id(db, "User")

    user = User(
        email = data.email,
        name = data.name,
        mobile = data.mobile,
        serial_id = serial_id
    )

    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # a concurrent registration took the email between the check and the insert
        await db.rollback()
        if await get_user_by_email(db, data.email):
            logger.info("Lost registration race for %s (serial id %s unused)", data.email, serial_id)
            raise DuplicateEmail(data.email)
        raise

    await db.refresh(user)

    logger.info("Created user %s with serial id %s", user.id, user.serial_id)
    return user

async def get_user(db: AsyncSession, user_id: int):
    user = await get_user_by_id(db, user_id)

    if not user:
        raise UserNotFound(user_id)

    return user
