from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from splitledger.db.session import async_session
from splitledger.services.user_service import get_user

async def get_db():
    async with async_session() as session:
        yield session

async def get_path_user(user_id: int, db: AsyncSession = Depends(get_db)):
    # raises UserNotFound, rendered as 404
    return await get_user(db, user_id)
