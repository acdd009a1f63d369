import asyncio
import logging
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from splitledger.core.config import settings
from splitledger.db.session import engine

logger = logging.getLogger(__name__)


async def wait_for_db(retries: int | None = None, delay: float | None = None):
    retries = settings.DB_CONNECT_RETRIES if retries is None else retries
    delay = settings.DB_CONNECT_DELAY if delay is None else delay

    for i in range(retries):
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Splitledger : Database connected")
            return
        except (SQLAlchemyError, OSError) as e:
            logger.warning(
                "Splitledger : Database not ready | [ %d/%d ] %s → retrying...",
                i + 1, retries, e,
            )
            await asyncio.sleep(delay)

    raise RuntimeError("Database unreachable after retries")
