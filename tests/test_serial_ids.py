import asyncio

from splitledger.core.exceptions import DuplicateEmail
from splitledger.db.session import async_session
from splitledger.schemas.user import UserCreate
from splitledger.services.user_queries import next_serial_id
from splitledger.services.user_service import create_user


async def _take(model):
    async with async_session() as session:
        return await next_serial_id(session, model)


async def _take_many(model, n):
    return await asyncio.gather(*(_take(model) for _ in range(n)))


def test_counter_is_created_on_first_use(fresh_db):
    assert asyncio.run(_take("User")) == 1
    assert asyncio.run(_take("User")) == 2


def test_counters_are_keyed_by_model(fresh_db):
    assert asyncio.run(_take("User")) == 1
    assert asyncio.run(_take("Expense")) == 1
    assert asyncio.run(_take("User")) == 2


def test_concurrent_serial_ids_are_unique(fresh_db):
    asyncio.run(_take("User"))

    ids = asyncio.run(_take_many("User", 20))

    assert len(set(ids)) == 20
    assert sorted(ids) == list(range(2, 22))


def test_concurrent_first_use_creates_one_counter(fresh_db):
    ids = asyncio.run(_take_many("User", 20))

    assert sorted(ids) == list(range(1, 21))


async def _register(email, name="Racer"):
    async with async_session() as session:
        user = await create_user(
            session, UserCreate(name=name, email=email, mobile="+1234567890")
        )
        return user.serial_id


def test_concurrent_registrations_get_distinct_serial_ids(fresh_db):
    async def run():
        return await asyncio.gather(
            *(_register(f"racer{n}@ledger.io") for n in range(10))
        )

    serial_ids = asyncio.run(run())

    assert sorted(serial_ids) == list(range(1, 11))


def test_concurrent_same_email_registration_is_duplicate(fresh_db):
    async def run():
        return await asyncio.gather(
            _register("twin@ledger.io"),
            _register("twin@ledger.io"),
            return_exceptions=True,
        )

    results = asyncio.run(run())

    errors = [r for r in results if isinstance(r, Exception)]
    assert len(errors) == 1
    assert isinstance(errors[0], DuplicateEmail)
    assert errors[0].status_code == 409
