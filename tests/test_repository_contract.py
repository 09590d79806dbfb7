# 📄 File: tests/test_repository_contract.py
# 🧭 Purpose (Layman Explanation):
# Runs the same storage checks against the in-memory store and a real SQL database, so
# both remember users, plants, care tasks and posts in exactly the same way.
# 🧪 Purpose (Technical Summary):
# Repository contract tests parametrized over MemoryStorageBackend and SqlStorageBackend
# (SQLite through aiosqlite, tables created on initialize).
# 🔗 Dependencies:
# pytest, pytest-asyncio, aiosqlite, snaptheplant.shared.infrastructure.storage
# 🔄 Connected Modules / Calls From:
# pytest

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from snaptheplant.modules.community_social.domain.models.community_share import CommunityShare
from snaptheplant.modules.plant_management.domain.models.care_action import CareAction, CareActionType
from snaptheplant.modules.plant_management.domain.models.plant import Plant
from snaptheplant.modules.plant_management.domain.services.care_scheduler import CareScheduler
from snaptheplant.modules.plant_management.domain.services.plant_service import PlantService
from snaptheplant.modules.user_management.domain.models.user import SubscriptionType, User
from snaptheplant.shared.config.settings import Settings
from snaptheplant.shared.core.exceptions import DuplicateResourceError
from snaptheplant.shared.infrastructure.storage.memory import MemoryStorageBackend
from snaptheplant.shared.infrastructure.storage.sql import SqlStorageBackend

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(params=["memory", "sql"])
async def backend(request, tmp_path):
    if request.param == "memory":
        storage = MemoryStorageBackend()
    else:
        storage = SqlStorageBackend(Settings(
            _env_file=None,
            ENVIRONMENT="test",
            STORAGE_BACKEND="sql",
            DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'contract.db'}",
            DB_AUTO_CREATE_TABLES=True,
        ))
    await storage.initialize()
    yield storage
    await storage.close()


def new_user(username: str, **fields) -> User:
    return User(
        username=username,
        password_hash="hash",
        email=fields.pop("email", f"{username}@example.com"),
        created_at=NOW,
        **fields,
    )


async def seed_user(storage, username="ivy", **fields) -> User:
    async with storage.unit_of_work() as repos:
        return await repos.users.create(new_user(username, **fields))


async def seed_plant(storage, user_id, name="Fern", **fields) -> Plant:
    async with storage.unit_of_work() as repos:
        return await repos.plants.create(Plant(user_id=user_id, name=name, date_added=NOW, **fields))


# =============================================================================
# USERS
# =============================================================================

async def test_user_create_and_lookups(backend):
    created = await seed_user(backend, "Ivy", email="Ivy@Example.com", stripe_customer_id="cus_9")

    assert created.id is not None
    async with backend.unit_of_work() as repos:
        assert (await repos.users.get_by_id(created.id)).username == "Ivy"
        assert (await repos.users.get_by_username("ivy")).id == created.id
        assert (await repos.users.get_by_email("IVY@example.com")).id == created.id
        assert (await repos.users.get_by_stripe_customer_id("cus_9")).id == created.id
        assert await repos.users.get_by_id(created.id + 100) is None


async def test_duplicate_username_or_email_is_rejected(backend):
    await seed_user(backend, "ivy")

    with pytest.raises(DuplicateResourceError):
        await seed_user(backend, "IVY", email="other@example.com")
    with pytest.raises(DuplicateResourceError):
        await seed_user(backend, "other", email="ivy@example.com")


async def test_user_update_and_filter_by_subscription(backend):
    ivy = await seed_user(backend, "ivy")
    await seed_user(backend, "oak")

    deadline = NOW + timedelta(days=3)
    async with backend.unit_of_work() as repos:
        updated = await repos.users.update(ivy.id, {
            "subscription_type": SubscriptionType.TRIAL,
            "trial_end_date": deadline,
        })
        assert await repos.users.update(9999, {"is_beta_tester": True}) is None

    assert updated.subscription_type == SubscriptionType.TRIAL
    assert updated.trial_end_date == deadline

    async with backend.unit_of_work() as repos:
        trials = await repos.users.list_by_subscription_type(SubscriptionType.TRIAL)
        everyone = await repos.users.list_all()

    assert [u.username for u in trials] == ["ivy"]
    assert [u.username for u in everyone] == ["ivy", "oak"]


async def test_consume_identification_stops_at_zero(backend):
    user = await seed_user(backend, "ivy", identifications_remaining=1)

    async with backend.unit_of_work() as repos:
        assert await repos.users.consume_identification(user.id) is True
    async with backend.unit_of_work() as repos:
        assert await repos.users.consume_identification(user.id) is False
        assert (await repos.users.get_by_id(user.id)).identifications_remaining == 0


async def test_consume_identification_ignores_paid_users(backend):
    user = await seed_user(backend, "ivy", subscription_type=SubscriptionType.PREMIUM, identifications_remaining=7)

    async with backend.unit_of_work() as repos:
        assert await repos.users.consume_identification(user.id) is False
        assert (await repos.users.get_by_id(user.id)).identifications_remaining == 7


# =============================================================================
# PLANTS AND CARE ACTIONS
# =============================================================================

async def test_plant_crud_and_care_stamps(backend):
    user = await seed_user(backend)
    plant = await seed_plant(backend, user.id, water_frequency=3, care_health=40.0)
    await seed_plant(backend, user.id, name="Palm", is_public=True)

    async with backend.unit_of_work() as repos:
        watered = await repos.plants.mark_watered(plant.id, NOW)
        fed = await repos.plants.mark_fertilized(plant.id, NOW)
        renamed = await repos.plants.update(plant.id, {"name": "Boston Fern"})
        public = await repos.plants.list_public()
        mine = await repos.plants.list_for_user(user.id)

    assert watered.last_watered == NOW
    assert watered.care_health == 100.0
    assert fed.last_fertilized == NOW
    assert renamed.name == "Boston Fern"
    assert [p.name for p in public] == ["Palm"]
    assert len(mine) == 2

    async with backend.unit_of_work() as repos:
        assert await repos.plants.delete(plant.id) is True
        assert await repos.plants.get_by_id(plant.id) is None
        assert await repos.plants.delete(plant.id) is False


async def test_care_action_queries(backend):
    user = await seed_user(backend)
    plant = await seed_plant(backend, user.id)

    async with backend.unit_of_work() as repos:
        late = await repos.care_actions.create(CareAction(
            plant_id=plant.id, user_id=user.id, action_type=CareActionType.WATER, due_date=NOW + timedelta(days=5),
        ))
        early = await repos.care_actions.create(CareAction(
            plant_id=plant.id, user_id=user.id, action_type=CareActionType.PRUNE, due_date=NOW + timedelta(days=1),
        ))
        done = await repos.care_actions.mark_complete(late.id, NOW)

    assert done.is_completed and done.completed_at == NOW

    async with backend.unit_of_work() as repos:
        pending = await repos.care_actions.list_pending_for_user(user.id)
        for_plant = await repos.care_actions.list_for_plant(plant.id)

    assert [a.id for a in pending] == [early.id]
    assert pending[0].action_type == CareActionType.PRUNE
    assert {a.id for a in for_plant} == {early.id, late.id}

    async with backend.unit_of_work() as repos:
        assert await repos.care_actions.delete_for_plant(plant.id) == 2
        assert await repos.care_actions.list_for_user(user.id) == []


async def test_mark_complete_only_flips_pending_actions(backend):
    user = await seed_user(backend)
    plant = await seed_plant(backend, user.id)

    async with backend.unit_of_work() as repos:
        action = await repos.care_actions.create(CareAction(
            plant_id=plant.id, user_id=user.id, action_type=CareActionType.WATER, due_date=NOW,
        ))
        first = await repos.care_actions.mark_complete(action.id, NOW)
        second = await repos.care_actions.mark_complete(action.id, NOW + timedelta(hours=1))
        missing = await repos.care_actions.mark_complete(action.id + 100, NOW)

    assert first.completed_at == NOW
    assert second is None
    assert missing is None
    async with backend.unit_of_work() as repos:
        assert (await repos.care_actions.get_by_id(action.id)).completed_at == NOW


async def test_naive_due_dates_are_stored_as_utc(backend):
    user = await seed_user(backend)
    plant = await seed_plant(backend, user.id)

    async with backend.unit_of_work() as repos:
        await repos.care_actions.create(CareAction(
            plant_id=plant.id, user_id=user.id, action_type=CareActionType.MIST,
            due_date=datetime(2025, 6, 3, 9, 0),
        ))
        await repos.care_actions.create(CareAction(
            plant_id=plant.id, user_id=user.id, action_type=CareActionType.WATER,
            due_date=NOW + timedelta(days=1),
        ))
        pending = await repos.care_actions.list_pending_for_user(user.id)

    assert [a.action_type for a in pending] == [CareActionType.WATER, CareActionType.MIST]
    assert pending[1].due_date == datetime(2025, 6, 3, 9, 0, tzinfo=timezone.utc)


async def test_concurrent_completion_schedules_one_follow_up(backend):
    scheduler = CareScheduler(backend, clock=lambda: NOW)
    plants = PlantService(backend, scheduler)
    user = await seed_user(backend)
    plant = await plants.create_plant(user.id, {"name": "Fern", "water_frequency": 7})
    [action] = await scheduler.list_care_actions(user.id)

    results = await asyncio.gather(
        scheduler.complete_care_action(action.id, user.id),
        scheduler.complete_care_action(action.id, user.id),
    )

    assert all(r.id == action.id and r.is_completed for r in results)
    async with backend.unit_of_work() as repos:
        pending = await repos.care_actions.list_pending_for_user(user.id)
    assert len(pending) == 1
    assert pending[0].plant_id == plant.id
    assert pending[0].due_date == NOW + timedelta(days=7)


async def test_concurrent_manual_watering_leaves_one_pending_action(backend):
    scheduler = CareScheduler(backend, clock=lambda: NOW)
    plants = PlantService(backend, scheduler)
    user = await seed_user(backend)
    plant = await plants.create_plant(user.id, {"name": "Fern", "water_frequency": 3})

    await asyncio.gather(
        plants.water_plant(plant.id, user.id),
        plants.water_plant(plant.id, user.id),
    )

    async with backend.unit_of_work() as repos:
        pending = await repos.care_actions.list_pending_for_user(user.id)
    assert [a.action_type for a in pending] == [CareActionType.WATER]


# =============================================================================
# COMMUNITY SHARES
# =============================================================================

async def test_share_feed_likes_and_cleanup(backend):
    user = await seed_user(backend)
    plant = await seed_plant(backend, user.id)

    async with backend.unit_of_work() as repos:
        older = await repos.shares.create(CommunityShare(
            user_id=user.id, plant_id=plant.id, title="First", date_posted=NOW,
        ))
        newer = await repos.shares.create(CommunityShare(
            user_id=user.id, plant_id=plant.id, title="Second", date_posted=NOW + timedelta(hours=1),
        ))
        await repos.shares.like(older.id)
        liked = await repos.shares.like(older.id)
        missing = await repos.shares.like(9999)

    assert liked.likes == 2
    assert missing is None

    async with backend.unit_of_work() as repos:
        feed = await repos.shares.list_all()
        mine = await repos.shares.list_for_user(user.id)

    assert [s.id for s in feed] == [newer.id, older.id]
    assert len(mine) == 2

    async with backend.unit_of_work() as repos:
        assert await repos.shares.delete_for_plant(plant.id) == 2
        assert await repos.shares.get_by_id(newer.id) is None
