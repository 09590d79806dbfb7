# 📄 File: tests/test_care_scheduler.py
# 🧭 Purpose (Layman Explanation):
# Makes sure the care calendar behaves: new plants get their first tasks, finishing a
# task books the next one, and watering by hand replaces the pending reminder.
# 🧪 Purpose (Technical Summary):
# Service-level tests for CareScheduler and PlantService over the memory backend with a
# frozen clock.
# 🔗 Dependencies:
# pytest, pytest-asyncio, snaptheplant.modules.plant_management
# 🔄 Connected Modules / Calls From:
# pytest

from datetime import timedelta

import pytest

from snaptheplant.modules.plant_management.domain.models.care_action import CareActionType
from snaptheplant.modules.plant_management.domain.services.care_scheduler import CareScheduler
from snaptheplant.modules.plant_management.domain.services.plant_service import PlantService
from snaptheplant.shared.core.exceptions import AuthorizationError, NotFoundError

OWNER = 1
STRANGER = 2


@pytest.fixture
def scheduler(storage, clock) -> CareScheduler:
    return CareScheduler(storage, clock=clock)


@pytest.fixture
def plants(storage, scheduler) -> PlantService:
    return PlantService(storage, scheduler)


async def pending_of(storage, plant_id, action_type):
    async with storage.unit_of_work() as repos:
        actions = await repos.care_actions.list_for_plant(plant_id)
    return [a for a in actions if a.action_type == action_type and not a.is_completed]


async def test_new_plant_gets_one_action_per_cadence(plants, scheduler, clock):
    plant = await plants.create_plant(OWNER, {"name": "Fern", "water_frequency": 3, "fertilize_frequency": 14})

    actions = await scheduler.list_care_actions(OWNER)
    by_type = {a.action_type: a for a in actions}
    assert set(by_type) == {CareActionType.WATER, CareActionType.FERTILIZE}
    assert by_type[CareActionType.WATER].due_date == clock() + timedelta(days=3)
    assert by_type[CareActionType.FERTILIZE].due_date == clock() + timedelta(days=14)
    assert all(a.plant_id == plant.id and not a.is_completed for a in actions)


async def test_plant_without_cadence_gets_no_actions(plants, scheduler):
    await plants.create_plant(OWNER, {"name": "Cactus"})
    assert await scheduler.list_care_actions(OWNER) == []


async def test_completing_action_schedules_the_next_one(plants, scheduler, storage, clock):
    plant = await plants.create_plant(OWNER, {"name": "Fern", "water_frequency": 3})
    [first] = await pending_of(storage, plant.id, CareActionType.WATER)

    clock.advance(days=4)
    completed = await scheduler.complete_care_action(first.id, OWNER)

    assert completed.is_completed
    assert completed.completed_at == clock()

    [following] = await pending_of(storage, plant.id, CareActionType.WATER)
    assert following.id != first.id
    assert following.due_date == clock() + timedelta(days=3)

    refreshed = await plants.get_plant(plant.id, OWNER)
    assert refreshed.last_watered == clock()


async def test_completing_twice_is_idempotent(plants, scheduler, storage):
    plant = await plants.create_plant(OWNER, {"name": "Fern", "water_frequency": 3})
    [action] = await pending_of(storage, plant.id, CareActionType.WATER)

    await scheduler.complete_care_action(action.id, OWNER)
    again = await scheduler.complete_care_action(action.id, OWNER)

    assert again.is_completed
    assert len(await pending_of(storage, plant.id, CareActionType.WATER)) == 1


async def test_completing_someone_elses_action_is_forbidden(plants, scheduler, storage):
    plant = await plants.create_plant(OWNER, {"name": "Fern", "water_frequency": 3})
    [action] = await pending_of(storage, plant.id, CareActionType.WATER)

    with pytest.raises(AuthorizationError):
        await scheduler.complete_care_action(action.id, STRANGER)
    with pytest.raises(NotFoundError):
        await scheduler.complete_care_action(9999, OWNER)


async def test_one_off_action_does_not_recur(plants, scheduler, clock):
    plant = await plants.create_plant(OWNER, {"name": "Fern", "water_frequency": 3})
    repot = await scheduler.create_care_action(OWNER, plant.id, CareActionType.REPOT, clock() + timedelta(days=1))

    await scheduler.complete_care_action(repot.id, OWNER)

    actions = await scheduler.list_care_actions(OWNER)
    assert [a.action_type for a in actions].count(CareActionType.REPOT) == 1


async def test_manual_watering_replaces_pending_action(plants, storage, clock):
    plant = await plants.create_plant(OWNER, {"name": "Fern", "water_frequency": 5})
    [original] = await pending_of(storage, plant.id, CareActionType.WATER)

    clock.advance(days=1)
    watered = await plants.water_plant(plant.id, OWNER)

    assert watered.last_watered == clock()
    [replacement] = await pending_of(storage, plant.id, CareActionType.WATER)
    assert replacement.id != original.id
    assert replacement.due_date == clock() + timedelta(days=5)


async def test_manual_care_on_a_vanished_plant_is_not_found(plants, scheduler, storage):
    plant = await plants.create_plant(OWNER, {"name": "Fern", "water_frequency": 3})

    async with storage.unit_of_work() as repos:
        await repos.plants.delete(plant.id)
        with pytest.raises(NotFoundError):
            await scheduler.record_care_event(repos, plant, CareActionType.WATER)

    assert len(await pending_of(storage, plant.id, CareActionType.WATER)) == 1


async def test_manual_fertilizing_only_touches_fertilize_actions(plants, storage):
    plant = await plants.create_plant(OWNER, {"name": "Fern", "water_frequency": 5, "fertilize_frequency": 30})
    [water] = await pending_of(storage, plant.id, CareActionType.WATER)

    fed = await plants.fertilize_plant(plant.id, OWNER)

    assert fed.last_fertilized is not None
    assert fed.last_watered is None
    assert [a.id for a in await pending_of(storage, plant.id, CareActionType.WATER)] == [water.id]


async def test_pending_view_is_sorted_and_embeds_plants(plants, scheduler, clock):
    fern = await plants.create_plant(OWNER, {"name": "Fern", "water_frequency": 7})
    basil = await plants.create_plant(OWNER, {"name": "Basil", "water_frequency": 1})
    await plants.create_plant(STRANGER, {"name": "Other", "water_frequency": 1})

    pending = await scheduler.get_pending_with_plants(OWNER)

    assert [item.plant.name for item in pending] == ["Basil", "Fern"]
    assert pending[0].action.plant_id == basil.id
    assert pending[1].plant.id == fern.id


async def test_care_action_on_foreign_plant_is_forbidden(plants, scheduler, clock):
    plant = await plants.create_plant(OWNER, {"name": "Fern"})
    with pytest.raises(AuthorizationError):
        await scheduler.create_care_action(STRANGER, plant.id, CareActionType.MIST, clock())


async def test_deleting_plant_removes_its_actions(plants, scheduler):
    plant = await plants.create_plant(OWNER, {"name": "Fern", "water_frequency": 3})
    await plants.delete_plant(plant.id, OWNER)

    assert await scheduler.list_care_actions(OWNER) == []
    with pytest.raises(NotFoundError):
        await plants.get_plant(plant.id, OWNER)
