import pytest
from fastapi.testclient import TestClient

from planner.core.config import get_settings
from planner.main import app
from planner.schemas.grid import GridWindow
from planner.schemas.timetable import Assignment, RuleSet, TimeBlock


def block(day, start_slot, slot_length):
    return TimeBlock(day=day, start_slot=start_slot, slot_length=slot_length)


def assign(offering_id, day, start_slot, slot_length):
    return Assignment(offering_id=offering_id, block=block(day, start_slot, slot_length))


def make_rules(**overrides):
    """Three offerings over two professors; camelCase keys like the UI sends."""
    data = {
        "professors": [
            {"id": "p1", "name": "Prof Kim"},
            {"id": "p2", "name": "Prof Park", "targetHours": 9},
        ],
        "offerings": [
            {"id": "o1", "courseName": "Networks", "grade": 2, "majorType": "MAJOR", "professorId": "p1", "slotLength": 6, "mustBeConsecutive": True},
            {"id": "o2", "courseName": "Circuits", "grade": 2, "majorType": "MAJOR", "professorId": "p2", "slotLength": 6, "mustBeConsecutive": True},
            {"id": "o3", "courseName": "Data Comms", "grade": 3, "majorType": "MAJOR", "professorId": "p1", "slotLength": 6, "mustBeConsecutive": True},
        ],
    }
    data.update(overrides)
    return RuleSet.model_validate(data)


@pytest.fixture()
def rules():
    return make_rules()


@pytest.fixture()
def grid():
    return GridWindow(start_hour=9, end_hour=18, slot_minutes=60)


@pytest.fixture()
def client():
    get_settings.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    get_settings.cache_clear()
