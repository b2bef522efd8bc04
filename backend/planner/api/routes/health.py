from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from planner.core.config import Settings, get_settings
from planner.services.grid import total_slots

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/health/live")
def health_live(settings: Settings = Depends(get_settings)) -> dict:
    grid = settings.default_grid()
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "grid": {
            "startHour": grid.start_hour,
            "endHour": grid.end_hour,
            "slotMinutes": grid.slot_minutes,
            "totalSlots": total_slots(grid),
        },
    }
