from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GridWindow(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start_hour: int = Field(ge=0, le=23, alias="startHour")
    end_hour: int = Field(ge=1, le=24, alias="endHour")
    slot_minutes: int = Field(ge=1, le=60, alias="slotMinutes")

    @model_validator(mode="after")
    def validate_window(self) -> "GridWindow":
        if self.end_hour <= self.start_hour:
            raise ValueError("endHour must be after startHour")
        if 60 % self.slot_minutes != 0:
            raise ValueError("slotMinutes must divide an hour evenly")
        return self
