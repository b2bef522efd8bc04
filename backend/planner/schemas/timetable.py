from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Day = Literal["MON", "TUE", "WED", "THU", "FRI"]
MajorType = Literal["MAJOR", "LIBERAL"]

DAYS: tuple[Day, ...] = ("MON", "TUE", "WED", "THU", "FRI")
DAY_ORDER: dict[str, int] = {day: index for index, day in enumerate(DAYS)}


def intervals_overlap(a_start: int, a_length: int, b_start: int, b_length: int) -> bool:
    return a_start < b_start + b_length and b_start < a_start + a_length


class SnapshotModel(BaseModel):
    """Base for every rule-set entity: immutable, camelCase on the wire."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Professor(SnapshotModel):
    id: str
    name: str
    target_hours: float | None = Field(default=None, alias="targetHours", ge=0)


class CourseOffering(SnapshotModel):
    id: str
    course_name: str = Field(alias="courseName")
    grade: int
    major_type: MajorType = Field(alias="majorType")
    professor_id: str = Field(alias="professorId")
    slot_length: int = Field(ge=1, alias="slotLength")
    # Carried for the editing UI; no rule consults it yet.
    must_be_consecutive: bool = Field(default=False, alias="mustBeConsecutive")


class TimeBlock(SnapshotModel):
    day: Day
    start_slot: int = Field(ge=0, alias="startSlot")
    slot_length: int = Field(ge=1, alias="slotLength")

    @property
    def end_slot(self) -> int:
        return self.start_slot + self.slot_length

    def key(self) -> tuple[str, int, int]:
        return (self.day, self.start_slot, self.slot_length)

    def overlaps(self, other: TimeBlock) -> bool:
        if self.day != other.day:
            return False
        return intervals_overlap(self.start_slot, self.slot_length, other.start_slot, other.slot_length)


LunchRule = TimeBlock
MajorBlockedRule = TimeBlock


class Assignment(SnapshotModel):
    offering_id: str = Field(alias="offeringId")
    block: TimeBlock


class GovtTrainingRule(SnapshotModel):
    grade: int
    afternoon_start_slot: int = Field(ge=0, alias="afternoonStartSlot")


class ProfessorUnavailableRule(SnapshotModel):
    professor_id: str = Field(alias="professorId")
    blocks: list[TimeBlock] = Field(default_factory=list)


class OfferingAvailability(SnapshotModel):
    offering_id: str = Field(alias="offeringId")
    allowed_blocks: list[TimeBlock] = Field(default_factory=list, alias="allowedBlocks")


class NationalProgramConfig(SnapshotModel):
    """Grades attending the government-funded training program.

    Those grades have no classes from ``afternoon_start_hour`` onwards. The
    hour is converted to a slot index against a concrete grid, see
    ``planner.services.grid.expand_national_program``.
    """

    grades: list[int] = Field(default_factory=list)
    afternoon_start_hour: int = Field(default=13, alias="afternoonStartHour", ge=0, le=24)


class RuleSet(SnapshotModel):
    professors: list[Professor] = Field(default_factory=list)
    offerings: list[CourseOffering] = Field(default_factory=list)
    lunch_rules: list[LunchRule] = Field(default_factory=list, alias="lunchRules")
    govt_training_rules: list[GovtTrainingRule] = Field(default_factory=list, alias="govtTrainingRules")
    major_blocked_rules: list[MajorBlockedRule] = Field(default_factory=list, alias="majorBlockedRules")
    professor_unavailable_rules: list[ProfessorUnavailableRule] = Field(
        default_factory=list, alias="professorUnavailableRules"
    )
    availability: list[OfferingAvailability] = Field(default_factory=list)
    national_program: NationalProgramConfig | None = Field(default=None, alias="nationalProgram")
