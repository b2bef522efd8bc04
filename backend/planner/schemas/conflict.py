from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from planner.schemas.grid import GridWindow
from planner.schemas.timetable import Assignment, Day, RuleSet, TimeBlock

ConflictCode = Literal[
    "OFFERING_UNAVAILABLE",
    "LUNCH_BLOCKED",
    "GRADE_AFTERNOON_BLOCKED",
    "MAJOR_BLOCKED_FOR_LIBERAL_DAY",
    "PROF_UNAVAILABLE",
    "GRADE_CONFLICT",
    "PROF_CONFLICT",
]

# Violations that block placement outright; overlaps are flagged but may be kept.
HARD_CONFLICT_CODES: frozenset[str] = frozenset(
    {
        "OFFERING_UNAVAILABLE",
        "LUNCH_BLOCKED",
        "GRADE_AFTERNOON_BLOCKED",
        "MAJOR_BLOCKED_FOR_LIBERAL_DAY",
        "PROF_UNAVAILABLE",
    }
)


class Conflict(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: ConflictCode
    message: str
    day: Day | None = None
    slot: int | None = None
    related_offering_ids: list[str] | None = Field(default=None, alias="relatedOfferingIds")

    @property
    def is_hard(self) -> bool:
        return self.code in HARD_CONFLICT_CODES


class Cell(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: Day
    slot: int


class PlacementInspection(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    candidate: Assignment | None = None
    conflicts: list[Conflict] = Field(default_factory=list)
    alternatives: list[TimeBlock] = Field(default_factory=list)


class DraftAudit(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    conflicts: list[Conflict] = Field(default_factory=list)
    conflicted_cells: list[Cell] = Field(default_factory=list, alias="conflictedCells")
    summary: list[str] = Field(default_factory=list)


class RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class EvaluatePlacementRequest(RequestModel):
    rules: RuleSet
    placed: list[Assignment] = Field(default_factory=list)
    candidate: Assignment
    grid: GridWindow | None = None


class AuditRequest(RequestModel):
    rules: RuleSet
    assignments: list[Assignment] = Field(default_factory=list)
    grid: GridWindow | None = None


class SuggestionRequest(RequestModel):
    rules: RuleSet
    placed: list[Assignment] = Field(default_factory=list)
    offering_id: str = Field(alias="offeringId")
    grid: GridWindow | None = None
    max_results: int | None = Field(default=None, alias="maxResults", ge=0, le=100)


class InspectRequest(RequestModel):
    rules: RuleSet
    draft: list[Assignment] = Field(default_factory=list)
    offering_id: str = Field(alias="offeringId")
    day: Day
    slot: int = Field(ge=0)
    grid: GridWindow | None = None
    max_results: int | None = Field(default=None, alias="maxResults", ge=0, le=100)


class ConflictReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conflicts: list[Conflict]


class SuggestionReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    alternatives: list[TimeBlock]
