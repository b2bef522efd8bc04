from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from planner.schemas.conflict import Conflict
from planner.schemas.timetable import Assignment, CourseOffering, RuleSet, TimeBlock
from planner.services.rule_index import RuleIndex

logger = logging.getLogger(__name__)


def consecutive_placement_conflicts(
    offering: CourseOffering,
    placed: Sequence[Assignment],
    candidate: Assignment,
) -> List[Conflict]:
    """Hook for ``must_be_consecutive`` enforcement.

    The flag is recorded on offerings but its rule was never settled (split
    placements across non-adjacent blocks are the likely target), so this
    reports nothing for now.
    """
    return []


class ConflictService:
    def __init__(self, rules: RuleSet | RuleIndex):
        self.index = RuleIndex.of(rules)
        self.rules = self.index.rules

    def evaluate_placement(self, placed: Sequence[Assignment], candidate: Assignment) -> List[Conflict]:
        offering = self.index.offering(candidate.offering_id)
        if offering is None:
            logger.debug("Unknown offering %s in placement check", candidate.offering_id)
            return [
                Conflict(
                    code="OFFERING_UNAVAILABLE",
                    message=f"Offering {candidate.offering_id} was not found.",
                )
            ]

        block = candidate.block
        conflicts: List[Conflict] = []

        def flag(code: str, message: str, related: Optional[List[str]] = None) -> None:
            conflicts.append(
                Conflict(
                    code=code,
                    message=message,
                    day=block.day,
                    slot=block.start_slot,
                    related_offering_ids=related,
                )
            )

        if not self.index.is_allowed(offering.id, block):
            flag(
                "OFFERING_UNAVAILABLE",
                f"{offering.course_name} cannot be placed here (outside its allowed times).",
            )

        if any(lunch.overlaps(block) for lunch in self.rules.lunch_rules):
            flag("LUNCH_BLOCKED", "This time overlaps the lunch break.")

        govt_rule = self.index.govt_training.get(offering.grade)
        # Any occupied slot at or after the cut-off counts as afternoon.
        if govt_rule is not None and block.end_slot > govt_rule.afternoon_start_slot:
            flag(
                "GRADE_AFTERNOON_BLOCKED",
                f"Grade {offering.grade} attends government training in the afternoon.",
            )

        if offering.major_type == "MAJOR":
            for rule in self.rules.major_blocked_rules:
                if rule.overlaps(block):
                    flag(
                        "MAJOR_BLOCKED_FOR_LIBERAL_DAY",
                        "Major courses cannot be placed while liberal-arts classes run.",
                    )
                    break

        unavailable = self.index.professor_unavailable.get(offering.professor_id, [])
        if any(other.overlaps(block) for other in unavailable):
            flag("PROF_UNAVAILABLE", f"{self._professor_name(offering)} is unavailable at this time.")

        grade_overlaps, professor_overlaps = self._overlapping(offering, block, placed)
        if grade_overlaps:
            flag("GRADE_CONFLICT", f"Grade {offering.grade} already has a class at this time.", grade_overlaps)
        if professor_overlaps:
            flag(
                "PROF_CONFLICT",
                f"{self._professor_name(offering)} is already teaching at this time.",
                professor_overlaps,
            )

        conflicts.extend(consecutive_placement_conflicts(offering, placed, candidate))

        logger.debug(
            "Placement %s at %s/%d: %d conflict(s)",
            offering.id,
            block.day,
            block.start_slot,
            len(conflicts),
        )
        return conflicts

    def evaluate_sequence(self, assignments: Iterable[Assignment]) -> List[Conflict]:
        conflicts: List[Conflict] = []
        placed: List[Assignment] = []
        for assignment in assignments:
            conflicts.extend(self.evaluate_placement(placed, assignment))
            placed.append(assignment)
        return conflicts

    def _overlapping(
        self,
        offering: CourseOffering,
        block: TimeBlock,
        placed: Sequence[Assignment],
    ) -> Tuple[List[str], List[str]]:
        same_grade: List[str] = []
        same_professor: List[str] = []
        for assignment in placed:
            other = self.index.offering(assignment.offering_id)
            if other is None or not assignment.block.overlaps(block):
                continue
            if other.grade == offering.grade:
                same_grade.append(other.id)
            if other.professor_id == offering.professor_id:
                same_professor.append(other.id)
        return same_grade, same_professor

    def _professor_name(self, offering: CourseOffering) -> str:
        professor = self.index.professors.get(offering.professor_id)
        if professor is None:
            return "The professor"
        return professor.name


def evaluate_placement(
    rules: RuleSet | RuleIndex,
    placed: Sequence[Assignment],
    candidate: Assignment,
) -> List[Conflict]:
    return ConflictService(rules).evaluate_placement(placed, candidate)


def evaluate_sequence(rules: RuleSet | RuleIndex, assignments: Iterable[Assignment]) -> List[Conflict]:
    """Audit a whole draft as if it had been placed one assignment at a time."""
    return ConflictService(rules).evaluate_sequence(assignments)
