"""Helpers for an in-progress draft timetable.

A draft is the caller's list of placed assignments. Every helper returns a
new list or a report and leaves the input untouched.
"""

from __future__ import annotations

from typing import Sequence

from planner.schemas.conflict import Cell, Conflict, DraftAudit, PlacementInspection
from planner.schemas.grid import GridWindow
from planner.schemas.timetable import Assignment, Day, RuleSet, TimeBlock
from planner.services.conflict_service import ConflictService
from planner.services.grid import block_cells, sort_blocks
from planner.services.rule_index import RuleIndex
from planner.services.suggestion_service import DEFAULT_MAX_RESULTS, suggest_alternatives


def place(draft: Sequence[Assignment], assignment: Assignment) -> list[Assignment]:
    kept = [item for item in draft if item.offering_id != assignment.offering_id]
    kept.append(assignment)
    return kept


def remove_offering(draft: Sequence[Assignment], offering_id: str) -> list[Assignment]:
    return [item for item in draft if item.offering_id != offering_id]


def assignments_at(draft: Sequence[Assignment], day: Day, slot: int) -> list[Assignment]:
    cell = TimeBlock(day=day, start_slot=slot, slot_length=1)
    return [item for item in draft if item.block.overlaps(cell)]


def inspect_placement(
    rules: RuleSet | RuleIndex,
    draft: Sequence[Assignment],
    offering_id: str,
    day: Day,
    slot: int,
    grid: GridWindow,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> PlacementInspection:
    index = RuleIndex.of(rules)
    offering = index.offering(offering_id)
    service = ConflictService(index)
    if offering is None:
        probe = Assignment(offering_id=offering_id, block=TimeBlock(day=day, start_slot=slot, slot_length=1))
        return PlacementInspection(conflicts=service.evaluate_placement([], probe))

    placed = remove_offering(draft, offering_id)
    candidate = Assignment(
        offering_id=offering_id,
        block=TimeBlock(day=day, start_slot=slot, slot_length=offering.slot_length),
    )
    conflicts = service.evaluate_placement(placed, candidate)
    alternatives: list[TimeBlock] = []
    if conflicts:
        alternatives = suggest_alternatives(index, placed, offering_id, grid, max_results)
    return PlacementInspection(candidate=candidate, conflicts=conflicts, alternatives=alternatives)


def audit_draft(rules: RuleSet | RuleIndex, draft: Sequence[Assignment]) -> DraftAudit:
    index = RuleIndex.of(rules)
    service = ConflictService(index)
    conflicts: list[Conflict] = []
    cells: dict[tuple[str, int], None] = {}
    summary: list[str] = []
    placed: list[Assignment] = []

    for assignment in draft:
        found = service.evaluate_placement(placed, assignment)
        if not found:
            placed.append(assignment)
            continue
        conflicts.extend(found)

        related = {other_id for conflict in found for other_id in conflict.related_offering_ids or []}
        # Earlier placements named by an overlap conflict that collide with this one.
        touched = [assignment.block]
        touched.extend(
            other.block
            for other in placed
            if other.offering_id in related and other.block.overlaps(assignment.block)
        )
        placed.append(assignment)
        for block in touched:
            cells.update(dict.fromkeys(block_cells(block)))

        offering = index.offering(assignment.offering_id)
        title = f"{offering.course_name} (grade {offering.grade})" if offering else assignment.offering_id
        summary.append(f"- {title}: {' / '.join(conflict.message for conflict in found)}")

    ordered = sort_blocks(TimeBlock(day=day, start_slot=slot, slot_length=1) for day, slot in cells)
    return DraftAudit(
        conflicts=conflicts,
        conflicted_cells=[Cell(day=block.day, slot=block.start_slot) for block in ordered],
        summary=summary,
    )
