from __future__ import annotations

from typing import Iterable

from planner.schemas.grid import GridWindow
from planner.schemas.timetable import DAY_ORDER, GovtTrainingRule, RuleSet, TimeBlock


def slots_per_hour(grid: GridWindow) -> int:
    return 60 // grid.slot_minutes


def total_slots(grid: GridWindow) -> int:
    return (grid.end_hour - grid.start_hour) * slots_per_hour(grid)


def slot_to_minutes(grid: GridWindow, slot: int) -> int:
    return grid.start_hour * 60 + slot * grid.slot_minutes


def slot_to_time(grid: GridWindow, slot: int) -> str:
    minutes = slot_to_minutes(grid, slot)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def hour_to_slot(grid: GridWindow, hour: int) -> int:
    return max(0, (hour - grid.start_hour) * slots_per_hour(grid))


def format_block(grid: GridWindow, block: TimeBlock) -> str:
    start = slot_to_time(grid, block.start_slot)
    end = slot_to_time(grid, block.end_slot)
    return f"{block.day} {start}-{end}"


def sort_blocks(blocks: Iterable[TimeBlock]) -> list[TimeBlock]:
    return sorted(blocks, key=lambda block: (DAY_ORDER.get(block.day, 99), block.start_slot))


def block_cells(block: TimeBlock) -> list[tuple[str, int]]:
    return [(block.day, slot) for slot in range(block.start_slot, block.end_slot)]


def expand_national_program(rules: RuleSet, grid: GridWindow) -> RuleSet:
    """Turn the national-program grades into slot-based training rules.

    Grades that already have an explicit ``GovtTrainingRule`` keep it.
    """
    program = rules.national_program
    if program is None or not program.grades:
        return rules

    covered = {rule.grade for rule in rules.govt_training_rules}
    afternoon_start_slot = hour_to_slot(grid, program.afternoon_start_hour)
    derived = [
        GovtTrainingRule(grade=grade, afternoon_start_slot=afternoon_start_slot)
        for grade in dict.fromkeys(program.grades)
        if grade not in covered
    ]
    if not derived:
        return rules
    return rules.model_copy(update={"govt_training_rules": [*rules.govt_training_rules, *derived]})
