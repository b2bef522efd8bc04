from __future__ import annotations

import logging
from typing import List, Sequence

from planner.schemas.grid import GridWindow
from planner.schemas.timetable import DAYS, Assignment, RuleSet, TimeBlock
from planner.services.conflict_service import ConflictService
from planner.services.grid import total_slots
from planner.services.rule_index import RuleIndex

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 3


def allowed_blocks_for(rules: RuleSet | RuleIndex, offering_id: str) -> list[TimeBlock] | None:
    """Allow-list for an offering; ``None`` when it has no availability row.

    An empty list means the row exists but places no restriction.
    """
    index = RuleIndex.of(rules)
    blocks = index.allowed_blocks.get(offering_id)
    if blocks is None:
        return None
    return list(blocks)


def suggest_alternatives(
    rules: RuleSet | RuleIndex,
    placed: Sequence[Assignment],
    offering_id: str,
    grid: GridWindow,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> List[TimeBlock]:
    """Conflict-free blocks for ``offering_id``, day-major then slot-ascending.

    ``placed`` should not contain the offering's own current placement.
    """
    index = RuleIndex.of(rules)
    offering = index.offering(offering_id)
    if offering is None or max_results <= 0:
        return []

    service = ConflictService(index)
    last_start = total_slots(grid) - offering.slot_length
    found: List[TimeBlock] = []
    evaluated = 0

    for day in DAYS:
        for start_slot in range(0, last_start + 1):
            block = TimeBlock(day=day, start_slot=start_slot, slot_length=offering.slot_length)
            if not index.is_allowed(offering_id, block):
                continue
            evaluated += 1
            trial = Assignment(offering_id=offering_id, block=block)
            if not service.evaluate_placement(placed, trial):
                found.append(block)
                if len(found) >= max_results:
                    logger.debug("Suggested %d slot(s) for %s after %d check(s)", len(found), offering_id, evaluated)
                    return found

    logger.debug("Suggested %d slot(s) for %s after %d check(s)", len(found), offering_id, evaluated)
    return found
