from __future__ import annotations

from planner.schemas.timetable import (
    CourseOffering,
    GovtTrainingRule,
    Professor,
    RuleSet,
    TimeBlock,
)


class RuleIndex:
    """Lookup tables over one immutable rule set.

    Build it once per rule-set revision and hand it to the detector or the
    suggester instead of the raw ``RuleSet`` to avoid rebuilding the maps on
    every evaluation.
    """

    def __init__(self, rules: RuleSet):
        self.rules = rules
        self.offerings: dict[str, CourseOffering] = {offering.id: offering for offering in rules.offerings}
        self.professors: dict[str, Professor] = {professor.id: professor for professor in rules.professors}
        self.professor_unavailable: dict[str, list[TimeBlock]] = {
            rule.professor_id: list(rule.blocks) for rule in rules.professor_unavailable_rules
        }
        self.allowed_blocks: dict[str, list[TimeBlock]] = {
            row.offering_id: list(row.allowed_blocks) for row in rules.availability
        }
        self.allowed_keys: dict[str, frozenset[tuple[str, int, int]]] = {
            offering_id: frozenset(block.key() for block in blocks)
            for offering_id, blocks in self.allowed_blocks.items()
        }
        # First rule wins when a grade is listed twice.
        self.govt_training: dict[int, GovtTrainingRule] = {}
        for rule in rules.govt_training_rules:
            self.govt_training.setdefault(rule.grade, rule)

    @classmethod
    def of(cls, rules: RuleSet | RuleIndex) -> RuleIndex:
        if isinstance(rules, RuleIndex):
            return rules
        return cls(rules)

    def offering(self, offering_id: str) -> CourseOffering | None:
        return self.offerings.get(offering_id)

    def is_allowed(self, offering_id: str, block: TimeBlock) -> bool:
        """True unless the offering has a non-empty allow-list missing ``block``."""
        keys = self.allowed_keys.get(offering_id)
        if not keys:
            return True
        return block.key() in keys
