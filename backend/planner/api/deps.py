from fastapi import Depends

from planner.core.config import Settings, get_settings
from planner.schemas.grid import GridWindow
from planner.schemas.timetable import RuleSet
from planner.services.grid import expand_national_program
from planner.services.rule_index import RuleIndex


def get_default_grid(settings: Settings = Depends(get_settings)) -> GridWindow:
    return settings.default_grid()


def get_max_results(settings: Settings = Depends(get_settings)) -> int:
    return max(0, settings.suggestion_max_results)


def build_index(rules: RuleSet, grid: GridWindow) -> RuleIndex:
    return RuleIndex(expand_national_program(rules, grid))
