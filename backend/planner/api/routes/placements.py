import logging

from fastapi import APIRouter, Depends

from planner.api.deps import build_index, get_default_grid, get_max_results
from planner.schemas.conflict import (
    AuditRequest,
    ConflictReport,
    DraftAudit,
    EvaluatePlacementRequest,
    InspectRequest,
    PlacementInspection,
    SuggestionReport,
    SuggestionRequest,
)
from planner.schemas.grid import GridWindow
from planner.services.conflict_service import ConflictService
from planner.services.draft import audit_draft, inspect_placement
from planner.services.suggestion_service import suggest_alternatives

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/evaluate", response_model=ConflictReport)
def evaluate(
    payload: EvaluatePlacementRequest,
    default_grid: GridWindow = Depends(get_default_grid),
):
    index = build_index(payload.rules, payload.grid or default_grid)
    conflicts = ConflictService(index).evaluate_placement(payload.placed, payload.candidate)
    logger.info(
        "Evaluated %s against %d placement(s): %d conflict(s)",
        payload.candidate.offering_id,
        len(payload.placed),
        len(conflicts),
    )
    return ConflictReport(conflicts=conflicts)


@router.post("/audit", response_model=DraftAudit)
def audit_assignments(
    payload: AuditRequest,
    default_grid: GridWindow = Depends(get_default_grid),
):
    index = build_index(payload.rules, payload.grid or default_grid)
    report = audit_draft(index, payload.assignments)
    logger.info("Audited %d assignment(s): %d conflict(s)", len(payload.assignments), len(report.conflicts))
    return report


@router.post("/suggestions", response_model=SuggestionReport)
def suggest(
    payload: SuggestionRequest,
    default_grid: GridWindow = Depends(get_default_grid),
    default_max_results: int = Depends(get_max_results),
):
    grid = payload.grid or default_grid
    max_results = default_max_results if payload.max_results is None else payload.max_results
    index = build_index(payload.rules, grid)
    alternatives = suggest_alternatives(index, payload.placed, payload.offering_id, grid, max_results)
    logger.info("Suggested %d alternative(s) for %s", len(alternatives), payload.offering_id)
    return SuggestionReport(alternatives=alternatives)


@router.post("/inspect", response_model=PlacementInspection)
def inspect_cell(
    payload: InspectRequest,
    default_grid: GridWindow = Depends(get_default_grid),
    default_max_results: int = Depends(get_max_results),
):
    grid = payload.grid or default_grid
    max_results = default_max_results if payload.max_results is None else payload.max_results
    index = build_index(payload.rules, grid)
    return inspect_placement(index, payload.draft, payload.offering_id, payload.day, payload.slot, grid, max_results)
