from planner.core.config import Settings, get_settings
from planner.main import app


def rules_payload(**overrides):
    payload = {
        "professors": [
            {"id": "p1", "name": "Prof Kim"},
            {"id": "p2", "name": "Prof Park"},
        ],
        "offerings": [
            {"id": "o1", "courseName": "Networks", "grade": 2, "majorType": "MAJOR", "professorId": "p1", "slotLength": 6},
            {"id": "o2", "courseName": "Circuits", "grade": 2, "majorType": "MAJOR", "professorId": "p2", "slotLength": 6},
        ],
    }
    payload.update(overrides)
    return payload


def placement(offering_id, day, start_slot, slot_length):
    return {"offeringId": offering_id, "block": {"day": day, "startSlot": start_slot, "slotLength": slot_length}}


def test_evaluate_reports_grade_conflict(client):
    response = client.post(
        "/api/placements/evaluate",
        json={
            "rules": rules_payload(),
            "placed": [placement("o1", "MON", 0, 6)],
            "candidate": placement("o2", "MON", 3, 6),
        },
    )

    assert response.status_code == 200
    conflicts = response.json()["conflicts"]
    assert len(conflicts) == 1
    assert conflicts[0]["code"] == "GRADE_CONFLICT"
    assert conflicts[0]["relatedOfferingIds"] == ["o1"]
    assert conflicts[0]["day"] == "MON"
    assert conflicts[0]["slot"] == 3


def test_evaluate_expands_national_program_against_grid(client):
    body = {
        "rules": rules_payload(nationalProgram={"grades": [2], "afternoonStartHour": 13}),
        "candidate": placement("o1", "MON", 2, 6),
        "grid": {"startHour": 9, "endHour": 18, "slotMinutes": 60},
    }

    response = client.post("/api/placements/evaluate", json=body)

    assert response.status_code == 200
    assert [c["code"] for c in response.json()["conflicts"]] == ["GRADE_AFTERNOON_BLOCKED"]


def test_evaluate_rejects_malformed_blocks(client):
    response = client.post(
        "/api/placements/evaluate",
        json={"rules": rules_payload(), "candidate": placement("o1", "SAT", 0, 6)},
    )
    assert response.status_code == 422

    response = client.post(
        "/api/placements/evaluate",
        json={"rules": rules_payload(), "candidate": placement("o1", "MON", 0, 0)},
    )
    assert response.status_code == 422


def test_audit_returns_cells_and_summary(client):
    response = client.post(
        "/api/placements/audit",
        json={
            "rules": rules_payload(),
            "assignments": [placement("o1", "TUE", 0, 6), placement("o2", "TUE", 5, 2)],
        },
    )

    assert response.status_code == 200
    payload = response.json()
    assert [c["code"] for c in payload["conflicts"]] == ["GRADE_CONFLICT"]
    assert payload["conflictedCells"][0] == {"day": "TUE", "slot": 0}
    assert len(payload["conflictedCells"]) == 7
    assert payload["summary"][0].startswith("- Circuits (grade 2)")


def test_suggestions_use_default_grid_and_limit(client):
    response = client.post(
        "/api/placements/suggestions",
        json={"rules": rules_payload(), "placed": [placement("o2", "MON", 0, 6)], "offeringId": "o1"},
    )

    assert response.status_code == 200
    assert response.json()["alternatives"] == [
        {"day": "TUE", "startSlot": 0, "slotLength": 6},
        {"day": "TUE", "startSlot": 1, "slotLength": 6},
        {"day": "TUE", "startSlot": 2, "slotLength": 6},
    ]


def test_suggestions_for_unknown_offering_are_empty(client):
    response = client.post(
        "/api/placements/suggestions",
        json={"rules": rules_payload(), "offeringId": "ghost", "maxResults": 5},
    )

    assert response.status_code == 200
    assert response.json()["alternatives"] == []


def test_inspect_returns_candidate_and_alternatives(client):
    response = client.post(
        "/api/placements/inspect",
        json={
            "rules": rules_payload(lunchRules=[{"day": "MON", "startSlot": 3, "slotLength": 1}]),
            "draft": [placement("o1", "WED", 0, 6)],
            "offeringId": "o1",
            "day": "MON",
            "slot": 0,
            "maxResults": 2,
        },
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["candidate"] == placement("o1", "MON", 0, 6)
    assert [c["code"] for c in payload["conflicts"]] == ["LUNCH_BLOCKED"]
    assert payload["alternatives"] == [
        {"day": "TUE", "startSlot": 0, "slotLength": 6},
        {"day": "TUE", "startSlot": 1, "slotLength": 6},
    ]


def test_invalid_default_grid_maps_to_app_error(client):
    app.dependency_overrides[get_settings] = lambda: Settings(grid_start_hour=18, grid_end_hour=9)
    try:
        response = client.post(
            "/api/placements/suggestions",
            json={"rules": rules_payload(), "offeringId": "o1"},
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json()["message"].startswith("Invalid default grid window")


def test_oversized_body_is_rejected(client):
    response = client.post(
        "/api/placements/evaluate",
        content=b" " * 1_000_001,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 413
    assert response.json()["details"]["max_bytes"] == 1_000_000


def test_unknown_or_empty_offering_ids_come_back_as_conflicts(client):
    for offering_id in ("course-offering-" + "x" * 24, ""):
        response = client.post(
            "/api/placements/evaluate",
            json={"rules": rules_payload(), "candidate": placement(offering_id, "MON", 0, 6)},
        )

        assert response.status_code == 200
        conflicts = response.json()["conflicts"]
        assert [c["code"] for c in conflicts] == ["OFFERING_UNAVAILABLE"]
        assert conflicts[0]["day"] is None


def test_long_ids_and_high_grades_are_accepted(client):
    long_id = "offering-" + "y" * 41
    rules = rules_payload(
        offerings=[
            {"id": long_id, "courseName": "Capstone", "grade": 11, "majorType": "MAJOR", "professorId": "p1", "slotLength": 3},
            {"id": "o2", "courseName": "Circuits", "grade": 11, "majorType": "MAJOR", "professorId": "p2", "slotLength": 3},
        ]
    )

    response = client.post(
        "/api/placements/evaluate",
        json={
            "rules": rules,
            "placed": [placement("o2", "MON", 0, 3)],
            "candidate": placement(long_id, "MON", 1, 3),
        },
    )

    assert response.status_code == 200
    conflicts = response.json()["conflicts"]
    assert [c["code"] for c in conflicts] == ["GRADE_CONFLICT"]
    assert conflicts[0]["relatedOfferingIds"] == ["o2"]
