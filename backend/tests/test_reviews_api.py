import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from pixelgate.main import app
from pixelgate.validation import messages

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def _load(name: str) -> dict:
    return json.loads((EXAMPLES_DIR / name).read_text(encoding="utf-8"))


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_review_accepts_claim(client):
    response = client.post("/api/v1/reviews", json=_load("claim_pixel.json"))

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "COMPLETED"
    assert body["passed"] is True
    assert body["report"] == [{"kind": "MESSAGE", "text": messages.THANK_YOU}]
    assert body["verdict"] == {"ok": True, "reasons": []}
    assert len(body["steps"]) == 6


def test_review_flags_extra_files(client):
    response = client.post("/api/v1/reviews", json=_load("extra_files.json"))

    assert response.status_code == 200
    body = response.json()
    assert body["passed"] is False
    assert [entry["kind"] for entry in body["report"]] == ["FAIL", "MARKDOWN"]
    assert "- README.md" in body["rendered"]
    assert body["verdict"] is None


def test_review_rejects_event_without_submitter(client):
    response = client.post("/api/v1/reviews", json={"change_set": {"lines_of_code": 1}})
    assert response.status_code == 422


def test_review_reports_failed_run(client):
    event = _load("claim_pixel.json")
    event["patches"] = {}

    response = client.post("/api/v1/reviews", json=event)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "FAILED"
    assert body["passed"] is False
    assert body["error"]


def test_patch_check_rejects_override_of_claimed_pixel(client):
    payload = {
        "submitter": "alice",
        "patch": {
            "before": {"data": [{"x": 0, "y": 0, "color": "#000", "username": "bob"}]},
            "after": {"data": [{"x": 0, "y": 0, "color": "#000", "username": "alice"}]},
            "diff": [{"op": "replace", "path": "/data/0/username", "value": "alice"}],
        },
    }

    response = client.post("/api/v1/reviews/patch", json=payload)

    assert response.status_code == 200
    assert response.json() == {
        "ok": False,
        "reasons": [{"category": "OWNERSHIP", "text": messages.OVERRIDE_PIXEL}],
    }


def test_patch_check_accepts_new_pixel(client):
    payload = {
        "submitter": "alice",
        "patch": {
            "before": {"data": []},
            "after": {"data": [{"x": 3, "y": 4, "color": "#abcdef", "username": "alice"}]},
            "diff": [{"op": "add", "path": "/data/0", "value": {"x": 3, "y": 4, "color": "#abcdef", "username": "alice"}}],
        },
    }

    response = client.post("/api/v1/reviews/patch", json=payload)

    assert response.status_code == 200
    assert response.json() == {"ok": True, "reasons": []}


def test_patch_check_unsupported_operation(client):
    payload = {
        "submitter": "alice",
        "patch": {"diff": [{"op": "copy", "from": "/data/0", "path": "/data/1"}]},
    }

    response = client.post("/api/v1/reviews/patch", json=payload)

    assert response.status_code == 200
    assert response.json() == {
        "ok": False,
        "reasons": [{"category": "STRUCTURAL", "text": messages.ONE_PIXEL_PER_USER}],
    }


def test_patch_check_operation_without_path_is_unprocessable(client):
    payload = {"submitter": "alice", "patch": {"diff": [{"op": "remove"}]}}

    response = client.post("/api/v1/reviews/patch", json=payload)

    assert response.status_code == 422


def test_patch_check_missing_record_is_unprocessable(client):
    payload = {
        "submitter": "alice",
        "patch": {
            "before": {"data": []},
            "after": {"data": []},
            "diff": [{"op": "replace", "path": "/data/2/color", "value": "#fff"}],
        },
    }

    response = client.post("/api/v1/reviews/patch", json=payload)

    assert response.status_code == 422


def test_patch_check_accepts_huge_integer_coordinate(client):
    pixel = {"x": 10**400, "y": 4, "color": "#abcdef", "username": "alice"}
    payload = {
        "submitter": "alice",
        "patch": {"before": {"data": []}, "after": {"data": [pixel]}, "diff": [{"op": "add", "path": "/data/0", "value": pixel}]},
    }

    response = client.post("/api/v1/reviews/patch", json=payload)

    assert response.status_code == 200
    assert response.json() == {"ok": True, "reasons": []}
