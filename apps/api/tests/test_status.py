from datetime import datetime, timezone

from retro.models.entities import UserEnum
from retro.services import presence

AS_A = {"X-User-Id": "A"}
AS_B = {"X-User-Id": "B"}


def test_status_counts_decisions(client, propose, approved_decision_id):
    propose(name="Pending proposal")
    client.post(f"/v1/decisions/{approved_decision_id}/close", headers=AS_A)

    body = client.get("/v1/status", headers=AS_A).json()
    assert body["total_decisions"] == 2
    assert body["approved_decisions"] == 0
    assert body["closed_decisions"] == 1


def test_status_reports_partner_presence(client):
    assert client.get("/v1/status", headers=AS_A).json()["partner_last_seen"] is None

    client.get("/v1/status", headers=AS_B)

    assert client.get("/v1/status", headers=AS_A).json()["partner_last_seen"] is not None
    assert presence.last_seen(UserEnum.a) is not None


def test_presence_keeps_latest_timestamp():
    seen_at = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    presence.mark_seen(UserEnum.b, at=seen_at)
    assert presence.last_seen(UserEnum.b) == seen_at
    assert presence.last_seen(UserEnum.a) is None


def test_dashboard_ignores_unrevealed_assessments(client, approved_decision_id, fill_in):
    fill_in(approved_decision_id, AS_A, rating=5)
    client.post(f"/v1/decisions/{approved_decision_id}/assessments/mine/lock", headers=AS_A)

    body = client.get("/v1/status/dashboard", headers=AS_B).json()
    assert body["total_decisions"] == 1
    assert body["approved_decisions"] == 1
    assert body["ratings"] == []
    assert body["would_do_again"] == []
    assert body["rating_diffs"] == []


def test_dashboard_aggregates_revealed_decisions(client, revealed_decision_id):
    client.post("/v1/meta-conclusions", json={"type": "rule", "title": "Cap", "description": "Set a cap"}, headers=AS_A)
    client.post("/v1/meta-conclusions", json={"type": "rule", "title": "Wait", "description": "Wait a week"}, headers=AS_B)

    body = client.get("/v1/status/dashboard", headers=AS_A).json()
    assert body["ratings"] == [{"rating": 2, "count": 1}, {"rating": 4, "count": 1}]
    assert body["would_do_again"] == [
        {"would_do_again": False, "count": 1},
        {"would_do_again": True, "count": 1},
    ]
    assert body["rating_diffs"] == [
        {"decision_id": revealed_decision_id, "name": "New car", "rating_a": 4, "rating_b": 2, "diff": 2}
    ]
    assert body["meta_counts"] == [{"type": "rule", "count": 2}]
