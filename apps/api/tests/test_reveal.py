import pytest

AS_A = {"X-User-Id": "A"}
AS_B = {"X-User-Id": "B"}

GATED_PATHS = (
    "assessments/compare",
    "responsibilities/compare",
    "conclusion",
)


def _lock(client, decision_id, headers):
    response = client.post(f"/v1/decisions/{decision_id}/assessments/mine/lock", headers=headers)
    assert response.status_code == 200, response.text


@pytest.mark.parametrize("path", GATED_PATHS)
def test_gate_closed_when_nobody_locked(client, approved_decision_id, fill_in, path):
    fill_in(approved_decision_id, AS_A)
    fill_in(approved_decision_id, AS_B)

    for headers in (AS_A, AS_B):
        response = client.get(f"/v1/decisions/{approved_decision_id}/{path}", headers=headers)
        assert response.status_code == 403
        assert response.json()["detail"] == "both assessments must be locked"


@pytest.mark.parametrize("locker", [AS_A, AS_B])
@pytest.mark.parametrize("path", GATED_PATHS)
def test_gate_closed_when_one_party_locked(client, approved_decision_id, fill_in, locker, path):
    fill_in(approved_decision_id, AS_A)
    fill_in(approved_decision_id, AS_B)
    _lock(client, approved_decision_id, locker)

    for headers in (AS_A, AS_B):
        response = client.get(f"/v1/decisions/{approved_decision_id}/{path}", headers=headers)
        assert response.status_code == 403


def test_gate_checked_after_decision_exists(client):
    response = client.get("/v1/decisions/123/assessments/compare", headers=AS_A)
    assert response.status_code == 404


def test_assessment_compare_is_caller_relative(client, revealed_decision_id):
    as_a = client.get(f"/v1/decisions/{revealed_decision_id}/assessments/compare", headers=AS_A)
    assert as_a.status_code == 200
    assert as_a.json()["mine"]["rating"] == 4
    assert as_a.json()["partner"]["rating"] == 2
    assert as_a.json()["partner"]["would_do_again"] is False

    as_b = client.get(f"/v1/decisions/{revealed_decision_id}/assessments/compare", headers=AS_B)
    assert as_b.status_code == 200
    assert as_b.json()["mine"] == as_a.json()["partner"]
    assert as_b.json()["partner"] == as_a.json()["mine"]


def test_responsibility_compare_is_caller_relative(client, revealed_decision_id):
    as_a = client.get(f"/v1/decisions/{revealed_decision_id}/responsibilities/compare", headers=AS_A).json()
    as_b = client.get(f"/v1/decisions/{revealed_decision_id}/responsibilities/compare", headers=AS_B).json()

    assert as_a["mine"]["user_id"] == "A"
    assert as_a["partner"]["user_id"] == "B"
    assert as_b["mine"] == as_a["partner"]


def test_compare_includes_items(client, revealed_decision_id):
    body = client.get(f"/v1/decisions/{revealed_decision_id}/assessments/compare", headers=AS_B).json()
    assert [item["type"] for item in body["partner"]["items"]] == ["pro", "con"]


def test_market_drop_walkthrough(client):
    created = client.post(
        "/v1/decisions",
        json={
            "name": "Tech stock position",
            "period": "2023",
            "context": "Bought after a strong quarter",
            "financial_scale": "10k",
            "emotional_impact": "anxious",
        },
        headers=AS_A,
    ).json()
    decision_id = created["id"]
    assert (created["status"], created["approved_by_a"], created["approved_by_b"]) == ("proposal", True, False)

    approved = client.post(f"/v1/decisions/{decision_id}/approve", headers=AS_B).json()
    assert approved["status"] == "approved"

    def submit_and_lock(headers, rating):
        client.put(
            f"/v1/decisions/{decision_id}/assessments/mine",
            json={
                "rating": rating,
                "would_do_again": True,
                "biggest_ignored_risk": "market drop",
                "items": [
                    {"type": "pro", "text": "good return", "sort_order": 0},
                    {"type": "con", "text": "high risk", "sort_order": 1},
                ],
            },
            headers=headers,
        )
        client.put(
            f"/v1/decisions/{decision_id}/responsibilities/mine",
            json={"brought_topic": "me", "pushed_execution": "me", "main_burden": "both"},
            headers=headers,
        )
        return client.post(f"/v1/decisions/{decision_id}/assessments/mine/lock", headers=headers)

    assert submit_and_lock(AS_A, 4).status_code == 200
    assert client.get(f"/v1/decisions/{decision_id}/assessments/compare", headers=AS_B).status_code == 403

    assert submit_and_lock(AS_B, 2).status_code == 200
    compare = client.get(f"/v1/decisions/{decision_id}/assessments/compare", headers=AS_A).json()
    assert compare["mine"]["rating"] == 4
    assert compare["partner"]["rating"] == 2

    client.put(f"/v1/decisions/{decision_id}/conclusion", json={"text": "agreed to diversify next time"}, headers=AS_B)
    for headers in (AS_A, AS_B):
        assert client.get(f"/v1/decisions/{decision_id}/conclusion", headers=headers).json()["text"] == (
            "agreed to diversify next time"
        )
