AS_A = {"X-User-Id": "A"}
AS_B = {"X-User-Id": "B"}


def _url(decision_id, suffix="mine"):
    return f"/v1/decisions/{decision_id}/responsibilities/{suffix}"


def test_mine_is_null_until_saved(client, approved_decision_id):
    response = client.get(_url(approved_decision_id), headers=AS_B)
    assert response.status_code == 200
    assert response.json() is None


def test_update_upserts_partial_answers(client, approved_decision_id):
    first = client.put(
        _url(approved_decision_id),
        json={"brought_topic": "partner", "pushed_execution": None, "main_burden": None},
        headers=AS_B,
    )
    assert first.status_code == 200
    assert first.json()["brought_topic"] == "partner"
    assert first.json()["pushed_execution"] is None

    second = client.put(
        _url(approved_decision_id),
        json={"brought_topic": "partner", "pushed_execution": "dont_remember", "main_burden": "me"},
        headers=AS_B,
    )
    assert second.status_code == 200
    assert second.json()["id"] == first.json()["id"]
    assert second.json()["pushed_execution"] == "dont_remember"

    assert client.get(_url(approved_decision_id), headers=AS_A).json() is None


def test_update_rejects_unknown_burden(client, approved_decision_id):
    response = client.put(
        _url(approved_decision_id),
        json={"brought_topic": "neighbour", "pushed_execution": None, "main_burden": None},
        headers=AS_A,
    )
    assert response.status_code == 422


def test_unknown_decision_is_not_found(client):
    response = client.put(
        _url(77),
        json={"brought_topic": "me", "pushed_execution": "me", "main_burden": "me"},
        headers=AS_A,
    )
    assert response.status_code == 404
    assert client.get(_url(77), headers=AS_A).status_code == 404
