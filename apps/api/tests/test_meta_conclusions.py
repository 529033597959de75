AS_A = {"X-User-Id": "A"}
AS_B = {"X-User-Id": "B"}


def _create(client, **overrides):
    payload = {"type": "bias", "title": "Sunk cost", "description": "We kept paying because we had paid."}
    payload.update(overrides)
    response = client.post("/v1/meta-conclusions", json=payload, headers=AS_A)
    assert response.status_code == 201, response.text
    return response.json()


def test_list_is_newest_first(client):
    older = _create(client, title="Sunk cost")
    newer = _create(client, type="rule", title="Sleep on it")

    response = client.get("/v1/meta-conclusions", headers=AS_B)
    assert response.status_code == 200
    assert [item["id"] for item in response.json()["items"]] == [newer["id"], older["id"]]


def test_update_changes_only_given_fields(client):
    meta = _create(client)

    response = client.patch(f"/v1/meta-conclusions/{meta['id']}", json={"type": "red_flag"}, headers=AS_B)
    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "red_flag"
    assert body["title"] == meta["title"]
    assert body["description"] == meta["description"]


def test_update_and_delete_unknown_id(client):
    update = client.patch("/v1/meta-conclusions/42", json={"title": "Nope"}, headers=AS_A)
    assert update.status_code == 404
    assert update.json()["detail"] == "meta conclusion not found"

    delete = client.delete("/v1/meta-conclusions/42", headers=AS_A)
    assert delete.status_code == 404


def test_delete_removes_entry(client):
    meta = _create(client)

    first = client.delete(f"/v1/meta-conclusions/{meta['id']}", headers=AS_B)
    assert first.status_code == 204

    second = client.delete(f"/v1/meta-conclusions/{meta['id']}", headers=AS_B)
    assert second.status_code == 404
    assert client.get("/v1/meta-conclusions", headers=AS_A).json() == {"items": []}


def test_create_validates_payload(client):
    bad_type = client.post(
        "/v1/meta-conclusions",
        json={"type": "habit", "title": "t", "description": "d"},
        headers=AS_A,
    )
    assert bad_type.status_code == 422

    empty_title = client.post(
        "/v1/meta-conclusions",
        json={"type": "rule", "title": "", "description": "d"},
        headers=AS_A,
    )
    assert empty_title.status_code == 422
