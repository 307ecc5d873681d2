def convocation_body(**overrides):
    body = {
        "name": "Convocazione Virtus",
        "matchDate": "2024-03-10",
        "fieldArrivalTime": "14:15",
        "matchStartTime": "15:00",
        "opponent": "Virtus",
        "isHome": 0,
        "playerIds": [3, 1, 3, 2],
    }
    body.update(overrides)
    return body


def test_create_and_read(client):
    resp = client.post("/api/convocations", json=convocation_body())

    assert resp.status_code == 201
    created = resp.json()
    assert created["playerIds"] == [3, 1, 2]
    assert client.get(f"/api/convocations/{created['id']}").json()["opponent"] == "Virtus"
    assert len(client.get("/api/convocations").json()) == 1


def test_validation(client):
    assert client.post("/api/convocations", json=convocation_body(matchStartTime="3pm")).status_code == 400
    assert client.post("/api/convocations", json=convocation_body(name="")).status_code == 400


def test_patch(client):
    created = client.post("/api/convocations", json=convocation_body()).json()

    resp = client.patch(f"/api/convocations/{created['id']}", json={"playerIds": [5, 6], "name": None})

    assert resp.status_code == 200
    assert resp.json()["playerIds"] == [5, 6]
    assert resp.json()["name"] == "Convocazione Virtus"
    assert client.patch("/api/convocations/999", json={"opponent": "x"}).status_code == 404


def test_delete_detaches_matches(client, make_match):
    created = client.post("/api/convocations", json=convocation_body()).json()
    match = make_match(convocationId=created["id"])
    assert match["convocationId"] == created["id"]

    assert client.delete(f"/api/convocations/{created['id']}").status_code == 204

    assert client.get(f"/api/matches/{match['id']}").json()["convocationId"] is None
    assert client.get(f"/api/convocations/{created['id']}").status_code == 404


def test_create_match_from_convocation(client, make_player):
    players = [make_player() for _ in range(14)]
    ids = [p["id"] for p in players]
    convocation = client.post("/api/convocations", json=convocation_body(playerIds=ids)).json()

    resp = client.post(
        f"/api/convocations/{convocation['id']}/match",
        json={"starterIds": ids[:11], "formation": "4-4-2"},
    )

    assert resp.status_code == 201, resp.text
    body = resp.json()
    statuses = {row["playerId"]: row["status"] for row in body["formations"]}
    assert [statuses[pid] for pid in ids] == ["TITOLARE"] * 11 + ["PANCHINA"] * 3

    match = client.get(f"/api/matches/{body['matchId']}").json()
    assert (match["date"], match["opponent"], match["convocationId"]) == ("2024-03-10", "Virtus", convocation["id"])
    assert client.post(f"/api/matches/{match['id']}/start").status_code == 200


def test_create_match_from_convocation_rejects_bad_starters(client, make_player):
    ids = [make_player()["id"] for _ in range(12)]
    convocation = client.post("/api/convocations", json=convocation_body(playerIds=ids)).json()
    url = f"/api/convocations/{convocation['id']}/match"

    assert client.post(url, json={"starterIds": ids[:10]}).status_code == 400
    assert client.post(url, json={"starterIds": ids[:10] + [999]}).status_code == 400
    assert client.get("/api/matches").json() == []
    assert client.post("/api/convocations/999/match", json={"starterIds": ids[:11]}).status_code == 404
