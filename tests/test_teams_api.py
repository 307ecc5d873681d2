def test_team_crud(client):
    resp = client.post("/api/teams", json={"name": "Virtus"})
    assert resp.status_code == 201
    team = resp.json()

    resp = client.put(f"/api/teams/{team['id']}", json={"name": "Virtus 1920", "logoUrl": "https://example.org/v.png"})
    assert resp.json()["name"] == "Virtus 1920"
    assert resp.json()["logoUrl"] == "https://example.org/v.png"

    assert client.delete(f"/api/teams/{team['id']}").status_code == 204
    assert client.get(f"/api/teams/{team['id']}").status_code == 404


def test_duplicate_name_conflict(client):
    client.post("/api/teams", json={"name": "Virtus"})
    resp = client.post("/api/teams", json={"name": "Virtus"})
    assert resp.status_code == 409
    assert len(client.get("/api/teams").json()) == 1


def test_team_record(client, make_match):
    for home, away in [(2, 0), (1, 1), (0, 3)]:
        match = make_match()
        client.patch(f"/api/matches/{match['id']}", json={"homeScore": home, "awayScore": away})
    make_match()

    record = client.get("/api/stats/team").json()

    assert record == {
        "played": 3, "wins": 1, "draws": 1, "losses": 1,
        "goalsFor": 3, "goalsAgainst": 4, "goalDiff": -1, "points": 4,
    }
