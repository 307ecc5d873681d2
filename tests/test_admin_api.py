def test_complete_deletion_restores_suspensions(client, lineup, make_player):
    match, starters, bench = lineup()
    mid = match["id"]
    in_formation = starters[0]
    client.patch(f"/api/players/{in_formation['id']}", json={"suspensionDays": 2})
    outside = make_player(suspensionDays=2)
    client.post(f"/api/matches/{mid}/events", json={"eventType": "Gol", "minute": 5, "playerId": starters[1]["id"]})
    client.patch(f"/api/formations/{mid}/{starters[1]['id']}/minutes", json={"minutesPlayed": 90, "minuteEntered": 0})

    resp = client.delete(f"/api/admin/matches/{mid}/complete")

    assert resp.status_code == 200
    assert resp.json() == {"matchId": mid, "suspensionsRestored": 1, "eventsDeleted": 1, "formationsReset": 14}
    assert client.get(f"/api/players/{in_formation['id']}").json()["suspensionDays"] == 3
    assert client.get(f"/api/players/{outside['id']}").json()["suspensionDays"] == 2
    assert mid not in [m["id"] for m in client.get("/api/matches").json()]
    assert client.get("/api/matches/all-events").json() == []


def test_complete_deletion_unknown_match(client):
    assert client.delete("/api/admin/matches/999/complete").status_code == 404


def test_save_then_complete_delete_round_trip(client, lineup):
    match, starters, _ = lineup()
    mid = match["id"]
    player_id = starters[0]["id"]
    client.patch(f"/api/players/{player_id}", json={"suspensionDays": 2})

    client.post(f"/api/matches/{mid}/offline-save", json={"events": [{"eventType": "Nota", "minute": 1}]})
    assert client.get(f"/api/players/{player_id}").json()["suspensionDays"] == 1

    client.delete(f"/api/admin/matches/{mid}/complete")
    assert client.get(f"/api/players/{player_id}").json()["suspensionDays"] == 2


def test_training_sessions(client, make_player):
    a, b = make_player(), make_player()
    for date, player, status in [
        ("2024-03-01", a, "Presente"),
        ("2024-03-01", b, "Infortunato"),
        ("2024-03-04", a, "Presente"),
        ("2024-03-04", b, "Assente"),
    ]:
        client.post("/api/attendances", json={"date": date, "playerId": player["id"], "status": status})

    sessions = client.get("/api/admin/training-sessions").json()

    assert [s["date"] for s in sessions] == ["2024-03-04", "2024-03-01"]
    assert sessions[0] == {"date": "2024-03-04", "presenti": 1, "assenti": 1, "infortunati": 0, "totale": 2}

    resp = client.delete("/api/admin/training-sessions/2024-03-01")
    assert resp.json()["deleted"] == 2
    assert [s["date"] for s in client.get("/api/admin/training-sessions").json()] == ["2024-03-04"]
    assert client.delete("/api/admin/training-sessions/2024-03-01").status_code == 404
