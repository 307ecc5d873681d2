def save(client, match_id, events, first_extra=0, second_extra=0):
    return client.post(
        f"/api/matches/{match_id}/offline-save",
        json={"firstHalfExtraTime": first_extra, "secondHalfExtraTime": second_extra, "events": events},
    )


def test_offline_save_with_substitution(client, lineup, formation_rows):
    match, starters, bench = lineup()
    x, y = starters[0], bench[0]
    events = [
        {"eventType": "Gol", "minute": 12, "half": 1, "playerId": starters[9]["id"]},
        {"eventType": "Sostituzione", "minute": 20, "half": 2, "playerId": x["id"], "secondPlayerId": y["id"]},
        {"eventType": "Goal Subito", "minute": 30, "half": 2},
        {"eventType": "Gol", "minute": 40, "half": 2, "playerId": y["id"]},
    ]

    resp = save(client, match["id"], events, first_extra=0, second_extra=3)

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["eventsSaved"] == 4
    assert body["formationsUpdated"] == 12
    assert body["match"]["homeScore"] == 2
    assert body["match"]["awayScore"] == 1
    assert body["match"]["finalScore"] == "2-1"
    assert body["match"]["secondHalfExtraTime"] == 3

    rows = formation_rows(match["id"])
    assert rows[x["id"]]["minutesPlayed"] == 65
    assert rows[y["id"]]["minuteEntered"] == 65
    assert rows[y["id"]]["minutesPlayed"] == 28
    assert rows[starters[1]["id"]]["minutesPlayed"] == 93
    assert rows[bench[1]["id"]]["minutesPlayed"] is None

    assert len(client.get(f"/api/matches/{match['id']}/events").json()) == 4


def test_offline_save_full_match_extra_time(client, lineup, formation_rows):
    match, starters, _ = lineup()
    events = [
        {"eventType": "Gol", "minute": 10, "half": 1, "playerId": starters[5]["id"]},
        {"eventType": "Gol", "minute": 30, "half": 2, "playerId": starters[6]["id"]},
    ]

    resp = save(client, match["id"], events, first_extra=1, second_extra=3)

    assert resp.status_code == 200
    rows = formation_rows(match["id"])
    assert {rows[p["id"]]["minutesPlayed"] for p in starters} == {94}
    assert client.get(f"/api/matches/{match['id']}/stats").json()["totals"]["goals"] == 2


def test_offline_save_decrements_suspensions(client, lineup, make_player):
    match, starters, _ = lineup()
    last_day = make_player(suspensionDays=1, convocationStatus="Espulso")
    two_days = make_player(suspensionDays=2, convocationStatus="Espulso")

    resp = save(client, match["id"], [{"eventType": "Nota", "minute": 1, "description": "ok"}])

    assert resp.json()["suspensionsUpdated"] == 2
    first = client.get(f"/api/players/{last_day['id']}").json()
    second = client.get(f"/api/players/{two_days['id']}").json()
    assert (first["suspensionDays"], first["convocationStatus"]) == (0, "Convocabile")
    assert (second["suspensionDays"], second["convocationStatus"]) == (1, "Espulso")
    assert client.get(f"/api/players/{starters[0]['id']}").json()["suspensionDays"] == 0


def test_offline_save_rejects_empty_buffer(client, lineup):
    match, _, _ = lineup()
    resp = save(client, match["id"], [])
    assert resp.status_code == 400
    assert client.get(f"/api/matches/{match['id']}").json()["finalScore"] is None


def test_offline_save_is_atomic(client, lineup, make_player, formation_rows):
    match, starters, _ = lineup()
    suspended = make_player(suspensionDays=2)
    events = [
        {"eventType": "Gol", "minute": 10, "half": 1, "playerId": starters[0]["id"]},
        {"eventType": "Gol", "minute": 20, "half": 1, "playerId": 9999},
    ]

    resp = save(client, match["id"], events)

    assert resp.status_code == 400
    assert client.get(f"/api/matches/{match['id']}/events").json() == []
    assert client.get(f"/api/matches/{match['id']}").json()["homeScore"] is None
    assert client.get(f"/api/players/{suspended['id']}").json()["suspensionDays"] == 2
    assert formation_rows(match["id"])[starters[0]["id"]]["minutesPlayed"] is None


def test_offline_save_validation(client, lineup):
    match, _, _ = lineup()
    assert save(client, match["id"], [{"eventType": "Gol", "minute": 1}], first_extra=16).status_code == 400
    assert save(client, 999, [{"eventType": "Gol", "minute": 1}]).status_code == 404
