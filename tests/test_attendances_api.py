from datetime import date, timedelta


def test_upsert_on_date_and_player(client, make_player):
    player = make_player()
    body = {"date": "2024-03-01", "playerId": player["id"], "status": "Presente"}

    first = client.post("/api/attendances", json=body)
    second = client.post("/api/attendances", json={**body, "status": "Infortunato", "notes": "caviglia"})

    assert first.status_code == second.status_code == 200
    assert first.json()["id"] == second.json()["id"]
    rows = client.get("/api/attendances").json()
    assert len(rows) == 1
    assert (rows[0]["status"], rows[0]["notes"]) == ("Infortunato", "caviglia")


def test_list_by_date(client, make_player):
    player = make_player()
    for day in ("2024-03-01", "2024-03-04"):
        client.post("/api/attendances", json={"date": day, "playerId": player["id"], "status": "Presente"})

    rows = client.get("/api/attendances/2024-03-04").json()

    assert [r["date"] for r in rows] == ["2024-03-04"]


def test_attendance_validation(client, make_player):
    player = make_player()
    assert client.post("/api/attendances", json={"date": "2024-03-01", "playerId": player["id"], "status": "Forse"}).status_code == 400
    assert client.post("/api/attendances", json={"date": "01-03-2024", "playerId": player["id"], "status": "Presente"}).status_code == 400
    assert client.post("/api/attendances", json={"date": "2024-03-01", "playerId": 999, "status": "Presente"}).status_code == 404


def test_delete_attendance(client, make_player):
    player = make_player()
    row = client.post("/api/attendances", json={"date": "2024-03-01", "playerId": player["id"], "status": "Assente"}).json()

    assert client.delete(f"/api/attendances/{row['id']}").status_code == 204
    assert client.get("/api/attendances").json() == []
    assert client.delete(f"/api/attendances/{row['id']}").status_code == 404


def test_attendance_counts_in_player_stats(client, make_player):
    player = make_player()
    client.post("/api/attendances", json={"date": "2024-03-01", "playerId": player["id"], "status": "Presente"})
    client.post("/api/attendances", json={"date": "2024-03-04", "playerId": player["id"], "status": "Assente"})

    rows = client.get("/api/stats/players").json()

    assert rows[0]["attendancePresent"] == 1
    assert rows[0]["attendanceAbsent"] == 1


def mark(client, player_id, day, status):
    resp = client.post("/api/attendances", json={"date": day, "playerId": player_id, "status": status})
    assert resp.status_code == 200


def test_weekly_planner(client, make_player):
    player = make_player(role="Portiere")
    mark(client, player["id"], "2024-03-04", "Presente")
    mark(client, player["id"], "2024-03-07", "Assente")

    resp = client.get("/api/attendances/weekly-planner", params={"date": "2024-03-06"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["weekStart"] == "2024-03-04"
    assert body["days"] == {"monday": "2024-03-04", "wednesday": "2024-03-06", "thursday": "2024-03-07"}
    row = body["players"][0]
    assert (row["id"], row["firstName"], row["role"]) == (player["id"], player["firstName"], "Portiere")
    assert row["attendances"] == {"monday": "Presente", "wednesday": None, "thursday": "Assente"}


def test_weekly_planner_defaults_to_current_week(client, make_player):
    make_player()
    resp = client.get("/api/attendances/weekly-planner")
    assert resp.status_code == 200
    assert len(resp.json()["players"]) == 1


def test_monthly_planner(client, make_player):
    player = make_player()
    mark(client, player["id"], "2024-03-04", "Presente")
    mark(client, player["id"], "2024-03-13", "Assente")
    mark(client, player["id"], "2024-03-14", "Infortunato")

    resp = client.get("/api/attendances/monthly-planner", params={"yearMonth": "2024-03"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["yearMonth"] == "2024-03"
    assert body["trainingDays"][0] == {"date": "2024-03-04", "dayName": "Lunedì", "dayNum": 4, "monthAbbr": "mar"}
    row = body["players"][0]
    assert (row["totalPresenze"], row["totalAssenze"]) == (1, 1)
    assert row["attendances"]["2024-03-14"] == "Infortunato"
    assert len(row["attendances"]) == len(body["trainingDays"])


def test_planner_rejects_malformed_dates(client):
    assert client.get("/api/attendances/weekly-planner", params={"date": "06/03/2024"}).status_code == 400
    assert client.get("/api/attendances/monthly-planner", params={"yearMonth": "2024-13"}).status_code == 400


def test_recent_attendances(client, make_player):
    today = date.today()
    player, other = make_player(), make_player()
    mark(client, player["id"], today.isoformat(), "Presente")
    mark(client, player["id"], (today - timedelta(days=2)).isoformat(), "Infortunato")
    mark(client, player["id"], (today - timedelta(days=20)).isoformat(), "Presente")

    rows = {r["playerId"]: r for r in client.get("/api/attendances/recent").json()}
    assert (rows[player["id"]]["presentiCount"], rows[player["id"]]["infortunatoCount"]) == (1, 1)
    assert (rows[other["id"]]["presentiCount"], rows[other["id"]]["infortunatoCount"]) == (0, 0)

    rows = {r["playerId"]: r for r in client.get("/api/attendances/recent/30").json()}
    assert rows[player["id"]]["presentiCount"] == 2

    assert client.get("/api/attendances/recent/0").status_code == 400
