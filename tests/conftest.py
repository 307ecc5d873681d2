"""
Fixture comuni: database SQLite in memoria (tabelle ricreate per ogni test)
e TestClient sull'app FastAPI.
"""

import os

# Prima di importare squadra: l'engine viene creato all'import.
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from squadra.core.database import Base, SessionLocal, engine
from squadra.main import app
import squadra.models  # noqa: F401


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_player(client):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "firstName": f"Nome{counter['n']}",
            "lastName": f"Cognome{counter['n']}",
            "number": counter["n"],
            "role": "Centrocampista",
        }
        payload.update(overrides)
        resp = client.post("/api/players", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture
def make_match(client):
    def _make(**overrides):
        payload = {"date": "2024-03-10", "opponent": "Virtus"}
        payload.update(overrides)
        resp = client.post("/api/matches", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture
def lineup(client, make_player, make_match):
    """
    Partita con formazione salvata: 11 TITOLARI e 3 PANCHINA.
    Ritorna (match, starters, bench) con i giocatori come dict JSON.
    """
    def _make(bench_size=3, **match_overrides):
        match = make_match(**match_overrides)
        starters = [make_player() for _ in range(11)]
        bench = [make_player() for _ in range(bench_size)]
        formations = [{"playerId": p["id"], "status": "TITOLARE"} for p in starters]
        formations += [{"playerId": p["id"], "status": "PANCHINA"} for p in bench]
        resp = client.post("/api/formations", json={"matchId": match["id"], "formations": formations})
        assert resp.status_code == 200, resp.text
        return match, starters, bench

    return _make


@pytest.fixture
def formation_rows(client):
    """Righe di formazione di una partita indicizzate per playerId."""
    def _rows(match_id):
        resp = client.get(f"/api/formations/{match_id}")
        assert resp.status_code == 200
        return {row["playerId"]: row for row in resp.json()}

    return _rows
