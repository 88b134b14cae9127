import httpx
import pytest
from fastapi.testclient import TestClient

from backend.api import main
from backend.api.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_welcome(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "Welcome to API."


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_club_players(client, fake_upstream, squad_html):
    calls = fake_upstream(squad_html)

    response = client.get("/api/club/614/players")

    assert response.status_code == 200
    players = response.json()
    assert [p["name"] for p in players] == ["Hugo Souza", "Gabriel Barbosa", "Wesley"]
    assert players[0]["dateOfBirth"] == "31/01/1999"
    assert players[0]["marketValue"] == {"value": 4000000, "currency": "€"}
    assert players[0]["lastClub"]["signed_from_club_id"] == "614"
    assert players[2]["contractUntil"] == "N/A"
    assert players[2]["additionalInformation"] is None
    assert calls[0]["url"].endswith("/club/kader/verein/614/plus/1")


def test_club_players_upstream_failure_returns_empty_list(client, fake_upstream):
    fake_upstream(error=httpx.ConnectError("connection refused"))

    response = client.get("/api/club/614/players")

    assert response.status_code == 200
    assert response.json() == []


def test_club_players_unexpected_error(client, monkeypatch):
    def boom(club_id):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(main, "fetch_squad", boom)

    response = client.get("/api/club/614/players")

    assert response.status_code == 500
    assert response.json() == {"message": "Erro ao buscar dados dos jogadores"}
