"""
API tests for franchise endpoints.

Uses FastAPI TestClient against an app backed by a fresh, seeded in-memory
database per test.
"""

import pytest
from fastapi.testclient import TestClient

from movie_characters.api.main import create_app


@pytest.fixture
def client():
    app = create_app(database_url="sqlite://", seed=True)
    with TestClient(app) as client:
        yield client


# One past the largest value a 64-bit integer column holds
HUGE = 2**63


class TestFranchiseEndpoints:
    """Tests for /api/franchises CRUD."""

    def test_list_franchises(self, client):
        """GET /api/franchises returns every franchise with movie ids."""
        r = client.get("/api/franchises")
        assert r.status_code == 200
        assert r.json() == [
            {"id": 1, "name": "MCU", "description": "Marvel's cinematic universe.", "movies": [1, 2]},
            {"id": 2, "name": "DNT", "description": "Dark Knight Trilogy", "movies": []},
            {"id": 3, "name": "TCU", "description": "Titanic's cinematic universe.", "movies": []},
        ]

    def test_get_franchise(self, client):
        """GET /api/franchises/{id} returns the franchise."""
        r = client.get("/api/franchises/1")
        assert r.status_code == 200
        assert r.json()["name"] == "MCU"
        assert r.json()["movies"] == [1, 2]

    def test_get_franchise_not_found(self, client):
        """GET /api/franchises/{id} returns 404 for a missing franchise."""
        assert client.get("/api/franchises/999").status_code == 404

    def test_franchise_id_out_of_range(self, client):
        """Franchise ids beyond 64 bits are reported as missing."""
        assert client.get(f"/api/franchises/{HUGE}").status_code == 404
        assert client.get(f"/api/franchises/{HUGE}/movies").status_code == 404
        assert client.delete(f"/api/franchises/{HUGE}").status_code == 404

    def test_create_franchise(self, client):
        """POST /api/franchises returns 201 with Location and body."""
        r = client.post("/api/franchises", json={"name": "DCEU", "description": "DC films"})
        assert r.status_code == 201
        assert r.json() == {"id": 4, "name": "DCEU", "description": "DC films", "movies": []}
        assert r.headers["location"].endswith("/api/franchises/4")
        assert client.get("/api/franchises/4").json()["name"] == "DCEU"

    def test_create_franchise_missing_name(self, client):
        """POST /api/franchises without a name returns 400."""
        assert client.post("/api/franchises", json={"description": "x"}).status_code == 400

    def test_update_franchise(self, client):
        """PUT /api/franchises/{id} replaces the fields."""
        r = client.put("/api/franchises/2", json={"id": 2, "name": "The Dark Knight Trilogy"})
        assert r.status_code == 204

        data = client.get("/api/franchises/2").json()
        assert data["name"] == "The Dark Knight Trilogy"
        assert data["description"] is None

    def test_update_franchise_id_mismatch(self, client):
        """PUT /api/franchises/{id} with a different body id returns 400."""
        r = client.put("/api/franchises/2", json={"id": 3, "name": "Changed"})
        assert r.status_code == 400
        assert client.get("/api/franchises/3").json()["name"] == "TCU"

    def test_update_franchise_not_found(self, client):
        """PUT /api/franchises/{id} returns 404 for a missing franchise."""
        r = client.put("/api/franchises/999", json={"id": 999, "name": "Nothing"})
        assert r.status_code == 404

    def test_delete_franchise(self, client):
        """DELETE /api/franchises/{id} keeps the movies, without franchise."""
        r = client.delete("/api/franchises/1")
        assert r.status_code == 204

        assert client.get("/api/franchises/1").status_code == 404
        for movie_id in (1, 2):
            movie = client.get(f"/api/movies/{movie_id}")
            assert movie.status_code == 200
            assert movie.json()["franchise"] is None

    def test_delete_franchise_not_found(self, client):
        """DELETE /api/franchises/{id} returns 404 for a missing franchise."""
        assert client.delete("/api/franchises/999").status_code == 404


class TestFranchiseRelationEndpoints:
    """Tests for /api/franchises/{id}/movies and /characters."""

    def test_get_franchise_movies(self, client):
        """GET /api/franchises/{id}/movies returns full movie resources."""
        r = client.get("/api/franchises/1/movies")
        assert r.status_code == 200
        assert [m["title"] for m in r.json()] == ["The Avengers", "Avengers: Endgame"]

    def test_get_franchise_movies_not_found(self, client):
        """GET /api/franchises/{id}/movies returns 404 for a missing franchise."""
        assert client.get("/api/franchises/999/movies").status_code == 404

    def test_get_franchise_characters(self, client):
        """GET /api/franchises/{id}/characters lists each character once."""
        r = client.get("/api/franchises/1/characters")
        assert r.status_code == 200
        assert [c["id"] for c in r.json()] == [1, 2, 3, 4]

    def test_get_franchise_characters_not_found(self, client):
        """GET /api/franchises/{id}/characters returns 404 for a missing franchise."""
        assert client.get("/api/franchises/999/characters").status_code == 404

    def test_replace_franchise_movies(self, client):
        """PUT /api/franchises/{id}/movies then GET returns exactly those movies."""
        r = client.put("/api/franchises/1/movies", json=[1, 2])
        assert r.status_code == 204

        movies = client.get("/api/franchises/1/movies").json()
        assert [m["id"] for m in movies] == [1, 2]

    def test_replace_franchise_movies_moves_and_detaches(self, client):
        """PUT /api/franchises/{id}/movies replaces rather than merges."""
        assert client.put("/api/franchises/2/movies", json=[2, 3]).status_code == 204

        assert client.get("/api/franchises/2").json()["movies"] == [2, 3]
        assert client.get("/api/franchises/1").json()["movies"] == [1]

        assert client.put("/api/franchises/2/movies", json=[3]).status_code == 204
        assert client.get("/api/franchises/2").json()["movies"] == [3]
        assert client.get("/api/movies/2").json()["franchise"] is None
        assert [c["name"] for c in client.get("/api/franchises/2/characters").json()] == ["Batman"]

    def test_replace_franchise_movies_unknown_movie(self, client):
        """PUT /api/franchises/{id}/movies with an unknown id returns 400 and changes nothing."""
        r = client.put("/api/franchises/3/movies", json=[4, 999])
        assert r.status_code == 400
        assert client.get("/api/franchises/3").json()["movies"] == []
        assert client.get("/api/movies/4").json()["franchise"] is None

    def test_replace_franchise_movies_id_out_of_range(self, client):
        """PUT /api/franchises/{id}/movies rejects ids beyond 64 bits with 400 and changes nothing."""
        r = client.put("/api/franchises/1/movies", json=[1, HUGE])
        assert r.status_code == 400
        assert client.get("/api/franchises/1").json()["movies"] == [1, 2]
        assert client.get("/api/movies/2").json()["franchise"] == 1

    def test_replace_franchise_movies_missing_franchise(self, client):
        """PUT /api/franchises/{id}/movies returns 404 for a missing franchise."""
        assert client.put("/api/franchises/999/movies", json=[1]).status_code == 404
