"""
API 接口测试
"""

import csv
import io

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def portfolio_payload():
    return {
        "books": [
            {
                "id": "a",
                "title": "Alpha",
                "launch_date": "2025-03-05",
                "quality": 7,
                "genre": "fiction",
                "amazon_ad_budget": 60,
                "facebook_ad_budget": 60,
            },
            {
                "id": "b",
                "title": "Beta",
                "launch_date": "2025-03-20",
                "quality": 9,
                "genre": "business",
                "auto_optimize": True,
            },
        ]
    }


class TestSimulateApi:
    """模拟接口测试"""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_simulate(self, client, portfolio_payload):
        response = client.post("/api/simulate", json=portfolio_payload)
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "success"
        assert len(data["periods"]) == 24
        assert len(data["books"]) == 2
        assert data["books"][1]["launch_period_key"] == "2025-03-H2"
        assert data["periods"][0]["amazon_spend"] == 30

    def test_simulate_rejects_invalid_quality(self, client, portfolio_payload):
        portfolio_payload["books"][0]["quality"] = 15
        response = client.post("/api/simulate", json=portfolio_payload)

        assert response.status_code == 400
        assert response.json()["detail"]["errors"]

    def test_simulate_rejects_malformed_date(self, client, portfolio_payload):
        portfolio_payload["books"][0]["launch_date"] = "not-a-date"
        response = client.post("/api/simulate", json=portfolio_payload)
        assert response.status_code == 422

    def test_simulate_single_book(self, client, portfolio_payload):
        response = client.post("/api/simulate/book", json=portfolio_payload["books"][0])
        assert response.status_code == 200
        assert len(response.json()["periods"]) == 24

    def test_simulate_book_by_id(self, client, portfolio_payload):
        response = client.post("/api/simulate/book/b", json=portfolio_payload)
        assert response.status_code == 200

        data = response.json()
        assert data["book_id"] == "b"
        assert data["launch_period_key"] == "2025-03-H2"

    def test_simulate_book_by_unknown_id(self, client, portfolio_payload):
        response = client.post("/api/simulate/book/missing", json=portfolio_payload)
        assert response.status_code == 404

    def test_validate(self, client, portfolio_payload):
        response = client.post("/api/validate", json=portfolio_payload)
        assert response.status_code == 200
        assert response.json()["valid"] is True


class TestExportApi:
    """导出接口测试"""

    def test_export_csv(self, client, portfolio_payload):
        response = client.post("/api/export?format=csv", json=portfolio_payload)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")

        rows = list(csv.reader(io.StringIO(response.text)))
        assert rows[0][0] == "Period"
        assert len(rows) == 25
        assert rows[1][0] == "2025-03-H1"

    def test_export_json(self, client, portfolio_payload):
        response = client.post("/api/export?format=json", json=portfolio_payload)
        assert response.status_code == 200
        assert "summary" in response.json()

    def test_export_rejects_unknown_format(self, client, portfolio_payload):
        response = client.post("/api/export?format=xml", json=portfolio_payload)
        assert response.status_code == 422


class TestMetadataApi:
    """元数据接口测试"""

    def test_default_book(self, client):
        data = client.get("/api/default-book").json()
        assert data["quality"] == 7
        assert data["word_count"] == 50000

    def test_genres(self, client):
        genres = {g["code"]: g for g in client.get("/api/genres").json()["genres"]}
        assert genres["business"]["amazon_share"] == 0.8
        assert genres["fiction"]["demand_factor"] == 0.8
