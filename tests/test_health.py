"""Tests for health and root endpoints."""

from sqlalchemy.exc import OperationalError

from storefront import __version__
from storefront.config import settings
from storefront.database import get_db
from storefront.main import app


class _UnreachableSession:
    def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))


def test_health_reports_database(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["db_connected"] is True
    assert body["service"] == settings.SERVICE_NAME


def test_health_unavailable_without_database(client):
    app.dependency_overrides[get_db] = lambda: _UnreachableSession()

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["db_connected"] is False
    assert response.json()["status"] == "unavailable"


def test_root(client):
    response = client.get("/")

    assert response.json() == {
        "service": settings.SERVICE_NAME,
        "version": __version__,
        "docs": "/docs",
    }
