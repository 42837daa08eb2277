"""Tests for the read-only viewer service."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from vuepact.contract import analyze_component
from vuepact.service import create_app
from vuepact.stores.manifest import Manifest


@pytest.fixture
def manifest() -> Manifest:
    components = [
        analyze_component("<template><img src='a'></template>", "src/cards/UserCard.vue"),
        analyze_component("<template><button>x</button></template>", "src/forms/SubmitButton.vue"),
    ]
    return Manifest(version="0.1.0", scanned_at="2024-01-02T03:04:05.000Z", components=components)


@pytest.fixture
def client(manifest: Manifest) -> TestClient:
    return TestClient(create_app(lambda: manifest))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_manifest_info(client: TestClient) -> None:
    data = client.get("/manifest").json()

    assert data == {"version": "0.1.0", "scanned_at": "2024-01-02T03:04:05.000Z", "components": 2}


def test_components_filter_by_name_or_path(client: TestClient) -> None:
    everything = client.get("/components").json()
    by_name = client.get("/components", params={"q": "usercard"}).json()
    by_path = client.get("/components", params={"q": "FORMS/"}).json()

    assert [c["name"] for c in everything] == ["UserCard", "SubmitButton"]
    assert [c["name"] for c in by_name] == ["UserCard"]
    assert [c["name"] for c in by_path] == ["SubmitButton"]
    assert by_name[0]["warnings"] == 1


def test_component_detail(client: TestClient) -> None:
    response = client.get("/components/detail", params={"file": "src/forms/SubmitButton.vue"})

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "SubmitButton"
    assert data["warnings"][0]["rule"] == "button-type"


def test_component_detail_not_found(client: TestClient) -> None:
    response = client.get("/components/detail", params={"file": "nope.vue"})

    assert response.status_code == 404


def test_missing_manifest_maps_to_404(tmp_path: Path) -> None:
    client = TestClient(create_app(manifest_path=tmp_path / "missing.json"))

    response = client.get("/components")

    assert response.status_code == 404
    assert "not found" in response.json()["detail"]


def test_manifest_is_loaded_off_the_event_loop(manifest: Manifest) -> None:
    seen: list[str] = []

    def loader() -> Manifest:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            seen.append("worker")
        else:
            seen.append("loop")
        return manifest

    client = TestClient(create_app(loader))

    assert client.get("/components").status_code == 200
    assert seen == ["worker"]
