"""
Integration tests for site resolution and site administration over HTTP.
"""

import pytest
from httpx import AsyncClient

ADMIN = {"X-Admin-API-Key": "test-admin-key-12345"}


async def create_site(client: AsyncClient, **payload):
    response = await client.post("/sites", json=payload, headers=ADMIN)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_first_request_bootstraps_default_site(client: AsyncClient):
    """
    Given an empty store
    When any host asks for its site
    Then a default catch-all site is created and returned
    """
    response = await client.get("/site")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "default_site"
    assert data["domain"] == ""
    assert data["base_domain"] == "localhost"
    assert data["url"] == "http://localhost/"
    assert data["dev_url"] == "http://dev.localhost/"
    assert data["homepage_id"] is not None


@pytest.mark.asyncio
async def test_host_selects_site(client: AsyncClient):
    # Arrange
    await create_site(client, name="Main", base_domain="example.com")
    await create_site(client, name="Blog", base_domain="blog.example.com", domain=r"^blog\.")

    # Act
    blog = await client.get("http://blog.example.com/site")
    main = await client.get("http://example.com/site")
    other = await client.get("http://elsewhere.org/site")

    # Assert
    assert blog.json()["name"] == "Blog"
    assert blog.json()["url"] == "http://blog.example.com/"
    assert main.json()["name"] == "Main"
    assert other.json()["name"] == "Main"


@pytest.mark.asyncio
async def test_create_site_requires_admin_key(client: AsyncClient):
    response = await client.post("/sites", json={"name": "X", "base_domain": "x.com"})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_create_site_validation(client: AsyncClient):
    """Blank name/base_domain and bad patterns are rejected"""
    response = await client.post(
        "/sites", json={"name": "", "base_domain": "", "domain": "(["}, headers=ADMIN
    )

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_FAILED"
    assert "name" in error["message"]
    assert "base_domain" in error["message"]
    assert "domain is not a valid pattern" in error["message"]


@pytest.mark.asyncio
async def test_duplicate_domain_rejected(client: AsyncClient):
    await create_site(client, name="Blog", base_domain="blog.example.com", domain="blog")

    response = await client.post(
        "/sites",
        json={"name": "Blog 2", "base_domain": "blog2.example.com", "domain": "blog"},
        headers=ADMIN,
    )

    assert response.status_code == 422
    assert "domain has already been taken" in response.json()["error"]["message"]


@pytest.mark.asyncio
async def test_list_sites_reports_several(client: AsyncClient):
    await create_site(client, name="Main", base_domain="example.com")

    single = await client.get("/sites", headers=ADMIN)
    assert single.json()["several"] is False

    await create_site(client, name="Blog", base_domain="blog.example.com", domain="blog")

    several = await client.get("/sites", headers=ADMIN)
    data = several.json()
    assert data["several"] is True
    assert [site["name"] for site in data["sites"]] == ["Main", "Blog"]
    assert [site["position"] for site in data["sites"]] == [1, 2]


@pytest.mark.asyncio
async def test_update_site(client: AsyncClient):
    site = await create_site(client, name="Blog", base_domain="blog.example.com", domain="blog")

    response = await client.put(
        f"/sites/{site['id']}", json={"base_domain": "news.example.com"}, headers=ADMIN
    )

    assert response.status_code == 200
    data = response.json()
    assert data["base_domain"] == "news.example.com"
    assert data["name"] == "Blog"
    assert data["url"] == "http://news.example.com/"


@pytest.mark.asyncio
async def test_update_unknown_site(client: AsyncClient):
    response = await client.put("/sites/999", json={"name": "X"}, headers=ADMIN)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "UNKNOWN_SITE"


@pytest.mark.asyncio
async def test_delete_site(client: AsyncClient):
    site = await create_site(client, name="Blog", base_domain="blog.example.com", domain="blog")

    response = await client.delete(f"/sites/{site['id']}", headers=ADMIN)
    assert response.status_code == 200
    assert response.json()["status"] == "deleted"

    listing = await client.get("/sites", headers=ADMIN)
    assert listing.json()["sites"] == []


def test_each_app_reloads_only_its_own_routes():
    """Building another app does not add listeners to an existing app's reloader"""
    # Arrange
    from config import ApplicationConfig
    from src.api.app import create_app

    first = create_app(ApplicationConfig)
    second = create_app(ApplicationConfig)
    first.openapi()
    second.openapi()

    # Act
    first.state.route_reloader.reload()

    # Assert
    assert first.state.route_reloader is not second.state.route_reloader
    assert first.openapi_schema is None
    assert second.openapi_schema is not None
    assert second.state.route_reloader.reload_count == 0
