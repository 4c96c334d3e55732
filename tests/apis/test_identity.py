"""Tests for the identity module."""

import json

import httpx
import pytest
import respx

from served_sdk.models.identity import CreateApiKeyRequest, EmployeeQueryParams

USERS_URL = "https://api.test/api/users"
API_KEYS_URL = "https://api.test/api/v1/identity/api-keys"


class TestEmployees:
    """Tests for client.employees."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_filters(self, client):
        """Employee filters should be added to the query."""
        route = respx.get(USERS_URL).mock(
            return_value=httpx.Response(
                200, json={"data": [{"id": 1, "name": "Ann", "email": "ann@example.com"}]}
            )
        )
        employees = await client.employees.get_all(
            EmployeeQueryParams(is_active=True, department_id=4)
        )
        assert employees[0].email == "ann@example.com"
        assert str(route.calls.last.request.url) == (
            f"{USERS_URL}?page=1&pageSize=50&isActive=True&departmentId=4"
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_search(self, client):
        """search should look for active employees."""
        route = respx.get(USERS_URL).mock(return_value=httpx.Response(200, json={"data": []}))
        await client.employees.search("ann")
        assert str(route.calls.last.request.url).endswith("&search=ann&isActive=True")

    @pytest.mark.asyncio
    @respx.mock
    async def test_to_summary(self, client):
        """Employee details should reduce to summaries."""
        respx.get(f"{USERS_URL}/1").mock(
            return_value=httpx.Response(200, json={"id": 1, "name": "Ann", "isActive": True})
        )
        summary = (await client.employees.get(1)).to_summary()
        assert summary.name == "Ann"
        assert summary.is_active is True


class TestApiKeys:
    """Tests for client.api_keys."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_create_returns_plain_key(self, client):
        """Creating a key should return the secret once."""
        route = respx.post(API_KEYS_URL).mock(
            return_value=httpx.Response(
                201,
                json={
                    "apiKey": {"id": 4, "name": "CI", "keyHint": "sk_...9f", "isActive": True},
                    "plainKey": "sk_live_abc9f",
                },
            )
        )
        created = await client.api_keys.create(CreateApiKeyRequest(name="CI", scopes=["read"]))
        assert created.plain_key == "sk_live_abc9f"
        assert created.api_key.key_hint == "sk_...9f"
        assert json.loads(route.calls.last.request.content) == {"name": "CI", "scopes": ["read"]}

    @pytest.mark.asyncio
    @respx.mock
    async def test_revoke(self, client):
        """revoke should POST to the revoke endpoint."""
        route = respx.post(f"{API_KEYS_URL}/4/revoke").mock(return_value=httpx.Response(204))
        await client.api_keys.revoke(4)
        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_all(self, client):
        """Keys should be listed from the data envelope."""
        respx.get(API_KEYS_URL).mock(
            return_value=httpx.Response(200, json={"data": [{"id": 1}, {"id": 2}]})
        )
        assert [k.id for k in await client.api_keys.get_all()] == [1, 2]
