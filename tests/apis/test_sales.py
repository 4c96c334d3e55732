"""Tests for the sales module."""

import json

import httpx
import pytest
import respx

from served_sdk.models.sales import DEFAULT_CURRENCY, CreatePipelineRequest, UpdateDealRequest

SALES_URL = "https://api.test/api/v1/sales"


class TestPipelines:
    """Tests for sales.pipelines."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_posts_workspace(self, client):
        """Listing should POST the workspace id."""
        route = respx.post(f"{SALES_URL}/pipelines/list").mock(
            return_value=httpx.Response(200, json={"data": [{"id": 1, "name": "Default"}]})
        )
        pipelines = await client.sales.pipelines.get_all(workspace_id=6)
        assert pipelines[0].name == "Default"
        assert json.loads(route.calls.last.request.content) == {"workspaceId": 6}

    @pytest.mark.asyncio
    @respx.mock
    async def test_create_defaults_currency(self, client):
        """New pipelines should default to the platform currency."""
        route = respx.post(f"{SALES_URL}/pipelines/create").mock(
            return_value=httpx.Response(200, json={"id": 2})
        )
        await client.sales.pipelines.create(
            CreatePipelineRequest(name="Enterprise", workspace_id=6)
        )
        body = json.loads(route.calls.last.request.content)
        assert body["currency"] == DEFAULT_CURRENCY
        assert body["workspaceId"] == 6

    @pytest.mark.asyncio
    @respx.mock
    async def test_delete(self, client):
        """delete should POST the id."""
        route = respx.post(f"{SALES_URL}/pipelines/delete").mock(return_value=httpx.Response(204))
        await client.sales.pipelines.delete(2)
        assert json.loads(route.calls.last.request.content) == {"id": 2}


class TestDeals:
    """Tests for sales.deals."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_by_pipeline(self, client):
        """Deals should be listed per pipeline."""
        route = respx.post(f"{SALES_URL}/deals/list").mock(
            return_value=httpx.Response(200, json={"data": [{"id": 3, "value": 5000}]})
        )
        deals = await client.sales.deals.get_by_pipeline(2)
        assert deals[0].value == 5000
        assert json.loads(route.calls.last.request.content) == {"pipelineId": 2}

    @pytest.mark.asyncio
    @respx.mock
    async def test_move_to_stage(self, client):
        """Moving a deal should send both ids."""
        route = respx.post(f"{SALES_URL}/deals/move").mock(
            return_value=httpx.Response(200, json={"id": 3, "stageId": 8})
        )
        deal = await client.sales.deals.move_to_stage(3, 8)
        assert deal.stage_id == 8
        assert json.loads(route.calls.last.request.content) == {"dealId": 3, "stageId": 8}

    @pytest.mark.asyncio
    @respx.mock
    async def test_update_sends_id_in_body(self, client):
        """Updates should carry the deal id in the body."""
        route = respx.post(f"{SALES_URL}/deals/update").mock(
            return_value=httpx.Response(200, json={"id": 3, "name": "Renewal"})
        )
        await client.sales.deals.update(UpdateDealRequest(id=3, name="Renewal"))
        assert json.loads(route.calls.last.request.content) == {"id": 3, "name": "Renewal"}
