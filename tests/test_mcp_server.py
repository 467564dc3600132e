import json

from fastmcp import Client
import pytest

from tools.mcp_server import mcp

TOOL_NAMES = {
    "health_ping",
    "logi_master_invoice_audit",
    "check_container_status",
    "calculate_hvdc_shipping_cost",
    "logi_master_predict",
    "logi_master_weather_tie",
}


def _error_payload(result) -> dict:
    text = result.content[0].text
    return json.loads(text[text.index("{"):])


@pytest.mark.asyncio
async def test_tools_are_advertised():
    async with Client(mcp) as client:
        tools = await client.list_tools()
    assert {tool.name for tool in tools} == TOOL_NAMES


@pytest.mark.asyncio
async def test_call_returns_payload_and_summary():
    async with Client(mcp) as client:
        result = await client.call_tool_mcp("check_container_status", {"container_id": "abcd1234567"})
    assert not result.isError
    payload = json.loads(result.content[0].text)
    assert payload["ok"] is True
    assert payload["container_id"] == "ABCD1234567"
    assert 50 <= payload["progress_pct"] <= 90
    assert result.content[1].text.startswith("📦 ABCD1234567")


@pytest.mark.asyncio
async def test_optional_arguments_can_be_omitted():
    async with Client(mcp) as client:
        result = await client.call_tool_mcp(
            "calculate_hvdc_shipping_cost",
            {"equipment_type": "Reactor", "weight": 12000, "origin_port": "BUSAN", "destination_port": "JEBEL ALI"},
        )
    payload = json.loads(result.content[0].text)
    assert payload["incoterm"]["code"] == "CFR"
    assert payload["breakdown_usd"]["total"] == 60130


@pytest.mark.asyncio
async def test_domain_error_is_flagged():
    async with Client(mcp) as client:
        result = await client.call_tool_mcp("check_container_status", {"container_id": "AB1C234567"})
    assert result.isError
    payload = _error_payload(result)
    assert payload["ok"] is False
    assert payload["code"] == "BAD_INPUT"


@pytest.mark.asyncio
async def test_prompts_and_catalog_resource():
    async with Client(mcp) as client:
        prompts = await client.list_prompts()
        prompt = await client.get_prompt("eta_explain")
        contents = await client.read_resource("logistics://tools")
    assert {p.name for p in prompts} == {"invoice_audit_summary", "eta_explain"}
    assert "Weather, Berth, Customs" in prompt.messages[0].content.text
    listing = json.loads(contents[0].text)
    assert [entry["name"] for entry in listing][0] == "health_ping"
    assert {entry["name"] for entry in listing} == TOOL_NAMES


@pytest.mark.asyncio
async def test_mistyped_weight_is_bad_input():
    async with Client(mcp) as client:
        result = await client.call_tool_mcp(
            "calculate_hvdc_shipping_cost",
            {"equipment_type": "Reactor", "weight": "heavy", "origin_port": "BUSAN", "destination_port": "JEBEL ALI"},
        )
    assert result.isError
    payload = _error_payload(result)
    assert payload["code"] == "BAD_INPUT"
    assert payload["message"] == "weight must be greater than zero"


@pytest.mark.asyncio
async def test_missing_container_id_is_bad_input():
    async with Client(mcp) as client:
        result = await client.call_tool_mcp("check_container_status", {})
    assert result.isError
    assert _error_payload(result)["code"] == "BAD_INPUT"


@pytest.mark.asyncio
async def test_numeric_weight_string_is_accepted():
    async with Client(mcp) as client:
        result = await client.call_tool_mcp(
            "logi_master_predict", {"origin": "BUSAN", "destination": "JEBEL ALI", "weight": "12000"}
        )
    assert not result.isError
    assert json.loads(result.content[0].text)["cargo_weight_kg"] == 12000
