"""
Tests for the ArcScan explorer client against a mocked transport.
"""
import httpx
import pytest

from arc_tracker.config import Settings
from arc_tracker.core.errors import UpstreamUnavailableError
from arc_tracker.infrastructure.gateways.arcscan_api import ArcScanGateway
from conftest import TEST_WALLET, native_tx, token_tx


def make_gateway(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ArcScanGateway(Settings(explorer_api_url="https://explorer.test/api"), client=client)


async def test_txlist_request_parameters():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": "1", "message": "OK", "result": [native_tx(value="7")]})

    txs = await make_gateway(handler).fetch_native_txs(TEST_WALLET)

    assert len(txs) == 1
    assert txs[0].value == "7"
    params = dict(seen[0].url.params)
    assert params == {
        "module": "account",
        "action": "txlist",
        "address": TEST_WALLET,
        "startblock": "0",
        "endblock": "99999999",
        "sort": "asc",
    }
    assert seen[0].url.host == "explorer.test"


async def test_token_transfers_are_mapped():
    def handler(request):
        return httpx.Response(200, json={"status": "1", "result": [token_tx(value="5000000")]})

    txs = await make_gateway(handler).fetch_token_txs(TEST_WALLET)

    assert txs[0].contract_address.startswith("0x36")
    assert txs[0].token_decimal == "6"


async def test_status_zero_degrades_to_empty():
    def handler(request):
        return httpx.Response(200, json={"status": "0", "message": "No transactions found", "result": []})

    assert await make_gateway(handler).fetch_native_txs(TEST_WALLET) == []


async def test_http_error_degrades_to_empty():
    def handler(request):
        return httpx.Response(502, text="bad gateway")

    gateway = make_gateway(handler)

    assert await gateway.fetch_token_txs(TEST_WALLET) == []
    assert await gateway.fetch_balance(TEST_WALLET) == "0"


async def test_malformed_rows_are_skipped():
    def handler(request):
        return httpx.Response(200, json={"status": "1", "result": [{"foo": "bar"}, native_tx(value="1")]})

    txs = await make_gateway(handler).fetch_native_txs(TEST_WALLET)

    assert [t.value for t in txs] == ["1"]


async def test_balance():
    seen = []

    def handler(request):
        seen.append(dict(request.url.params))
        return httpx.Response(200, json={"status": "1", "result": "12500000000000000000"})

    assert await make_gateway(handler).fetch_balance(TEST_WALLET) == "12500000000000000000"
    assert seen[0] == {"module": "account", "action": "balance", "address": TEST_WALLET}


async def test_strict_fetch_raises_on_http_error():
    def handler(request):
        return httpx.Response(500)

    with pytest.raises(UpstreamUnavailableError, match="HTTP error: 500"):
        await make_gateway(handler).fetch_native_txs_strict(TEST_WALLET)


async def test_strict_fetch_raises_on_empty_status():
    def handler(request):
        return httpx.Response(200, json={"status": "0", "result": []})

    with pytest.raises(UpstreamUnavailableError, match="no transactions"):
        await make_gateway(handler).fetch_native_txs_strict(TEST_WALLET)


async def test_strict_fetch_rejects_string_result():
    def handler(request):
        return httpx.Response(200, json={"status": "1", "result": "Max rate limit reached"})

    with pytest.raises(UpstreamUnavailableError, match="non-list result"):
        await make_gateway(handler).fetch_native_txs_strict(TEST_WALLET)
