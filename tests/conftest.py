"""
Pytest configuration and shared fixtures.
"""
import pytest
from httpx import AsyncClient, ASGITransport

from arc_tracker.api.main import app, get_datasource, get_eligibility_store
from arc_tracker.infrastructure.eligibility.proofs_store import EligibilityStore
from arc_tracker.infrastructure.gateways.fixture import FixtureDataSource

TEST_WALLET = "0xc59E942dC65f7eabCa195A71BCFEE5Bf0CcA2afE"
USDC_CONTRACT = "0x3600000000000000000000000000000000000000"
DEX_ROUTER = "0x7A250D5630B4CF539739DF2C5DACB4C659F2488D"
OTHER = "0x1111111111111111111111111111111111111111"

# 2023-11-14T22:13:20Z
T0 = 1700000000
DAY = 86400


def native_tx(ts=T0, value="0", to=OTHER, input="0x", sender=TEST_WALLET, gas_used="21000", gas_price="10"):
    return {
        "timeStamp": str(ts),
        "from": sender,
        "to": to,
        "value": value,
        "input": input,
        "gasUsed": gas_used,
        "gasPrice": gas_price,
    }


def token_tx(ts=T0, value="0", decimals="6", symbol="USDC", contract=USDC_CONTRACT, sender=OTHER, to=TEST_WALLET):
    return {
        "timeStamp": str(ts),
        "from": sender,
        "to": to,
        "contractAddress": contract,
        "tokenSymbol": symbol,
        "tokenDecimal": decimals,
        "value": value,
    }


@pytest.fixture
def fixture_source():
    return FixtureDataSource(
        native_txs={
            TEST_WALLET: [
                native_tx(ts=T0, value="1000000000000000000"),
                native_tx(ts=T0 + DAY, value="500000000000000000", to=DEX_ROUTER, input="0x38ed1739"),
            ]
        },
        token_txs={
            TEST_WALLET: [
                token_tx(ts=T0 + 2 * DAY, value="25000000"),
                token_tx(ts=T0 + 3 * DAY, value="5000000", sender=TEST_WALLET, to=DEX_ROUTER),
            ]
        },
        balances={TEST_WALLET: "12500000000000000000"},
    )


@pytest.fixture
def eligibility_store():
    return EligibilityStore({
        TEST_WALLET: {
            "amount": "10000000000000000000000",
            "proof": ["0x" + "ab" * 32, "0x" + "cd" * 32],
        }
    })


@pytest.fixture
async def client(fixture_source, eligibility_store):
    """Async HTTP client for testing FastAPI endpoints."""
    app.dependency_overrides[get_datasource] = lambda: fixture_source
    app.dependency_overrides[get_eligibility_store] = lambda: eligibility_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
