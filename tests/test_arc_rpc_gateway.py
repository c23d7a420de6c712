"""
Tests for the JSON-RPC chain client, driven through a stand-in for web3's
`eth` module that returns canned AttributeDicts and raises web3's own
lookup exceptions.
"""
import pytest
from hexbytes import HexBytes
from web3.datastructures import AttributeDict
from web3.exceptions import BlockNotFound, TransactionNotFound

from arc_tracker.config import Settings
from arc_tracker.core.services import GasReportService
from arc_tracker.infrastructure.gateways.arc_rpc import ArcRpcGateway, _hex
from conftest import DAY, DEX_ROUTER, OTHER, T0, TEST_WALLET

HASH_A = "0x" + "a1" * 32
HASH_B = "0x" + "b2" * 32


class FakeEth:
    def __init__(self, blocks=None, receipts=None):
        self.blocks = blocks or {}
        self.receipts = receipts or {}
        self.block_requests = []

    @property
    def block_number(self):
        return max(self.blocks) if self.blocks else 0

    def get_block(self, number, full_transactions=False):
        self.block_requests.append((number, full_transactions))
        if number not in self.blocks:
            raise BlockNotFound(f"Block with id: '{number}' not found.")
        return self.blocks[number]

    def get_transaction_receipt(self, tx_hash):
        if tx_hash not in self.receipts:
            raise TransactionNotFound(f"Transaction with hash: '{tx_hash}' not found.")
        return self.receipts[tx_hash]


class FakeWeb3:
    def __init__(self, eth):
        self.eth = eth


def rpc_tx(tx_hash, sender, to):
    return AttributeDict({"hash": HexBytes(tx_hash), "from": sender, "to": to, "value": 0})


def rpc_block(number, timestamp, transactions):
    return AttributeDict({"number": number, "timestamp": timestamp, "transactions": transactions})


def make_gateway(eth):
    return ArcRpcGateway(Settings(), web3=FakeWeb3(eth))


async def test_block_number():
    eth = FakeEth(blocks={7: rpc_block(7, T0, [])})

    assert await make_gateway(eth).get_block_number() == 7


async def test_block_is_mapped_with_full_transactions():
    eth = FakeEth(blocks={
        9: rpc_block(9, T0, [
            rpc_tx(HASH_A, TEST_WALLET, DEX_ROUTER),
            rpc_tx(HASH_B, TEST_WALLET, None),
            # hash-only entry
            HexBytes("0x" + "cc" * 32),
        ]),
    })

    block = await make_gateway(eth).get_block(9)

    assert eth.block_requests == [(9, True)]
    assert block.number == 9
    assert block.timestamp == T0
    assert [tx.hash for tx in block.transactions] == [HASH_A, HASH_B]
    assert block.transactions[0].from_address == TEST_WALLET
    assert block.transactions[0].to == DEX_ROUTER
    assert block.transactions[1].to is None


async def test_missing_block_is_none():
    assert await make_gateway(FakeEth()).get_block(3) is None


async def test_receipt_is_mapped():
    eth = FakeEth(receipts={
        HASH_A: AttributeDict({"gasUsed": 21000, "effectiveGasPrice": 10, "status": 1}),
    })

    receipt = await make_gateway(eth).get_receipt(HASH_A)

    assert receipt.gas_used == 21000
    assert receipt.effective_gas_price == 10


async def test_receipt_without_effective_price_defaults_to_zero():
    eth = FakeEth(receipts={HASH_A: AttributeDict({"gasUsed": 50000, "status": 1})})

    receipt = await make_gateway(eth).get_receipt(HASH_A)

    assert receipt.effective_gas_price == 0


async def test_missing_receipt_is_none():
    assert await make_gateway(FakeEth()).get_receipt(HASH_A) is None


@pytest.mark.parametrize("value, expected", [
    (None, None),
    (HASH_A, HASH_A),
    (HexBytes(HASH_B), HASH_B),
])
def test_hex_normalisation(value, expected):
    assert _hex(value) == expected


async def test_block_scan_over_rpc():
    eth = FakeEth(
        blocks={
            12: rpc_block(12, T0 + DAY, [rpc_tx(HASH_A, TEST_WALLET.lower(), DEX_ROUTER)]),
            # 11 is missing on the node
            10: rpc_block(10, T0, [rpc_tx(HASH_B, OTHER, TEST_WALLET)]),
        },
        receipts={HASH_A: AttributeDict({"gasUsed": 21000, "effectiveGasPrice": 10, "status": 1})},
    )
    service = GasReportService(Settings(scan_block_depth=3), chain=make_gateway(eth))

    report = await service.from_blocks(TEST_WALLET)

    assert [n for n, _ in eth.block_requests] == [12, 11, 10]
    assert report.totalTransactions == 2
    assert report.activeDays == 2
    assert report.contractsInteracted == 2
    # no receipt for the incoming transfer
    assert report.usdcGasSpent == "0.210000"
