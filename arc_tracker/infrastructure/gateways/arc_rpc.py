import asyncio
import logging
from typing import Optional

from web3 import Web3
from web3.exceptions import BlockNotFound, TransactionNotFound

from arc_tracker.config import Settings
from arc_tracker.core.entities.chain import BlockTransaction, ChainBlock, GasReceipt
from arc_tracker.core.interfaces.datasource import IChainDataSource

logger = logging.getLogger(__name__)


def _hex(value) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else Web3.to_hex(value)


class ArcRpcGateway(IChainDataSource):
    """
    Implementation of IChainDataSource over the Arc Testnet JSON-RPC endpoint.
    web3 is synchronous, so every call runs in a separate thread to stay async.
    """

    def __init__(self, settings: Settings, web3: Optional[Web3] = None):
        """
        :param settings: supplies the RPC URL and request timeout.
        :param web3: pre-built client, mainly for tests.
        """
        self.rpc_url = settings.rpc_url
        self.web3 = web3 or Web3(
            Web3.HTTPProvider(self.rpc_url, request_kwargs={"timeout": settings.request_timeout_seconds})
        )
        logger.info(f"ArcRpcGateway initialized. URL: {self.rpc_url}")

    async def get_block_number(self) -> int:
        return await asyncio.to_thread(lambda: self.web3.eth.block_number)

    async def get_block(self, number: int) -> Optional[ChainBlock]:
        try:
            raw = await asyncio.to_thread(self.web3.eth.get_block, number, True)
        except BlockNotFound:
            logger.warning(f"Block {number} not found")
            return None
        return self._map_block(raw)

    def _map_block(self, raw) -> ChainBlock:
        transactions = []
        for tx in raw.get("transactions", []):
            # Hash-only entries appear when the node ignores full_transactions
            if not hasattr(tx, "get"):
                continue
            transactions.append(BlockTransaction(
                hash=_hex(tx.get("hash")),
                from_address=tx.get("from"),
                to=tx.get("to"),
            ))
        return ChainBlock(
            number=raw["number"],
            timestamp=raw["timestamp"],
            transactions=transactions,
        )

    async def get_receipt(self, tx_hash: str) -> Optional[GasReceipt]:
        try:
            receipt = await asyncio.to_thread(self.web3.eth.get_transaction_receipt, tx_hash)
        except TransactionNotFound:
            return None
        return GasReceipt(
            gas_used=int(receipt["gasUsed"]),
            effective_gas_price=int(receipt.get("effectiveGasPrice", 0)),
        )
