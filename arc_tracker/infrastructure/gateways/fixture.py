from typing import Dict, List, Optional

from arc_tracker.core.entities.chain import ChainBlock, GasReceipt
from arc_tracker.core.entities.transaction import TransactionRecord, TokenTransferRecord
from arc_tracker.core.errors import UpstreamUnavailableError
from arc_tracker.core.interfaces.datasource import IChainDataSource, IExplorerDataSource


class FixtureDataSource(IExplorerDataSource, IChainDataSource):
    """
    Pre-loaded in-memory data source for tests and offline runs.
    Explorer data is keyed by lower-cased address.
    """

    def __init__(
        self,
        native_txs: Optional[Dict[str, List[dict]]] = None,
        token_txs: Optional[Dict[str, List[dict]]] = None,
        balances: Optional[Dict[str, str]] = None,
        blocks: Optional[List[ChainBlock]] = None,
        receipts: Optional[Dict[str, GasReceipt]] = None,
    ):
        self.native_txs = {k.lower(): v for k, v in (native_txs or {}).items()}
        self.token_txs = {k.lower(): v for k, v in (token_txs or {}).items()}
        self.balances = {k.lower(): v for k, v in (balances or {}).items()}
        self.blocks = {b.number: b for b in (blocks or [])}
        self.receipts = receipts or {}
        self.calls: List[str] = []

    async def fetch_native_txs(self, address: str) -> List[TransactionRecord]:
        self.calls.append(f"txlist:{address}")
        return [TransactionRecord.model_validate(r) for r in self.native_txs.get(address.lower(), [])]

    async def fetch_token_txs(self, address: str) -> List[TokenTransferRecord]:
        self.calls.append(f"tokentx:{address}")
        return [TokenTransferRecord.model_validate(r) for r in self.token_txs.get(address.lower(), [])]

    async def fetch_balance(self, address: str) -> str:
        self.calls.append(f"balance:{address}")
        return self.balances.get(address.lower(), "0")

    async def fetch_native_txs_strict(self, address: str) -> List[TransactionRecord]:
        txs = await self.fetch_native_txs(address)
        if not txs:
            raise UpstreamUnavailableError("ArcScan returned no transactions")
        return txs

    async def get_block_number(self) -> int:
        return max(self.blocks) if self.blocks else 0

    async def get_block(self, number: int) -> Optional[ChainBlock]:
        return self.blocks.get(number)

    async def get_receipt(self, tx_hash: str) -> Optional[GasReceipt]:
        return self.receipts.get(tx_hash)
