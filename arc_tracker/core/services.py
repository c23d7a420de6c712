import logging
from typing import Optional, Set

from arc_tracker.config import Settings
from arc_tracker.core.address import validate_address
from arc_tracker.core.entities.summary import GasReport, WalletSummary
from arc_tracker.core.errors import NoActivityFoundError
from arc_tracker.core.interfaces.datasource import IChainDataSource, IExplorerDataSource
from arc_tracker.core.use_cases.gas_comparison import GasComparison
from arc_tracker.core.use_cases.wallet_aggregator import WalletActivityAggregator, parse_timestamp, parse_uint

logger = logging.getLogger(__name__)

# --- Business Logic Services ---

class WalletService:
    def __init__(self, explorer: IExplorerDataSource, settings: Settings):
        self.explorer = explorer
        self.aggregator = WalletActivityAggregator(
            count_token_interactions=settings.count_token_interactions,
            bridge_contracts=settings.bridge_contracts,
        )

    async def analyze(self, address: str, require_activity: bool = False, now_ms: Optional[int] = None) -> WalletSummary:
        address = validate_address(address)

        native_txs = await self.explorer.fetch_native_txs(address)
        token_txs = await self.explorer.fetch_token_txs(address)

        if require_activity and not native_txs and not token_txs:
            raise NoActivityFoundError(address)

        balance_raw = await self.explorer.fetch_balance(address)
        return self.aggregator.aggregate(address, native_txs, token_txs, balance_raw, now_ms=now_ms)


class GasReportService:
    def __init__(
        self,
        settings: Settings,
        explorer: Optional[IExplorerDataSource] = None,
        chain: Optional[IChainDataSource] = None,
    ):
        self.settings = settings
        self.explorer = explorer
        self.chain = chain

    def _comparison(self) -> GasComparison:
        return GasComparison(
            ref_gas_price_gwei=self.settings.ref_gas_price_gwei,
            ref_token_price_usd=self.settings.ref_token_price_usd,
            gas_token_decimals=self.settings.gas_token_decimals,
        )

    async def from_explorer(self, address: str) -> GasReport:
        """
        Gas report over the explorer's full transaction list.
        Upstream failures propagate as UpstreamUnavailableError.
        """
        address = validate_address(address)
        txs = await self.explorer.fetch_native_txs_strict(address)
        logger.info(f"Fetched {len(txs)} transactions")

        days: Set[str] = set()
        contracts: Set[str] = set()
        gas = self._comparison()

        for tx in txs:
            days.add(parse_timestamp(tx.timestamp).strftime("%Y-%m-%d"))
            if tx.to:
                contracts.add(tx.to.lower())
            gas.add(parse_uint("gasUsed", tx.gas_used), parse_uint("gasPrice", tx.gas_price))

        first_tx_date = None
        if txs:
            first_tx_date = parse_timestamp(txs[0].timestamp).isoformat(timespec="milliseconds")
            first_tx_date = first_tx_date.replace("+00:00", "Z")

        return GasReport(
            wallet=address,
            totalTransactions=len(txs),
            activeDays=len(days),
            contractsInteracted=len(contracts),
            usdcGasSpent=gas.gas_spent_str,
            gasSavingsUSD=gas.savings_usd_str,
            firstTxDate=first_tx_date,
        )

    async def from_blocks(self, address: str, depth: Optional[int] = None) -> GasReport:
        """
        Gas report over the most recent `depth` blocks, walked sequentially
        from the latest block down, one receipt per matching transaction.
        """
        address = validate_address(address)
        me = address.lower()
        if depth is None:
            depth = self.settings.scan_block_depth

        latest = await self.chain.get_block_number()
        logger.info(f"Latest Arc block: {latest}")

        tx_count = 0
        days: Set[str] = set()
        contracts: Set[str] = set()
        gas = self._comparison()

        for number in range(latest, latest - depth, -1):
            if number < 0:
                break
            if number % 50 == 0:
                logger.info(f"Scanning block {number}")

            block = await self.chain.get_block(number)
            if block is None:
                continue

            day = parse_timestamp(block.timestamp).strftime("%Y-%m-%d")

            for tx in block.transactions:
                sender = (tx.from_address or "").lower()
                recipient = (tx.to or "").lower()
                if me not in (sender, recipient):
                    continue

                tx_count += 1
                days.add(day)
                if recipient:
                    contracts.add(recipient)

                receipt = await self.chain.get_receipt(tx.hash)
                if receipt is None:
                    continue
                gas.add(receipt.gas_used, receipt.effective_gas_price)

        return GasReport(
            wallet=address,
            totalTransactions=tx_count,
            activeDays=len(days),
            contractsInteracted=len(contracts),
            usdcGasSpent=gas.gas_spent_str,
            gasSavingsUSD=gas.savings_usd_str,
        )
