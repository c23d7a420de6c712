import math
import re
import time
from datetime import datetime, timezone
from decimal import Context, Decimal, ROUND_HALF_UP, localcontext
from typing import Dict, Iterable, List, Optional, Sequence, Set

from arc_tracker.core.entities.transaction import TransactionRecord, TokenTransferRecord
from arc_tracker.core.entities.summary import (
    Activity,
    Balances,
    BridgeUsage,
    ContractInteractions,
    TokenBalance,
    Volume,
    WalletSummary,
)
from arc_tracker.core.errors import InvalidRecordError

MS_PER_DAY = 1000 * 60 * 60 * 24
NATIVE_DECIMALS = 18
# ERC-20 decimals is a uint8
MAX_TOKEN_DECIMALS = 255

# Wide enough for wei-scale totals rendered with 6 places
WIDE_CONTEXT = Context(prec=60)

_UINT_RE = re.compile(r"[0-9]+")
_SIX_PLACES = Decimal("0.000001")


def parse_uint(field: str, raw) -> int:
    """Parses a non-negative integer string, raising InvalidRecordError otherwise."""
    if isinstance(raw, int) and not isinstance(raw, bool) and raw >= 0:
        return raw
    if not isinstance(raw, str) or not _UINT_RE.fullmatch(raw.strip()):
        raise InvalidRecordError(field, raw)
    return int(raw.strip())


def to_units(raw_value: int, decimals: int) -> Decimal:
    return Decimal(raw_value) / (Decimal(10) ** decimals)


def fixed(value: Decimal, places: int = 6) -> str:
    """Renders a decimal with a fixed number of places, rounding half up."""
    return str(value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def parse_timestamp(raw) -> datetime:
    """Parses unix seconds into a UTC datetime, raising InvalidRecordError when out of range."""
    seconds = parse_uint("timeStamp", raw)
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        raise InvalidRecordError("timeStamp", raw)


def parse_decimals(raw) -> int:
    decimals = parse_uint("tokenDecimal", raw)
    if decimals > MAX_TOKEN_DECIMALS:
        raise InvalidRecordError("tokenDecimal", raw)
    return decimals


def time_buckets(timestamp: int):
    """
    Returns the (day, week, month) activity buckets for a unix timestamp.
    Weeks are counted within the month: YYYY-W<ceil(day/7)>.
    """
    d = parse_timestamp(timestamp)
    day = d.strftime("%Y-%m-%d")
    week = f"{d.year}-W{math.ceil(d.day / 7)}"
    month = f"{d.year}-{d.month}"
    return day, week, month


class _TokenEntry:
    __slots__ = ("symbol", "balance")

    def __init__(self, symbol: str):
        self.symbol = symbol
        self.balance = Decimal(0)


class WalletActivityAggregator:
    """
    Reduces the native and token transfer histories of one address into a
    WalletSummary. Pure: every call starts from fresh accumulators.
    """

    def __init__(self, count_token_interactions: bool = True, bridge_contracts: Iterable[str] = ()):
        self.count_token_interactions = count_token_interactions
        self.bridge_contracts = {addr.lower() for addr in bridge_contracts}

    def aggregate(
        self,
        address: str,
        native_txs: Sequence[TransactionRecord],
        token_txs: Sequence[TokenTransferRecord],
        native_balance_raw: str,
        now_ms: Optional[int] = None,
    ) -> WalletSummary:
        now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
        me = address.lower()

        with localcontext(WIDE_CONTEXT):
            native_volume = Decimal(0)
            token_volume = Decimal(0)
            days: Set[str] = set()
            weeks: Set[str] = set()
            months: Set[str] = set()
            earliest_ms = now_ms
            total_interactions = 0
            unique_contracts: Set[str] = set()
            token_balances: Dict[str, _TokenEntry] = {}
            used_bridge = False
            bridge_deposited = Decimal(0)

            native_count = 0
            for tx in native_txs:
                native_count += 1
                day, week, month = time_buckets(tx.timestamp)
                earliest_ms = min(earliest_ms, tx.timestamp * 1000)
                days.add(day)
                weeks.add(week)
                months.add(month)

                value = to_units(parse_uint("value", tx.value), NATIVE_DECIMALS)
                native_volume += value

                if tx.to and tx.input != "0x":
                    total_interactions += 1
                    unique_contracts.add(tx.to.lower())

                if tx.to and tx.to.lower() in self.bridge_contracts:
                    used_bridge = True
                    bridge_deposited += value

            token_count = 0
            for tx in token_txs:
                token_count += 1
                day, week, month = time_buckets(tx.timestamp)
                earliest_ms = min(earliest_ms, tx.timestamp * 1000)
                days.add(day)
                weeks.add(week)
                months.add(month)

                decimals = parse_decimals(tx.token_decimal)
                value = to_units(parse_uint("value", tx.value), decimals)
                token_volume += value

                contract = tx.contract_address.lower()
                entry = token_balances.get(contract)
                if entry is None:
                    entry = token_balances[contract] = _TokenEntry(tx.token_symbol)

                if tx.to and tx.to.lower() == me:
                    entry.balance += value
                if tx.from_address and tx.from_address.lower() == me:
                    entry.balance -= value

                if self.count_token_interactions:
                    total_interactions += 1
                    unique_contracts.add(contract)

            wallet_age_days = (now_ms - earliest_ms) // MS_PER_DAY

            token_list: List[TokenBalance] = []
            usdc_balance: Optional[Decimal] = None
            for entry in token_balances.values():
                if entry.balance == 0:
                    continue
                rounded = entry.balance.quantize(_SIX_PLACES, rounding=ROUND_HALF_UP)
                token_list.append(TokenBalance(symbol=entry.symbol, balance=float(rounded)))
                if entry.symbol == "USDC" and usdc_balance is None:
                    usdc_balance = rounded
            if usdc_balance is None:
                usdc_balance = Decimal(0)

            native_balance = to_units(parse_uint("nativeBalance", native_balance_raw), NATIVE_DECIMALS)

            bridge = None
            if self.bridge_contracts:
                bridge = BridgeUsage(usedBridge=used_bridge, deposited=fixed(bridge_deposited))

            return WalletSummary(
                wallet=address,
                balances=Balances(native=fixed(native_balance), usdc=fixed(usdc_balance)),
                volume=Volume(
                    native=fixed(native_volume),
                    tokens=fixed(token_volume),
                    total=fixed(native_volume + token_volume),
                ),
                walletAgeDays=wallet_age_days,
                activity=Activity(
                    nativeTxs=native_count,
                    tokenTxs=token_count,
                    uniqueDays=len(days),
                    uniqueWeeks=len(weeks),
                    uniqueMonths=len(months),
                ),
                contracts=ContractInteractions(
                    totalInteractions=total_interactions,
                    uniqueInteractions=len(unique_contracts),
                ),
                tokenBalances=token_list,
                bridge=bridge,
            )
