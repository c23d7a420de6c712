from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class Balances(BaseModel):
    native: str
    usdc: str


class Volume(BaseModel):
    native: str
    tokens: str
    total: str


class Activity(BaseModel):
    nativeTxs: int
    tokenTxs: int
    uniqueDays: int
    uniqueWeeks: int
    uniqueMonths: int


class ContractInteractions(BaseModel):
    totalInteractions: int
    uniqueInteractions: int


class TokenBalance(BaseModel):
    symbol: str
    balance: float  # rounded to 6 decimals


class BridgeUsage(BaseModel):
    usedBridge: bool = False
    deposited: str = "0.000000"


class WalletSummary(BaseModel):
    """
    Per-address activity summary returned by `GET /wallet/{address}`.
    Balances and volumes are fixed 6-decimal strings.
    """
    wallet: str
    balances: Balances
    volume: Volume
    walletAgeDays: int
    activity: Activity
    contracts: ContractInteractions
    tokenBalances: List[TokenBalance]
    bridge: Optional[BridgeUsage] = None

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "wallet": "0xc59E942dC65f7eabCa195A71BCFEE5Bf0CcA2afE",
            "balances": {"native": "12.500000", "usdc": "40.000000"},
            "volume": {"native": "3.000000", "tokens": "55.000000", "total": "58.000000"},
            "walletAgeDays": 41,
            "activity": {"nativeTxs": 6, "tokenTxs": 4, "uniqueDays": 5, "uniqueWeeks": 3, "uniqueMonths": 2},
            "contracts": {"totalInteractions": 7, "uniqueInteractions": 3},
            "tokenBalances": [{"symbol": "USDC", "balance": 40.0}],
            "bridge": {"usedBridge": False, "deposited": "0.000000"}
        }
    })


class GasReport(BaseModel):
    """
    Gas spent on Arc versus the same gas priced on the reference network.
    """
    wallet: str
    totalTransactions: int
    activeDays: int
    contractsInteracted: int
    usdcGasSpent: str
    gasSavingsUSD: str
    firstTxDate: Optional[str] = None
