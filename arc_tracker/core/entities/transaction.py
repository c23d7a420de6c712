from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class TransactionRecord(BaseModel):
    """
    Native-currency transaction as listed by the explorer `txlist` action.
    Numeric fields stay integer strings; the aggregator parses them.
    """
    model_config = ConfigDict(populate_by_name=True)

    timestamp: int = Field(alias="timeStamp")
    from_address: str = Field(alias="from")
    to: Optional[str] = None
    value: str = "0"
    input: str = "0x"
    gas_used: str = Field(default="0", alias="gasUsed")
    gas_price: str = Field(default="0", alias="gasPrice")
    hash: Optional[str] = None


class TokenTransferRecord(BaseModel):
    """
    Token transfer event as listed by the explorer `tokentx` action.
    `value` is in raw token units, scaled by `token_decimal`.
    """
    model_config = ConfigDict(populate_by_name=True)

    timestamp: int = Field(alias="timeStamp")
    from_address: str = Field(alias="from")
    to: str
    contract_address: str = Field(alias="contractAddress")
    token_symbol: str = Field(default="", alias="tokenSymbol")
    token_decimal: str = Field(default="0", alias="tokenDecimal")
    value: str = "0"
    hash: Optional[str] = None
