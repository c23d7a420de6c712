from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class BlockTransaction(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hash: str
    from_address: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None


class ChainBlock(BaseModel):
    number: int
    timestamp: int
    transactions: List[BlockTransaction] = []


class GasReceipt(BaseModel):
    gas_used: int
    effective_gas_price: int
