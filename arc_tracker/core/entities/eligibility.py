"""
Airdrop eligibility entities.
"""
from pydantic import BaseModel
from typing import List, Optional


class EligibilityEntry(BaseModel):
    """
    Precomputed claim credential for one address.
    `amount` is the raw token amount passed to the claim contract.
    """
    amount: str
    proof: List[str]


class EligibilityResponse(BaseModel):
    address: str
    eligible: bool
    amount: Optional[str] = None
    proof: List[str] = []
