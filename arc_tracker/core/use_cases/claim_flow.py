"""
Airdrop claim flow.

Explicit state machine over the eligibility lookup and the wallet signer:

    IDLE -> CHECKING_ELIGIBILITY -> INELIGIBLE | ELIGIBLE
    ELIGIBLE -> WALLET_DISCONNECTED | WALLET_CONNECTED
    WALLET_CONNECTED -> CLAIMING -> CLAIMED | CLAIM_FAILED | ALREADY_CLAIMED
    CLAIM_FAILED -> CLAIMING (re-attempt)
"""
import logging
from enum import Enum
from typing import Optional

from arc_tracker.core.address import is_valid_address
from arc_tracker.core.entities.eligibility import EligibilityEntry
from arc_tracker.core.errors import ClaimFailedError, InvalidTransitionError
from arc_tracker.core.interfaces.datasource import IEligibilityStore, IWalletSigner

logger = logging.getLogger(__name__)


class ClaimState(str, Enum):
    IDLE = "idle"
    CHECKING_ELIGIBILITY = "checking_eligibility"
    INELIGIBLE = "ineligible"
    ELIGIBLE = "eligible"
    WALLET_DISCONNECTED = "wallet_disconnected"
    WALLET_CONNECTED = "wallet_connected"
    CLAIMING = "claiming"
    CLAIMED = "claimed"
    CLAIM_FAILED = "claim_failed"
    ALREADY_CLAIMED = "already_claimed"


_CONNECTABLE = {ClaimState.ELIGIBLE, ClaimState.WALLET_DISCONNECTED}
_CLAIMABLE = {ClaimState.WALLET_CONNECTED, ClaimState.CLAIM_FAILED}


class ClaimFlow:
    def __init__(self, store: IEligibilityStore, signer: Optional[IWalletSigner], token_label: str = "10,000 ARCKER"):
        self.store = store
        self.signer = signer
        self.token_label = token_label

        self.state = ClaimState.IDLE
        self.status = ""
        self.address: Optional[str] = None
        self.entry: Optional[EligibilityEntry] = None
        self.account: Optional[str] = None
        self.tx_hash: Optional[str] = None
        self.error: Optional[ClaimFailedError] = None

    def check_eligibility(self, address: str) -> ClaimState:
        if self.state == ClaimState.CLAIMING:
            raise InvalidTransitionError("check eligibility", self.state)

        addr = (address or "").strip().lower()
        self.tx_hash = None
        self.entry = None

        if not is_valid_address(addr):
            self.state = ClaimState.IDLE
            self.status = "Enter a valid wallet address"
            return self.state

        self.state = ClaimState.CHECKING_ELIGIBILITY
        self.address = addr
        entry = self.store.lookup(addr)

        if entry is None:
            self.state = ClaimState.INELIGIBLE
            self.status = "Address is not eligible"
        else:
            self.entry = entry
            self.state = ClaimState.ELIGIBLE
            self.status = f"Address is eligible for {self.token_label}"
        return self.state

    async def connect_wallet(self) -> ClaimState:
        if self.state not in _CONNECTABLE:
            raise InvalidTransitionError("connect wallet", self.state)

        accounts = await self.signer.request_accounts() if self.signer else []
        if not accounts:
            self.state = ClaimState.WALLET_DISCONNECTED
            self.status = "Wallet provider not detected"
            return self.state

        self.account = accounts[0].lower()
        self.state = ClaimState.WALLET_CONNECTED
        self.status = ""
        return self.state

    async def claim(self) -> ClaimState:
        if self.state not in _CLAIMABLE:
            raise InvalidTransitionError("claim", self.state)

        self.state = ClaimState.CLAIMING
        self.status = "Claiming…"
        self.tx_hash = None
        self.error = None

        try:
            if await self.signer.claimed(self.account):
                self.state = ClaimState.ALREADY_CLAIMED
                self.status = "Already claimed"
                return self.state

            self.tx_hash = await self.signer.claim(self.account, self.entry.amount, self.entry.proof)
            await self.signer.wait_for_transaction(self.tx_hash)
        except Exception as e:
            self.error = ClaimFailedError(f"Claim failed for {self.account}: {e}")
            logger.error(str(self.error))
            self.state = ClaimState.CLAIM_FAILED
            self.status = "Claim failed"
            return self.state

        self.state = ClaimState.CLAIMED
        self.status = "Claim successful!"
        self.entry = None
        return self.state
