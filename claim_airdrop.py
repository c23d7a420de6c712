"""
Claims the ARCKER airdrop for the configured wallet through the
provider-managed account of the RPC endpoint.
"""
import asyncio
import logging

from arc_tracker.config import get_settings
from arc_tracker.core.use_cases.claim_flow import ClaimFlow, ClaimState
from arc_tracker.infrastructure.eligibility.proofs_store import EligibilityStore
from arc_tracker.infrastructure.gateways.web3_signer import Web3WalletSigner


async def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    flow = ClaimFlow(EligibilityStore.from_json(settings.proofs_path), Web3WalletSigner(settings))

    flow.check_eligibility(settings.tracked_wallet)
    print(flow.status)
    if flow.state != ClaimState.ELIGIBLE:
        return

    await flow.connect_wallet()
    if flow.state != ClaimState.WALLET_CONNECTED:
        print(flow.status)
        return

    await flow.claim()
    print(flow.status)
    if flow.tx_hash:
        print(f"View transaction on ArcScan: {settings.explorer_tx_url}/{flow.tx_hash}")


if __name__ == "__main__":
    asyncio.run(main())
