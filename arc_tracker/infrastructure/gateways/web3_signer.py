import asyncio
import logging
from typing import List, Optional

from web3 import Web3

from arc_tracker.config import Settings
from arc_tracker.core.interfaces.datasource import IWalletSigner

logger = logging.getLogger(__name__)

AIRDROP_ABI = [
    {
        "name": "claim",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "amount", "type": "uint256"},
            {"name": "proof", "type": "bytes32[]"},
        ],
        "outputs": [],
    },
    {
        "name": "claimed",
        "type": "function",
        "stateMutability": "view",
        "inputs": [{"name": "", "type": "address"}],
        "outputs": [{"name": "", "type": "bool"}],
    },
]


class Web3WalletSigner(IWalletSigner):
    """
    Claims through accounts managed by the connected provider (node or
    wallet bridge). No key material is handled here.
    """

    def __init__(self, settings: Settings, web3: Optional[Web3] = None):
        self.web3 = web3 or Web3(
            Web3.HTTPProvider(settings.rpc_url, request_kwargs={"timeout": settings.request_timeout_seconds})
        )
        self.contract = self.web3.eth.contract(
            address=Web3.to_checksum_address(settings.airdrop_address),
            abi=AIRDROP_ABI,
        )

    async def request_accounts(self) -> List[str]:
        try:
            return list(await asyncio.to_thread(lambda: self.web3.eth.accounts))
        except Exception as e:
            logger.warning(f"Wallet provider unavailable: {e}")
            return []

    async def claimed(self, account: str) -> bool:
        call = self.contract.functions.claimed(Web3.to_checksum_address(account))
        return bool(await asyncio.to_thread(call.call))

    async def claim(self, account: str, amount: str, proof: List[str]) -> str:
        fn = self.contract.functions.claim(int(amount), [Web3.to_bytes(hexstr=p) for p in proof])
        tx_hash = await asyncio.to_thread(fn.transact, {"from": Web3.to_checksum_address(account)})
        return Web3.to_hex(tx_hash)

    async def wait_for_transaction(self, tx_hash: str) -> None:
        receipt = await asyncio.to_thread(self.web3.eth.wait_for_transaction_receipt, tx_hash)
        if receipt.get("status") == 0:
            raise RuntimeError(f"Transaction {tx_hash} reverted")
