from abc import ABC, abstractmethod
from typing import List, Optional
from arc_tracker.core.entities.transaction import TransactionRecord, TokenTransferRecord
from arc_tracker.core.entities.chain import ChainBlock, GasReceipt
from arc_tracker.core.entities.eligibility import EligibilityEntry

class IExplorerDataSource(ABC):
    @abstractmethod
    async def fetch_native_txs(self, address: str) -> List[TransactionRecord]:
        pass

    @abstractmethod
    async def fetch_token_txs(self, address: str) -> List[TokenTransferRecord]:
        pass

    @abstractmethod
    async def fetch_balance(self, address: str) -> str:
        """
        Returns the current native balance as a raw wei integer string.
        """
        pass

    @abstractmethod
    async def fetch_native_txs_strict(self, address: str) -> List[TransactionRecord]:
        """
        Like fetch_native_txs, but raises UpstreamUnavailableError instead of
        degrading to an empty list.
        """
        pass


class IChainDataSource(ABC):
    @abstractmethod
    async def get_block_number(self) -> int:
        pass

    @abstractmethod
    async def get_block(self, number: int) -> Optional[ChainBlock]:
        pass

    @abstractmethod
    async def get_receipt(self, tx_hash: str) -> Optional[GasReceipt]:
        pass


class IWalletSigner(ABC):
    @abstractmethod
    async def request_accounts(self) -> List[str]:
        pass

    @abstractmethod
    async def claimed(self, account: str) -> bool:
        pass

    @abstractmethod
    async def claim(self, account: str, amount: str, proof: List[str]) -> str:
        """
        Submits the claim transaction from `account` and returns its hash.
        """
        pass

    @abstractmethod
    async def wait_for_transaction(self, tx_hash: str) -> None:
        pass


class IEligibilityStore(ABC):
    @abstractmethod
    def lookup(self, address: str) -> Optional[EligibilityEntry]:
        pass
