import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from arc_tracker.config import Settings
from arc_tracker.core.entities.transaction import TransactionRecord, TokenTransferRecord
from arc_tracker.core.errors import UpstreamUnavailableError
from arc_tracker.core.interfaces.datasource import IExplorerDataSource

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

HEADERS = {
    "User-Agent": "Mozilla/5.0",
    "Accept": "application/json",
}


class ArcScanGateway(IExplorerDataSource):
    """
    Implementation of IExplorerDataSource for the ArcScan (Etherscan-style) API.
    Lenient calls degrade to an empty result on any upstream problem;
    strict calls raise UpstreamUnavailableError instead.
    """

    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None):
        self.base_url = settings.explorer_api_url
        self.timeout = settings.request_timeout_seconds
        self._client = client
        logger.info(f"ArcScanGateway initialized. URL: {self.base_url}")

    async def _get(self, params: Dict[str, Any]) -> Dict[str, Any]:
        if self._client is not None:
            response = await self._client.get(self.base_url, params=params, headers=HEADERS, timeout=self.timeout)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(self.base_url, params=params, headers=HEADERS, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected ArcScan payload: {type(data).__name__}")
        return data

    @staticmethod
    def _account_params(action: str, address: str) -> Dict[str, Any]:
        return {
            "module": "account",
            "action": action,
            "address": address,
            "startblock": 0,
            "endblock": 99999999,
            "sort": "asc",
        }

    async def _fetch_array(self, action: str, address: str) -> List[dict]:
        try:
            data = await self._get(self._account_params(action, address))
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"ArcScan {action} failed for {address}: {e}")
            return []

        if data.get("status") != "1" or not isinstance(data.get("result"), list):
            logger.warning(f"ArcScan {action} returned no data for {address} (status={data.get('status')})")
            return []
        return data["result"]

    def _map_records(self, rows: List[dict], model: Type[RecordT]) -> List[RecordT]:
        records = []
        for row in rows:
            try:
                records.append(model.model_validate(row))
            except ValidationError as map_err:
                logger.warning(f"Skipping malformed {model.__name__}: {map_err}")
                continue
        return records

    async def fetch_native_txs(self, address: str) -> List[TransactionRecord]:
        rows = await self._fetch_array("txlist", address)
        return self._map_records(rows, TransactionRecord)

    async def fetch_token_txs(self, address: str) -> List[TokenTransferRecord]:
        rows = await self._fetch_array("tokentx", address)
        return self._map_records(rows, TokenTransferRecord)

    async def fetch_balance(self, address: str) -> str:
        params = {"module": "account", "action": "balance", "address": address}
        try:
            data = await self._get(params)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"ArcScan balance failed for {address}: {e}")
            return "0"

        if data.get("status") != "1":
            return "0"
        return str(data.get("result", "0"))

    async def fetch_native_txs_strict(self, address: str) -> List[TransactionRecord]:
        try:
            data = await self._get(self._account_params("txlist", address))
        except httpx.HTTPStatusError as e:
            raise UpstreamUnavailableError(f"HTTP error: {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise UpstreamUnavailableError(f"ArcScan unavailable: {e}") from e

        logger.info(f"ArcScan raw status: {data.get('status')}")
        if data.get("status") != "1":
            raise UpstreamUnavailableError("ArcScan returned no transactions")

        result = data.get("result")
        if not isinstance(result, list):
            raise UpstreamUnavailableError(f"ArcScan returned a non-list result: {result!r}")
        return self._map_records(result, TransactionRecord)
