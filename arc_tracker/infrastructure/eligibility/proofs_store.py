import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from arc_tracker.core.entities.eligibility import EligibilityEntry
from arc_tracker.core.interfaces.datasource import IEligibilityStore

logger = logging.getLogger(__name__)


class EligibilityStore(IEligibilityStore):
    """
    Static address -> {amount, proof} mapping, loaded once.
    Keys are lower-cased so lookups are case-insensitive exact matches.
    """

    def __init__(self, entries: Dict[str, dict]):
        self._entries: Dict[str, EligibilityEntry] = {}
        for address, raw in entries.items():
            self._entries[address.strip().lower()] = EligibilityEntry(
                amount=str(raw["amount"]),
                proof=list(raw.get("proof", [])),
            )

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "EligibilityStore":
        path = Path(path)
        if not path.exists():
            logger.warning(f"Eligibility file {path} not found. Nobody is eligible.")
            return cls({})

        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
        store = cls(data)
        logger.info(f"Loaded {len(store)} eligibility entries from {path}")
        return store

    def lookup(self, address: str) -> Optional[EligibilityEntry]:
        return self._entries.get((address or "").strip().lower())

    def __len__(self) -> int:
        return len(self._entries)
