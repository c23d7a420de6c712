import re

from arc_tracker.core.errors import InvalidAddressError

ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")


def is_valid_address(address: str) -> bool:
    return bool(address) and ADDRESS_RE.fullmatch(address) is not None


def validate_address(address: str) -> str:
    """
    Trims the input and checks the 0x-prefixed 40 hex character form.
    Returns the trimmed address unchanged in case.
    """
    candidate = (address or "").strip()
    if not is_valid_address(candidate):
        raise InvalidAddressError(candidate)
    return candidate
