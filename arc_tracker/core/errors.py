class ArcTrackerError(Exception):
    """Base class for every error raised by the tracker."""


class UpstreamUnavailableError(ArcTrackerError):
    """Explorer or RPC endpoint failed or returned a non-OK envelope."""


class InvalidAddressError(ArcTrackerError):
    def __init__(self, address: str):
        self.address = address
        super().__init__("Invalid wallet address")


class NoActivityFoundError(ArcTrackerError):
    def __init__(self, address: str):
        self.address = address
        super().__init__("No activity found for this wallet")


class InvalidRecordError(ArcTrackerError):
    """A numeric field of a transaction record is not a non-negative integer string."""

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"Invalid numeric value for '{field}': {value!r}")


class ClaimFailedError(ArcTrackerError):
    pass


class InvalidTransitionError(ArcTrackerError):
    def __init__(self, action: str, state):
        self.action = action
        self.state = state
        super().__init__(f"Cannot {action} while in state {state.value}")
