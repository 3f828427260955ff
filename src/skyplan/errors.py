"""Errors raised while planning an instance."""


class PlanningError(Exception):
    """Base exception for provisioning planner errors."""

    pass


class InvalidRegionError(PlanningError):
    """Region identifier is not in the region table."""

    def __init__(self, region: str) -> None:
        self.region = region
        super().__init__(f"Invalid region specified: {region!r}")


class InvalidNetworkSpecError(PlanningError):
    """Network or subnetwork token is malformed."""

    def __init__(self, segment: str, reason: str = "") -> None:
        self.segment = segment
        self.reason = reason
        message = f"Invalid network definition {segment!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
