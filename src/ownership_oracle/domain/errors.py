"""Recoverable failures raised while resolving a resource owner.

Every error here means the oracle could not reach a decision for this request.
The resolver catches ``ResolutionError`` and records the request as unchanged,
so none of them ever aborts an invocation.
"""

from __future__ import annotations


class ResolutionError(RuntimeError):
    """Base class for failures that leave the on-chain owner untouched."""


class MalformedNameError(ResolutionError, ValueError):
    """Raised when the requested resource name is not valid UTF-8."""


class UnrecognizedForgeError(ResolutionError, ValueError):
    """Raised for forge codes outside the supported enumeration."""

    def __init__(self, code: int) -> None:
        super().__init__(f"Unknown forge {code}")
        self.code = code


class TransientFetchError(ResolutionError):
    """Raised when a source could not be fetched (timeout, network, unexpected status)."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MalformedResponseError(ResolutionError):
    """Raised when a source answered with a body that does not match its schema."""


class AmbiguousClaimError(ResolutionError):
    """Raised when a profile holds zero or several ownership claims for a network."""

    def __init__(self, network: str, count: int) -> None:
        super().__init__(f"Expected exactly one ownership claim for {network}, found {count}")
        self.network = network
        self.count = count


class MalformedAddressError(ResolutionError, ValueError):
    """Raised when a claimed owner is not a valid (checksummed) address."""
