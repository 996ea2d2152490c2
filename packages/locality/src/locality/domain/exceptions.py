"""Domain exceptions.

Exception hierarchy:
- LocalityError: Base exception for everything raised by this package.
  - LocalityConfigError: Invalid settings or invalid tier construction.
  - DecodeError: Malformed record or wire input. Decoding is all-or-nothing.
  - AddressResolutionError: A resolver could not map a host to an address.
    Only resolvers raise it; tier matching absorbs it.
"""

from __future__ import annotations

MALFORMED_FIELD = "MalformedField"


class LocalityError(Exception):
    """Base exception for locality errors."""

    pass


class LocalityConfigError(LocalityError):
    """Raised when locality configuration or a locality value is invalid.

    It is raised by domain entities (e.g., LocalityTier, LocalitySettings) and
    by the settings readers when validation fails.
    """

    pass


class DecodeError(LocalityError):
    """Raised when a record or wire payload cannot be decoded.

    Attributes:
        message: Human-readable error description.
        field: Path of the offending field (e.g. ``tiers[1].value``).
        kind: Error kind. Always ``"MalformedField"`` for now.
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        field: str,
        kind: str = MALFORMED_FIELD,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize DecodeError.

        Args:
            message: Human-readable error description.
            field: Path of the malformed field.
            kind: Error kind.
            original_error: The underlying exception that caused the failure.
        """
        super().__init__(f"{kind} at {field}: {message}")
        self.message = message
        self.field = field
        self.kind = kind
        self.original_error = original_error


class AddressResolutionError(LocalityError):
    """Raised when a host name cannot be resolved to a network address.

    Attributes:
        host: The host string that failed to resolve.
        original_error: The underlying exception (socket error, timeout) if any.
    """

    def __init__(
        self,
        host: str,
        message: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message or f"Could not resolve host {host!r}")
        self.host = host
        self.original_error = original_error
