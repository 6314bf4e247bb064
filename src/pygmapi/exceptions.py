"""Custom exception hierarchy for pygmapi.

Every exception carries an :class:`ErrorKind`.  Callers of the HTTP
surface only ever see two generic reasons, but the kind lets tests and
library users tell a rejected identifier apart from an unreachable
upstream.
"""

from __future__ import annotations

import enum


class ErrorKind(enum.StrEnum):
    """Where a failure originated."""

    VALIDATION = "validation"
    TRANSPORT = "transport"
    UPSTREAM_BUSINESS = "upstream_business"
    DISPATCH = "dispatch"
    CONFIG = "config"


class GmError(Exception):
    """Base exception for all pygmapi errors."""

    kind: ErrorKind = ErrorKind.TRANSPORT


class GmConfigError(GmError):
    """Invalid or missing configuration."""

    kind = ErrorKind.CONFIG


class GmValidationError(GmError):
    """Caller input rejected before any upstream call (bad id, bad action)."""

    kind = ErrorKind.VALIDATION


class GmTransportError(GmError):
    """HTTP-level failure (network, timeout, invalid JSON)."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class GmApiError(GmError):
    """Upstream answered with a non-success ``status``.

    ``reason`` is the upstream's own message, kept verbatim.
    """

    kind = ErrorKind.UPSTREAM_BUSINESS

    def __init__(
        self,
        message: str,
        *,
        status: str = "",
        reason: str | None = None,
        path: str = "",
    ) -> None:
        self.status = status
        self.reason = reason
        self.path = path
        super().__init__(message)


class GmDispatchError(GmError):
    """Inbound request could not be routed to a vehicle operation."""

    kind = ErrorKind.DISPATCH
