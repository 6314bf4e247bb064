"""Uniform error result."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, SerializerFunctionWrapHandler, model_serializer

from pygmapi._constants import CONNECTION_ERROR_REASON, DISPATCH_ERROR_REASON
from pygmapi.exceptions import ErrorKind, GmApiError, GmError
from pygmapi.models._base import GmResultModel


class ErrorResult(GmResultModel):
    """``{"status": "Failed", "reason": ...}`` returned for every failure.

    ``kind`` records where the failure came from.  It is not serialized:
    validation and transport failures look identical to callers.
    """

    status: Literal["Failed"] = "Failed"
    reason: str | None = None
    kind: ErrorKind = Field(default=ErrorKind.TRANSPORT, exclude=True)

    @model_serializer(mode="wrap")
    def _omit_missing_reason(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # A failure envelope without a reason yields {"status": "Failed"}.
        data = handler(self)
        if data.get("reason") is None:
            data.pop("reason", None)
        return data

    @classmethod
    def connection_error(cls, kind: ErrorKind = ErrorKind.TRANSPORT) -> ErrorResult:
        return cls(reason=CONNECTION_ERROR_REASON, kind=kind)

    @classmethod
    def dispatch_error(cls) -> ErrorResult:
        return cls(reason=DISPATCH_ERROR_REASON, kind=ErrorKind.DISPATCH)

    @classmethod
    def from_exception(cls, exc: Exception) -> ErrorResult:
        """Map an exception to the error shape callers see.

        Upstream business errors pass their reason through verbatim;
        dispatch errors get the dispatch reason; everything else
        collapses to the generic connection error.
        """
        if isinstance(exc, GmApiError):
            return cls(reason=exc.reason, kind=ErrorKind.UPSTREAM_BUSINESS)
        if isinstance(exc, GmError):
            if exc.kind == ErrorKind.DISPATCH:
                return cls.dispatch_error()
            return cls.connection_error(exc.kind)
        return cls.connection_error()
