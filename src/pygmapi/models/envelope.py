"""Upstream response envelope model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from pygmapi._constants import SUCCESS_STATUS
from pygmapi.models._base import TypedField


class UpstreamEnvelope(BaseModel):
    """Raw GM API response, success or failure.

    A successful envelope has ``status == "200"`` and a ``data`` or
    ``actionResult`` payload; a failed one carries ``reason`` instead.

    Parameters
    ----------
    service : str or None
        Upstream service name echoed back (informational).
    status : str
        Status code as a string (``"200"`` on success).
    reason : str or None
        Human-readable failure reason.
    data : dict or None
        Typed-field payload of read services.
    action_result : dict or None
        Payload of action services (``{"status": "EXECUTED"}``).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    service: str | None = None
    status: str = ""
    reason: str | None = None
    data: dict[str, Any] | None = None
    action_result: dict[str, Any] | None = Field(
        default=None, validation_alias=AliasChoices("actionResult", "action_result")
    )

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: Any) -> str:
        # Some upstream deployments send the code as a number.
        return "" if value is None else str(value)

    @field_validator("reason", mode="before")
    @classmethod
    def _coerce_reason(cls, value: Any) -> str | None:
        return None if value is None else str(value)

    @property
    def is_success(self) -> bool:
        return self.status == SUCCESS_STATUS

    def field(self, name: str) -> TypedField:
        """Return the typed field *name* of the ``data`` payload.

        Raises :class:`KeyError` when the payload or the field is missing.
        """
        if self.data is None or name not in self.data:
            raise KeyError(f"upstream data has no field {name!r}")
        return TypedField.model_validate(self.data[name])
