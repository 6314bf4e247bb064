"""Door lock status models."""

from __future__ import annotations

from pydantic import ConfigDict, RootModel

from pygmapi.models._base import GmResultModel


class DoorStatus(GmResultModel):
    """Lock state of a single door."""

    location: str | None = None
    locked: bool = False


class DoorsStatus(RootModel[list[DoorStatus]]):
    """Doors in the order the upstream reported them."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self):  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> DoorStatus:
        return self.root[index]
