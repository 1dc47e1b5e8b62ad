from __future__ import annotations

import typing

import hikari

from ._types import PermissionOverwritePayload
from .permissions import PermissionSet


class PermissionOverwrite(PermissionSet):
    __slots__ = ("id", "type")

    id: hikari.Snowflake
    type: hikari.PermissionOverwriteType

    def __init__(self, data: PermissionOverwritePayload) -> None:
        super().__init__(data["allow"], data["deny"])
        self.id = hikari.Snowflake(data["id"])
        self.type = hikari.PermissionOverwriteType(data["type"])

    def to_json(self) -> PermissionOverwritePayload:  # type: ignore[override]
        return {
            "id": str(self.id),
            "type": int(self.type),
            "allow": str(int(self.allow)),
            "deny": str(int(self.deny)),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermissionOverwrite):
            return NotImplemented
        return (
            self.id == other.id
            and self.type == other.type
            and super().__eq__(other)
        )

    def __hash__(self) -> int:
        return hash((self.id, int(self.type), int(self.allow), int(self.deny)))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(id={self.id}, type={self.type.name}, "
            f"allow={int(self.allow)}, deny={int(self.deny)})"
        )


class ChannelOverwriteTable:
    _overwrites: dict[hikari.Snowflake, PermissionOverwrite]

    def __init__(
        self,
        overwrites: typing.Iterable[
            PermissionOverwrite | PermissionOverwritePayload
        ] = (),
    ) -> None:
        self._overwrites = {}
        for overwrite in overwrites:
            self.add(overwrite)

    def add(
        self, overwrite: PermissionOverwrite | PermissionOverwritePayload
    ) -> PermissionOverwrite:
        if not isinstance(overwrite, PermissionOverwrite):
            overwrite = PermissionOverwrite(overwrite)
        self._overwrites[overwrite.id] = overwrite
        return overwrite

    def get(self, target_id: hikari.Snowflakeish) -> PermissionOverwrite | None:
        return self._overwrites.get(target_id)  # type: ignore[call-overload]

    def to_json(self) -> list[PermissionOverwritePayload]:
        return [overwrite.to_json() for overwrite in self]

    def __iter__(self) -> typing.Iterator[PermissionOverwrite]:
        return iter(self._overwrites.values())

    def __len__(self) -> int:
        return len(self._overwrites)

    def __contains__(self, target_id: object) -> bool:
        return target_id in self._overwrites

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._overwrites.values())!r})"
