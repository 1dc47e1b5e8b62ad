from __future__ import annotations

import typing

import hikari

PermissionLike = typing.Union[hikari.Permissions, int, str]


def to_permissions(value: PermissionLike) -> hikari.Permissions:
    # the wire format carries bitmasks as numeric strings
    return hikari.Permissions(int(value))


def fold(
    permissions: hikari.Permissions | int,
    allow: hikari.Permissions | int,
    deny: hikari.Permissions | int,
) -> hikari.Permissions:
    # hikari only inverts known flags, so ~ would drop newer permission bits
    return hikari.Permissions((int(permissions) & ~int(deny)) | int(allow))


class PermissionSet:
    """
    A pair of allowed and denied permission bitmasks.

    Resolved channel permissions only ever fill ``allow``, overwrites use both.
    """

    __slots__ = ("allow", "deny")

    ALL: typing.Final = hikari.Permissions.all_permissions()
    ADMINISTRATOR: typing.Final = hikari.Permissions.ADMINISTRATOR

    allow: hikari.Permissions
    deny: hikari.Permissions

    def __init__(self, allow: PermissionLike = 0, deny: PermissionLike = 0) -> None:
        self.allow = to_permissions(allow)
        self.deny = to_permissions(deny)

    def has(self, permission: PermissionLike) -> bool:
        if isinstance(permission, str):
            permission = hikari.Permissions[permission]
        value = int(permission)
        return int(self.allow) & value == value

    def to_json(self) -> dict[str, bool]:
        json: dict[str, bool] = {}
        for permission in (self.allow | self.deny).split():
            json[str(permission.name)] = bool(self.allow & permission)
        return json

    def __int__(self) -> int:
        return int(self.allow)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermissionSet):
            return NotImplemented
        return self.allow == other.allow and self.deny == other.deny

    def __hash__(self) -> int:
        return hash((int(self.allow), int(self.deny)))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}"
            f"(allow={int(self.allow)}, deny={int(self.deny)})"
        )
