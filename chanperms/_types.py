from __future__ import annotations

import typing

import hikari

if typing.TYPE_CHECKING:
    from .channel import GuildChannel
    from .permissions import PermissionSet


class MemberType(typing.Protocol):
    @property
    def id(self) -> hikari.Snowflake:
        ...

    @property
    def role_ids(self) -> typing.Sequence[hikari.Snowflake]:
        ...


class GuildType(typing.Protocol):
    @property
    def id(self) -> hikari.Snowflake:
        ...

    members: typing.Mapping[hikari.Snowflake, MemberType]
    channels: typing.Mapping[hikari.Snowflake, GuildChannel]

    def permissions_of(self, member: MemberType) -> PermissionSet:
        ...


class ChannelClientType(typing.Protocol):
    guilds: typing.Mapping[hikari.Snowflake, GuildType]

    async def delete_channel(
        self, channel_id: hikari.Snowflake, reason: hikari.UndefinedOr[str]
    ) -> typing.Any:
        ...

    async def delete_channel_permission(
        self,
        channel_id: hikari.Snowflake,
        overwrite_id: hikari.Snowflakeish,
        reason: hikari.UndefinedOr[str],
    ) -> typing.Any:
        ...

    async def edit_channel(
        self,
        channel_id: hikari.Snowflake,
        options: dict[str, typing.Any],
        reason: hikari.UndefinedOr[str],
    ) -> typing.Any:
        ...

    async def edit_channel_permission(
        self,
        channel_id: hikari.Snowflake,
        overwrite_id: hikari.Snowflakeish,
        allow: int,
        deny: int,
        type: int,
        reason: hikari.UndefinedOr[str],
    ) -> typing.Any:
        ...

    async def edit_channel_position(
        self,
        channel_id: hikari.Snowflake,
        position: int,
        options: dict[str, typing.Any] | None,
    ) -> typing.Any:
        ...


class PermissionOverwritePayload(typing.TypedDict):
    id: str | int
    type: int
    allow: str | int
    deny: str | int


class ChannelPayload(typing.TypedDict, total=False):
    id: str | int
    guild_id: str | int
    type: int
    name: str
    position: int
    parent_id: str | int | None
    nsfw: bool
    permission_overwrites: list[PermissionOverwritePayload] | None
