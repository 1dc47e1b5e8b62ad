"""
Guild channel model.

Keeps the state of a guild channel in sync with the payloads received from the
gateway and resolves the effective permissions of a member in the channel.
Everything that talks to Discord is delegated to the injected client.
"""

from __future__ import annotations

import logging
import typing
from datetime import datetime

import hikari

from ._types import ChannelClientType, ChannelPayload, GuildType, MemberType
from .errors import GuildUnavailableError, MemberNotFoundError
from .overwrites import ChannelOverwriteTable
from .permissions import PermissionSet, fold

logger = logging.getLogger(__name__)
THREAD_TYPES: typing.Final = frozenset(
    (
        hikari.ChannelType.GUILD_NEWS_THREAD,
        hikari.ChannelType.GUILD_PUBLIC_THREAD,
        hikari.ChannelType.GUILD_PRIVATE_THREAD,
    )
)
JSON_PROPS: typing.Final = (
    "type",
    "name",
    "nsfw",
    "parent_id",
    "permission_overwrites",
    "position",
)


class GuildPlaceholder:
    __slots__ = ("id",)

    def __init__(self, guild_id: hikari.Snowflake) -> None:
        self.id = guild_id

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"


def everyone_target(guild: GuildType) -> hikari.Snowflake:
    # the @everyone role shares its ID with the guild
    return guild.id


def overwrite_source_channel(channel: GuildChannel) -> GuildChannel | None:
    if not channel.is_thread:
        return channel

    guild = channel.guild
    parent = None
    if channel.parent_id and not isinstance(guild, GuildPlaceholder):
        parent = guild.channels.get(channel.parent_id)

    if parent is None:
        logger.debug(
            f"parent {channel.parent_id} of thread {channel.id} not found, "
            "ignoring overwrites"
        )
    return parent


def resolve_member(
    guild: GuildType, member_id: hikari.Snowflakeish | str
) -> MemberType:
    snowflake = hikari.Snowflake(member_id)
    member = guild.members.get(snowflake)
    if member is None:
        raise MemberNotFoundError(guild.id, snowflake)
    return member


class GuildChannel:
    id: hikari.Snowflake
    guild_id: hikari.Snowflake
    type: hikari.UndefinedOr[hikari.ChannelType | int]
    name: hikari.UndefinedOr[str]
    position: hikari.UndefinedOr[int]
    parent_id: hikari.UndefinedNoneOr[hikari.Snowflake]
    nsfw: hikari.UndefinedOr[bool]
    permission_overwrites: ChannelOverwriteTable

    def __init__(self, data: ChannelPayload, client: ChannelClientType) -> None:
        self._client = client
        self.id = hikari.Snowflake(data["id"])
        self.guild_id = hikari.Snowflake(data["guild_id"])
        if self.guild_id not in client.guilds:
            logger.debug(f"guild {self.guild_id} of channel {self.id} is not cached")

        self.type = hikari.UNDEFINED
        self.name = hikari.UNDEFINED
        self.position = hikari.UNDEFINED
        self.parent_id = hikari.UNDEFINED
        self.nsfw = hikari.UNDEFINED
        self.permission_overwrites = ChannelOverwriteTable()

        self.update(data)

    @property
    def guild(self) -> GuildType | GuildPlaceholder:
        guild = self._client.guilds.get(self.guild_id)
        return GuildPlaceholder(self.guild_id) if guild is None else guild

    @property
    def created_at(self) -> datetime:
        return self.id.created_at

    @property
    def mention(self) -> str:
        return f"<#{self.id}>"

    @property
    def is_thread(self) -> bool:
        return self.type in THREAD_TYPES

    def update(self, data: ChannelPayload) -> None:
        if "type" in data:
            self.type = hikari.ChannelType(data["type"])
            if not isinstance(self.type, hikari.ChannelType):
                logger.debug(f"unknown type {self.type} for channel {self.id}")
        if "name" in data:
            self.name = data["name"]
        if "position" in data:
            self.position = data["position"]
        if "parent_id" in data:
            parent_id = data["parent_id"]
            self.parent_id = None if parent_id is None else hikari.Snowflake(parent_id)
        # nsfw is not partial, a missing key resets it
        self.nsfw = data.get("nsfw", hikari.UNDEFINED)

        overwrites = data.get("permission_overwrites")
        if overwrites is not None:
            self.permission_overwrites = ChannelOverwriteTable(overwrites)

    def permissions_of(
        self, member: MemberType | hikari.Snowflakeish | str
    ) -> PermissionSet:
        """
        Get the permissions of a member in this channel.

        Parameters
        ----------
        member
            The member or the ID of a member cached in the guild.

        Raises
        ------
        GuildUnavailableError
            The guild of this channel is not cached.
        MemberNotFoundError
            No member with the given ID is cached in the guild.
        """
        guild = self.guild
        if isinstance(guild, GuildPlaceholder):
            raise GuildUnavailableError(self.guild_id)
        if isinstance(member, (int, str)):
            member = resolve_member(guild, member)

        permissions = guild.permissions_of(member).allow
        if permissions & PermissionSet.ADMINISTRATOR:
            return PermissionSet(PermissionSet.ALL)

        channel = overwrite_source_channel(self)
        overwrites = ChannelOverwriteTable()
        if channel is not None:
            overwrites = channel.permission_overwrites

        overwrite_everyone = overwrites.get(everyone_target(guild))
        if overwrite_everyone:
            permissions = fold(
                permissions, overwrite_everyone.allow, overwrite_everyone.deny
            )

        # allow wins over deny between roles, no matter which role set what
        allow = 0
        deny = 0
        for role_id in member.role_ids:
            overwrite_role = overwrites.get(role_id)
            if overwrite_role:
                allow |= int(overwrite_role.allow)
                deny |= int(overwrite_role.deny)

        permissions = fold(permissions, allow, deny)

        overwrite_member = overwrites.get(member.id)
        if overwrite_member:
            permissions = fold(
                permissions, overwrite_member.allow, overwrite_member.deny
            )

        return PermissionSet(permissions)

    async def delete(
        self, reason: hikari.UndefinedOr[str] = hikari.UNDEFINED
    ) -> typing.Any:
        return await self._client.delete_channel(self.id, reason)

    async def delete_permission(
        self,
        overwrite_id: hikari.Snowflakeish,
        reason: hikari.UndefinedOr[str] = hikari.UNDEFINED,
    ) -> typing.Any:
        return await self._client.delete_channel_permission(
            self.id, overwrite_id, reason
        )

    async def edit(
        self,
        options: dict[str, typing.Any],
        reason: hikari.UndefinedOr[str] = hikari.UNDEFINED,
    ) -> typing.Any:
        return await self._client.edit_channel(self.id, options, reason)

    async def edit_permission(
        self,
        overwrite_id: hikari.Snowflakeish,
        allow: int,
        deny: int,
        type: int,
        reason: hikari.UndefinedOr[str] = hikari.UNDEFINED,
    ) -> typing.Any:
        return await self._client.edit_channel_permission(
            self.id, overwrite_id, allow, deny, type, reason
        )

    async def edit_position(
        self, position: int, options: dict[str, typing.Any] | None = None
    ) -> typing.Any:
        # positions are lowest on top, highest at the bottom
        return await self._client.edit_channel_position(self.id, position, options)

    def to_json(self, props: typing.Iterable[str] = ()) -> dict[str, typing.Any]:
        json: dict[str, typing.Any] = {
            "id": str(self.id),
            "created_at": int(self.created_at.timestamp() * 1000),
        }
        for prop in (*JSON_PROPS, *props):
            value = getattr(self, prop)
            if value is hikari.UNDEFINED:
                continue
            elif hasattr(value, "to_json"):
                value = value.to_json()
            elif isinstance(value, hikari.Snowflake):
                value = str(value)
            elif isinstance(value, int) and not isinstance(value, bool):
                value = int(value)
            json[prop] = value
        return json

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id}, name={self.name!r})"
