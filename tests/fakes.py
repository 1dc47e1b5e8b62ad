import typing
from types import SimpleNamespace

import hikari

from chanperms.permissions import PermissionSet

GUILD_ID = hikari.Snowflake(1_000_000_000_000_000)
CHANNEL_ID = hikari.Snowflake(1_000_000_000_000_001)
MEMBER_ID = hikari.Snowflake(1_000_000_000_000_002)
ROLE_A = hikari.Snowflake(1_000_000_000_000_003)
ROLE_B = hikari.Snowflake(1_000_000_000_000_004)


def make_guild(base: int = 0) -> SimpleNamespace:
    guild = SimpleNamespace(id=GUILD_ID, members={}, channels={}, base=base)
    guild.permissions_of = lambda member: PermissionSet(guild.base)
    return guild


def make_member(
    member_id: int = MEMBER_ID, role_ids: typing.Sequence[int] = ()
) -> SimpleNamespace:
    return SimpleNamespace(
        id=hikari.Snowflake(member_id),
        role_ids=[hikari.Snowflake(x) for x in role_ids],
    )


def overwrite(
    target_id: int, allow: int = 0, deny: int = 0, type: int = 0
) -> dict[str, typing.Any]:
    return {
        "id": str(target_id),
        "type": type,
        "allow": str(int(allow)),
        "deny": str(int(deny)),
    }
