import typing
from types import SimpleNamespace
from unittest import mock

import hikari
import pytest
from fakes import CHANNEL_ID, GUILD_ID, make_guild

from chanperms.channel import GuildChannel


@pytest.fixture
def guild() -> SimpleNamespace:
    return make_guild()


@pytest.fixture
def client(guild: SimpleNamespace) -> mock.Mock:
    client = mock.Mock()
    client.guilds = {guild.id: guild}
    client.delete_channel = mock.AsyncMock()
    client.delete_channel_permission = mock.AsyncMock()
    client.edit_channel = mock.AsyncMock()
    client.edit_channel_permission = mock.AsyncMock()
    client.edit_channel_position = mock.AsyncMock()
    return client


@pytest.fixture
def make_channel(
    client: mock.Mock, guild: SimpleNamespace
) -> typing.Callable[..., GuildChannel]:
    def factory(**data: typing.Any) -> GuildChannel:
        payload = {
            "id": str(CHANNEL_ID),
            "guild_id": str(GUILD_ID),
            "type": hikari.ChannelType.GUILD_TEXT,
            "name": "general",
            "position": 0,
            "parent_id": None,
            "nsfw": False,
            "permission_overwrites": [],
            **data,
        }
        channel = GuildChannel(payload, client)  # type: ignore
        guild.channels[channel.id] = channel
        return channel

    return factory
