import hikari


class ChannelPermissionsError(Exception):
    pass


class MemberNotFoundError(ChannelPermissionsError, LookupError):
    def __init__(self, guild_id: hikari.Snowflake, member_id: hikari.Snowflake) -> None:
        super().__init__(f"member {member_id} not found in guild {guild_id}")
        self.guild_id = guild_id
        self.member_id = member_id


class GuildUnavailableError(ChannelPermissionsError, LookupError):
    def __init__(self, guild_id: hikari.Snowflake) -> None:
        super().__init__(f"guild {guild_id} is not cached")
        self.guild_id = guild_id
