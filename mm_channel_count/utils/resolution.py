"""ID Resolution (User/Team/Channel counts)."""

import logging
from typing import List

from ..exceptions import ApiError, ChannelLookupError, TeamLookupError, UserLookupError
from ..models import ChannelCounts, Team, User
from .const import CHANNEL_DIRECT
from .mattermost import (
    get_channels_for_team_for_user,
    get_teams_for_user,
    get_user_by_username,
)

logger = logging.getLogger(__name__)


def resolve_user(client, username: str) -> User:
    """Look up a user by username. Teams are attached later."""
    logger.debug(f"Getting user ID for user: {username}")
    try:
        data = get_user_by_username(client, username)
    except ApiError as e:
        raise UserLookupError(e) from e

    return User(
        id=data.get("id", ""),
        username=data.get("username") or username,
        email=data.get("email", ""),
        first_name=data.get("first_name", ""),
        last_name=data.get("last_name", ""),
        nickname=data.get("nickname", ""),
    )


def resolve_teams_for_user(client, user_id: str) -> List[Team]:
    """Get the user's teams in the order the server returns them."""
    logger.debug(f"Getting teams for user ID: {user_id}")
    try:
        teams = get_teams_for_user(client, user_id)
    except ApiError as e:
        raise TeamLookupError(e) from e

    return [Team(name=team.get("display_name", ""), id=team.get("id", "")) for team in teams]


def resolve_channel_counts(
    client, team_id: str, user_id: str, include_direct_messages: bool
) -> ChannelCounts:
    """Count the user's channels in a team.

    Direct message channels are not tied to a team, so the server returns
    the same set for every team. They are only tallied when
    include_direct_messages is set; otherwise the DM count is 0.
    """
    logger.debug(f"Getting channel count for team ID: {team_id}")
    try:
        channels = get_channels_for_team_for_user(client, team_id, user_id)
    except ApiError as e:
        raise ChannelLookupError(e) from e

    channel_count = 0
    dm_count = 0
    for channel in channels:
        if channel.get("type") == CHANNEL_DIRECT:
            if include_direct_messages:
                dm_count += 1
        else:
            channel_count += 1

    return ChannelCounts(channels=channel_count, direct_messages=dm_count)
