"""Build the per-team channel count report for one user."""

import logging
from typing import Tuple

from .exceptions import ChannelLookupError
from .models import User
from .utils import resolve_channel_counts, resolve_teams_for_user, resolve_user

logger = logging.getLogger(__name__)


def build_report(client, username: str) -> Tuple[User, int]:
    """Resolve the user, their teams and each team's channel count.

    Returns the populated user and the direct message channel total.
    UserLookupError and TeamLookupError propagate; a failure counting one
    team's channels is logged and leaves that team at 0.
    """
    user = resolve_user(client, username)
    user.teams = resolve_teams_for_user(client, user.id)

    total_dm_channels = 0
    for index, team in enumerate(user.teams):
        # DMs are the same for every team, so only the first team counts them
        first = index == 0
        try:
            counts = resolve_channel_counts(client, team.id, user.id, include_direct_messages=first)
        except ChannelLookupError as e:
            logger.warning(f"Failed to get channel count for team {team.name}: {e}")
            continue

        team.channel_count = counts.channels
        if first:
            total_dm_channels = counts.direct_messages

    return user, total_dm_channels
