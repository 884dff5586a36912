"""Mattermost API operations."""

from urllib.parse import quote

import httpx

from .api import call_api, expect_record, expect_records

GET_USER_BY_USERNAME = "GetUserByUsername"
GET_TEAMS_FOR_USER = "GetTeamsForUser"
GET_CHANNELS_FOR_TEAM_FOR_USER = "GetChannelsForTeamForUser"


def _segment(value: str) -> str:
    return quote(value, safe="")


def get_user_by_username(client: httpx.Client, username: str) -> dict:
    """Fetch a user record by username."""
    data = call_api(client, GET_USER_BY_USERNAME, f"/users/username/{_segment(username)}")
    return expect_record(data, GET_USER_BY_USERNAME, required=("id",))


def get_teams_for_user(client: httpx.Client, user_id: str) -> list:
    """Fetch the teams a user is a member of."""
    data = call_api(client, GET_TEAMS_FOR_USER, f"/users/{_segment(user_id)}/teams")
    return expect_records(data, GET_TEAMS_FOR_USER)


def get_channels_for_team_for_user(
    client: httpx.Client, team_id: str, user_id: str, include_deleted: bool = False
) -> list:
    """Fetch the channels a user belongs to within a team, DMs included."""
    params = {"include_deleted": str(include_deleted).lower()}
    data = call_api(
        client,
        GET_CHANNELS_FOR_TEAM_FOR_USER,
        f"/users/{_segment(user_id)}/teams/{_segment(team_id)}/channels",
        params,
    )
    return expect_records(data, GET_CHANNELS_FOR_TEAM_FOR_USER)
