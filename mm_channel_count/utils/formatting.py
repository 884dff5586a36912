"""Summary formatting."""

import yaml

from ..models import User

PADDING = 2


def team_column_width(user: User) -> int:
    """Width of the team name column: longest name plus padding."""
    return max((len(team.name) for team in user.teams), default=0) + PADDING


def total_channels(user: User, total_dm_channels: int) -> int:
    return sum(team.channel_count for team in user.teams) + total_dm_channels


def format_summary(user: User, total_dm_channels: int) -> str:
    """Render the plain text channel count report."""
    width = team_column_width(user)

    lines = [
        "",
        "",
        "Summary",
        "=======",
        "",
        f"Username: {user.username}",
        f"Email:    {user.email}",
        f"Name:     {user.full_name}",
        f"Nickname: {user.nickname}",
        "",
        "Teams",
        "=====",
        "",
    ]
    for team in user.teams:
        lines.append(f"{team.name:<{width}} : {team.channel_count}")

    lines += [
        "",
        f"Direct Message Channels : {total_dm_channels}",
        "",
        f"Total channel count     : {total_channels(user, total_dm_channels)}",
        "",
    ]
    return "\n".join(lines) + "\n"


def format_summary_yaml(user: User, total_dm_channels: int) -> str:
    """Render the report as a YAML document."""
    output = {
        "user": {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "name": user.full_name,
            "nickname": user.nickname,
        },
        "teams": [
            {"name": team.name, "id": team.id, "channel_count": team.channel_count}
            for team in user.teams
        ],
        "direct_message_channels": total_dm_channels,
        "total_channels": total_channels(user, total_dm_channels),
    }
    return yaml.dump(output, indent=2, sort_keys=False, default_flow_style=False)


def print_summary(user: User, total_dm_channels: int, output_format: str = "text"):
    if output_format == "yaml":
        print(format_summary_yaml(user, total_dm_channels), end="")
    else:
        print(format_summary(user, total_dm_channels), end="")
