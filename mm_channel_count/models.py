"""Data models for users, teams and the server connection."""

from dataclasses import dataclass, field
from typing import List, NamedTuple


@dataclass
class Team:
    """A team the user belongs to; channel_count excludes direct messages."""

    name: str
    id: str
    channel_count: int = 0


@dataclass
class User:
    id: str
    username: str
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    teams: List[Team] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Connection:
    """Where and how to reach the Mattermost server."""

    host: str
    port: str
    scheme: str
    token: str

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"


class ChannelCounts(NamedTuple):
    channels: int
    direct_messages: int
