"""
Shared fixtures: an in-memory Mattermost API served through httpx.MockTransport.
"""

import json
import logging

import httpx
import pytest

from mm_channel_count.models import Team, User
from mm_channel_count.utils.const import ENV_DEBUG, ENV_PORT, ENV_SCHEME, ENV_TOKEN, ENV_URL, ENV_USER
from mm_channel_count.utils.log import LOGGER_NAME

BASE_URL = "http://mm.test:8065"


def channels(open_count=0, private_count=0, group_count=0, direct_count=0, prefix="c"):
    """Build raw channel records with the given type mix."""
    records = []
    for marker, count in (("O", open_count), ("P", private_count), ("G", group_count), ("D", direct_count)):
        for i in range(count):
            records.append({"id": f"{prefix}-{marker}-{i}", "type": marker})
    return records


class FakeMattermost:
    """Answers the three API v4 routes the tool uses."""

    def __init__(self):
        self.users = {}
        self.teams = {}
        self.channels = {}
        self.failures = {}
        self.bodies = {}
        self.requests = []

    def add_user(self, username, **fields):
        record = {"id": f"id-{username}", "username": username, **fields}
        self.users[username] = record
        self.teams.setdefault(record["id"], [])
        return record

    def add_team(self, user_id, team_id, display_name, team_channels):
        self.teams.setdefault(user_id, []).append({"id": team_id, "display_name": display_name})
        self.channels[(user_id, team_id)] = team_channels

    def fail(self, path, status_code):
        self.failures[path] = status_code

    def reply(self, path, body):
        """Answer path with status 200 and an arbitrary JSON body."""
        self.bodies[path] = body

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self.failures:
            return httpx.Response(self.failures[path], json={"message": "failure"})
        if path in self.bodies:
            content = json.dumps(self.bodies[path]).encode()
            return httpx.Response(200, content=content, headers={"Content-Type": "application/json"})

        parts = path.split("/")[3:]
        if parts[:2] == ["users", "username"] and len(parts) == 3:
            user = self.users.get(parts[2])
            if user is None:
                return httpx.Response(404, json={"message": "not found"})
            return httpx.Response(200, json=user)
        if len(parts) == 3 and parts[0] == "users" and parts[2] == "teams":
            return httpx.Response(200, json=self.teams.get(parts[1], []))
        if len(parts) == 5 and parts[0] == "users" and parts[2] == "teams" and parts[4] == "channels":
            key = (parts[1], parts[3])
            if key not in self.channels:
                return httpx.Response(404, json={"message": "not found"})
            return httpx.Response(200, json=self.channels[key])
        return httpx.Response(404, json={"message": "unknown route"})

    def transport(self):
        return httpx.MockTransport(self.handle)


@pytest.fixture
def mm():
    """A server where alice is in General (5 channels) and Ops (3 channels), with 2 DMs."""
    server = FakeMattermost()
    alice = server.add_user(
        "alice",
        email="alice@example.com",
        first_name="Alice",
        last_name="Liddell",
        nickname="al",
    )
    dms = channels(direct_count=2, prefix="dm")
    server.add_team(alice["id"], "team-general", "General", channels(open_count=3, private_count=1, group_count=1) + dms)
    server.add_team(alice["id"], "team-ops", "Ops", channels(open_count=2, private_count=1, prefix="ops") + dms)
    return server


@pytest.fixture
def client(mm):
    with httpx.Client(transport=mm.transport(), base_url=BASE_URL) as c:
        yield c


@pytest.fixture
def sample_user():
    return User(
        id="id-alice",
        username="alice",
        email="alice@example.com",
        first_name="Alice",
        last_name="Liddell",
        nickname="al",
        teams=[
            Team(name="General", id="team-general", channel_count=5),
            Team(name="Ops", id="team-ops", channel_count=3),
        ],
    )


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep MM_* variables from the developer's shell out of the tests."""
    for key in (ENV_URL, ENV_PORT, ENV_SCHEME, ENV_TOKEN, ENV_USER, ENV_DEBUG):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
