"""
Configuration for mm-channel-count.

Values given on the command line win; anything left unset falls back to the
MM_* environment variables and then to the built-in defaults.
"""

from dataclasses import dataclass
from typing import List, Optional

from .exceptions import ConfigurationError
from .models import Connection
from .utils.const import (
    DEFAULT_PORT,
    DEFAULT_SCHEME,
    ENV_DEBUG,
    ENV_PORT,
    ENV_SCHEME,
    ENV_TOKEN,
    ENV_URL,
    ENV_USER,
)
from .utils.env import env_bool, env_str


@dataclass(frozen=True)
class Settings:
    url: str
    port: str
    scheme: str
    token: str
    user: str
    debug: bool = False

    def missing(self) -> List[str]:
        """Names of the required settings that are still empty."""
        required = [
            ("url", self.url),
            ("scheme", self.scheme),
            ("token", self.token),
            ("user", self.user),
        ]
        return [name for name, value in required if not value]

    def validate(self):
        missing = self.missing()
        if missing:
            raise ConfigurationError(missing)

    @property
    def connection(self) -> Connection:
        return Connection(host=self.url, port=self.port, scheme=self.scheme, token=self.token)

    def describe(self) -> str:
        """Multi-line parameter dump for debug output, token masked."""
        token = self.token[:4] + "..." if self.token else ""
        return (
            "Parameters:\n"
            f"  url={self.url}\n"
            f"  port={self.port}\n"
            f"  scheme={self.scheme}\n"
            f"  token={token}\n"
            f"  user={self.user}"
        )


def resolve_settings(
    url: Optional[str] = None,
    port: Optional[str] = None,
    scheme: Optional[str] = None,
    token: Optional[str] = None,
    user: Optional[str] = None,
    debug: bool = False,
) -> Settings:
    """Merge command line values over the environment and defaults."""
    return Settings(
        url=url or env_str(ENV_URL),
        port=port or env_str(ENV_PORT, DEFAULT_PORT),
        scheme=scheme or env_str(ENV_SCHEME, DEFAULT_SCHEME),
        token=token or env_str(ENV_TOKEN),
        user=user or env_str(ENV_USER),
        debug=debug or env_bool(ENV_DEBUG, False),
    )
