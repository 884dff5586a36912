"""Constants for mm-channel-count CLI."""

PROGRAM_NAME = "mm-channel-count"

API_PREFIX = "/api/v4"
REQUEST_TIMEOUT = 60.0

DEFAULT_PORT = "8065"
DEFAULT_SCHEME = "http"

# Environment fallbacks for command line options
ENV_URL = "MM_URL"
ENV_PORT = "MM_PORT"
ENV_SCHEME = "MM_SCHEME"
ENV_TOKEN = "MM_TOKEN"
ENV_USER = "MM_USER"
ENV_DEBUG = "MM_DEBUG"

# Channel type marker for direct messages; O, P and G are ordinary channels
CHANNEL_DIRECT = "D"

EXIT_OK = 0
EXIT_CONFIG = 1
EXIT_USER_LOOKUP = 10
EXIT_TEAM_LOOKUP = 11
