"""Utility functions for mm-channel-count CLI."""

from .const import (
    PROGRAM_NAME,
    API_PREFIX,
    DEFAULT_PORT,
    DEFAULT_SCHEME,
    CHANNEL_DIRECT,
    EXIT_OK,
    EXIT_CONFIG,
    EXIT_USER_LOOKUP,
    EXIT_TEAM_LOOKUP,
)

from .env import (
    env_str,
    env_bool,
)

from .log import (
    setup_logging,
)

from .api import (
    get_client,
    call_api,
    classify_response,
    expect_record,
    expect_records,
)

from .mattermost import (
    get_user_by_username,
    get_teams_for_user,
    get_channels_for_team_for_user,
)

from .resolution import (
    resolve_user,
    resolve_teams_for_user,
    resolve_channel_counts,
)

from .formatting import (
    team_column_width,
    format_summary,
    format_summary_yaml,
    print_summary,
)
