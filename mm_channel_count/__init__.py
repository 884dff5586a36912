"""Report how many Mattermost channels a user belongs to."""

__version__ = "0.1.0"
