from automerge.config.settings import (
    EventSettings,
    GitHubSettings,
    LoggingSettings,
    PolicySettings,
    Settings,
    load_settings,
)

__all__ = [
    'Settings',
    'GitHubSettings',
    'LoggingSettings',
    'PolicySettings',
    'EventSettings',
    'load_settings',
]
