"""Configuration for git-online."""

from git_online.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
