"""Configuration for SCM Metadata."""

from scm_metadata.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
