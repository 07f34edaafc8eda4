"""Configuration for CSV Preview."""

from .viewer_settings import ViewerSettings, load_viewer_settings

__all__ = ["ViewerSettings", "load_viewer_settings"]
