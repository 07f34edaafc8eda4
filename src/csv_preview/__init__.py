"""
CSV Preview - In-memory engine behind an interactive CSV viewer
PySide6 Edition
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("csv-preview")
except PackageNotFoundError:
    # Package not installed, fallback to the version declared in pyproject.toml
    __version__ = "0.3.0"

__author__ = "Lestat2Lioncourt"

from .core.session import ViewSession, SessionState, ViewTab

__all__ = ["ViewSession", "SessionState", "ViewTab", "__version__"]
