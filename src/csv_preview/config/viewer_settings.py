"""
Viewer Settings - Page sizing, layout metrics and statistics limits.

Settings come from an optional YAML file. Every key is optional; anything
missing keeps the default from constants.py.

Example (viewer.yaml):
    default_rows_per_page: 25
    min_rows_per_page: 5
    estimated_row_height: 36
    row_padding: 3
    collation_locale: fr_FR
"""
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from ..constants import (
    DEFAULT_ROWS_PER_PAGE,
    ESTIMATED_ROW_HEIGHT,
    MIN_ROWS_PER_PAGE,
    PAGINATION_BAR_HEIGHT,
    SCROLLBAR_HEIGHT,
    TABLE_HEADER_HEIGHT,
    TOP_VALUES_LIMIT,
    VIEW_CACHE_SIZE,
)
from ..core.errors import ValidationError
from ..core.pagination import LayoutMetrics

logger = logging.getLogger(__name__)


@dataclass
class ViewerSettings:
    """Tunable behaviour of a ViewSession."""
    default_rows_per_page: int = DEFAULT_ROWS_PER_PAGE
    min_rows_per_page: int = MIN_ROWS_PER_PAGE
    estimated_row_height: int = ESTIMATED_ROW_HEIGHT
    header_height: int = TABLE_HEADER_HEIGHT
    pagination_height: int = PAGINATION_BAR_HEIGHT
    scrollbar_height: int = SCROLLBAR_HEIGHT
    row_padding: int = 0
    top_values_limit: int = TOP_VALUES_LIMIT
    view_cache_size: int = VIEW_CACHE_SIZE
    collation_locale: Optional[str] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise ValidationError for values the engine cannot work with."""
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "collation_locale":
                if value is not None and not isinstance(value, str):
                    raise ValidationError(f"{f.name} must be a string, got {value!r}")
                continue
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValidationError(f"{f.name} must be an integer, got {value!r}")

        if self.default_rows_per_page < 1:
            raise ValidationError("default_rows_per_page must be at least 1")
        if self.min_rows_per_page < 1:
            raise ValidationError("min_rows_per_page must be at least 1")
        if self.estimated_row_height < 1:
            raise ValidationError("estimated_row_height must be at least 1")
        if self.row_padding < 0:
            raise ValidationError("row_padding cannot be negative")
        if self.view_cache_size < 1:
            raise ValidationError("view_cache_size must be at least 1")

    @property
    def layout_metrics(self) -> LayoutMetrics:
        return LayoutMetrics(
            row_height=self.estimated_row_height,
            header_height=self.header_height,
            pagination_height=self.pagination_height,
            scrollbar_height=self.scrollbar_height,
            min_rows_per_page=self.min_rows_per_page,
            row_padding=self.row_padding,
        )


def load_viewer_settings(path: Optional[Union[str, Path]] = None) -> ViewerSettings:
    """
    Load settings from a YAML file.

    Args:
        path: YAML file. None or a missing file returns the defaults.

    Returns:
        ViewerSettings

    Raises:
        ValidationError: The file is not a mapping or holds invalid values
    """
    if path is None:
        return ViewerSettings()

    path = Path(path)
    if not path.exists():
        logger.debug(f"Settings file not found, using defaults: {path}")
        return ViewerSettings()

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValidationError(f"Invalid settings file {path}: {e}") from e

    if not data:
        return ViewerSettings()
    if not isinstance(data, dict):
        raise ValidationError(f"Settings file {path} must contain a mapping")

    known = {f.name for f in fields(ViewerSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning(f"Ignoring unknown settings in {path.name}: {', '.join(map(str, unknown))}")

    settings = ViewerSettings(**{k: v for k, v in data.items() if k in known})
    logger.info(f"Loaded viewer settings from {path}")
    return settings
