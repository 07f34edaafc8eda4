"""
Viewport Watcher - Feeds container and window resizes into adaptive page sizing.
"""

import logging
from typing import Optional

from PySide6.QtCore import QEvent, QObject
from PySide6.QtWidgets import QWidget

from ..core.session import ViewSession

logger = logging.getLogger(__name__)


class ViewportWatcher(QObject):
    """
    Event filter observing a table container and its top-level window.

    Both sources call ViewSession.update_viewport(). The container height is
    used once the container is visible; before that the window height
    stands in.

    Usage:
        watcher = ViewportWatcher(session, table_container)
        watcher.attach()      # also registers detach() as a session teardown
        ...
        session.close()       # removes both event filters
    """

    def __init__(self, session: ViewSession, container: QWidget, window: Optional[QWidget] = None):
        super().__init__(container)
        self._session = session
        self._container = container
        self._window = window
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def _watched_window(self) -> QWidget:
        return self._window or self._container.window()

    def attach(self):
        """Install the event filters and trigger an initial measurement."""
        if self._attached:
            return
        self._container.installEventFilter(self)
        window = self._watched_window()
        if window is not self._container:
            window.installEventFilter(self)
        self._attached = True
        self._session.add_teardown(self.detach)
        self.measure()

    def detach(self):
        """Remove the event filters (safe to call twice)."""
        if not self._attached:
            return
        self._container.removeEventFilter(self)
        window = self._watched_window()
        if window is not self._container:
            window.removeEventFilter(self)
        self._attached = False
        logger.debug("Viewport watcher detached")

    def measure(self) -> bool:
        """Push the current geometry into the session."""
        container_height = self._container.height() if self._container.isVisible() else None
        return self._session.update_viewport(container_height, self._watched_window().height())

    def eventFilter(self, obj, event):
        if event.type() == QEvent.Type.Resize and obj in (self._container, self._watched_window()):
            self.measure()
        return super().eventFilter(obj, event)
