"""
CSV Load Worker - Background thread that reads a CSV file.

Reading runs off the UI thread; parsing and the dataset swap happen back on
the UI thread through the session, which drops results of superseded loads.
"""

from pathlib import Path
from typing import Callable, Optional, Union
import logging

from PySide6.QtCore import QThread, Signal

from ..core.errors import CsvPreviewError
from ..core.session import FileMeta, ViewSession
from ..utils.file_reader import read_file_content

logger = logging.getLogger(__name__)


class CsvLoadWorker(QThread):
    """
    Worker for reading a CSV file.

    Signals:
        loaded: Emitted with (token, text) on success
        failed: Emitted with (token, error_message) on failure
    """

    loaded = Signal(int, str)   # token, raw text
    failed = Signal(int, str)   # token, error message

    def __init__(self, token: int, path: Union[str, Path], parent=None):
        super().__init__(parent)
        self.token = token
        self.path = Path(path)

    def run(self):
        try:
            text = read_file_content(self.path)
        except CsvPreviewError as e:
            self.failed.emit(self.token, str(e))
            return

        logger.debug(f"Read {self.path.name} ({len(text)} chars) for load #{self.token}")
        self.loaded.emit(self.token, text)


def start_file_load(
    session: ViewSession,
    path: Union[str, Path],
    on_finished: Optional[Callable[[bool], None]] = None,
    start: bool = True
) -> CsvLoadWorker:
    """
    Start loading a file into a session in the background.

    Args:
        session: Target session (enters LOADING immediately)
        path: CSV file
        on_finished: Called with True/False once the load applied or failed
        start: Start the thread right away

    Returns:
        The worker; keep a reference until it finishes
    """
    path = Path(path)
    try:
        size = path.stat().st_size
    except OSError:
        size = 0

    token = session.begin_load(FileMeta(path.name, size))
    worker = CsvLoadWorker(token, path)

    def _on_loaded(tok: int, text: str):
        applied = session.complete_load(tok, text)
        if on_finished is not None and tok == token:
            on_finished(applied)

    def _on_failed(tok: int, message: str):
        session.fail_load(tok, message)
        if on_finished is not None and tok == token:
            on_finished(False)

    worker.loaded.connect(_on_loaded)
    worker.failed.connect(_on_failed)

    if start:
        worker.start()
    return worker
