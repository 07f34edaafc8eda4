"""
Pytest configuration and fixtures for CSV Preview tests.
"""
import os

import pytest

# Qt widgets need a platform plugin even when nothing is shown
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

_qt_app = None


@pytest.fixture(scope="session")
def qapp():
    """Create a QApplication for tests that need Qt widgets."""
    global _qt_app
    from PySide6.QtWidgets import QApplication
    if _qt_app is None:
        _qt_app = QApplication.instance() or QApplication([])
    yield _qt_app


@pytest.fixture
def sample_csv():
    """Three rows, one numeric and one text column."""
    return "a,b\n1,x\n2,y\n3,z\n"


@pytest.fixture
def numbered_csv():
    """23 rows: id 1..23 and a repeating label."""
    lines = ["id,label"]
    for i in range(1, 24):
        lines.append(f"{i},item{i % 4}")
    return "\n".join(lines) + "\n"
