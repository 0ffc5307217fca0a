"""
pytest configuration: puts the repository root on sys.path so `core` and `ui`
import without installation, and runs Qt headless.
"""

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from core.catalog import FontCatalog  # noqa: E402
from core.models import FontRecord  # noqa: E402
from core.providers import StaticFontProvider  # noqa: E402

ARIAL = ("Arial", "Arial", "Arial", False)
COURIER = ("CourierNewPSMT", "Courier New", "Courier", True)

SAMPLE_ROWS = [
    ("Menlo-Bold", "Menlo Bold", "Menlo", True),
    COURIER,
    ("Helvetica-Oblique", "Helvetica Oblique", "Helvetica", False),
    ARIAL,
    ("Menlo-Regular", "Menlo Regular", "Menlo", True),
    ("Helvetica", "Helvetica", "Helvetica", False),
    ("Arial-BoldMT", "Arial Bold", "Arial", False),
    ("SourceCodePro-Regular", "Source Code Pro", "Source Code Pro", True),
]


def record(row) -> FontRecord:
    ps, display, family, mono = row
    return FontRecord(postscript_name=ps, display_name=display, family_name=family, is_monospaced=mono)


def make_catalog(rows) -> FontCatalog:
    catalog = FontCatalog(StaticFontProvider(rows))
    catalog.load()
    return catalog


@pytest.fixture
def catalog() -> FontCatalog:
    return make_catalog(SAMPLE_ROWS)


@pytest.fixture
def scenario_catalog() -> FontCatalog:
    return make_catalog([COURIER, ARIAL])


@pytest.fixture(scope="session")
def qt_app():
    """Shared QApplication; GUI tests skip when Qt cannot start here."""
    try:
        from PySide6.QtWidgets import QApplication
        app = QApplication.instance() or QApplication([])
    except Exception as exc:  # noqa: BLE001
        pytest.skip(f"Qt GUI unavailable: {exc}")
    return app
