# ui/tools/clipboard.py

import logging

from PySide6.QtGui import QGuiApplication

log = logging.getLogger(__name__)


def copy_text(text: str) -> bool:
    """Put `text` on the system clipboard.  Returns False when there is no clipboard to write to."""
    clipboard = QGuiApplication.clipboard()
    if clipboard is None:
        log.warning("No clipboard available")
        return False
    clipboard.setText(text)
    log.debug(f"Copied {len(text)} characters to clipboard")
    return True
