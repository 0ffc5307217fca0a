# core/providers.py
# Host font services.  Each provider answers four questions: which fonts are installed, and for one of them,
# its display name, its family name and whether it is monospaced.  FontCatalog decides what to do when a
# provider cannot answer.

import logging
import re
import shutil
import subprocess
from typing import Iterable, Optional

from core.config import FC_LIST_TIMEOUT

log = logging.getLogger(__name__)

# fontconfig spacing values: FC_PROPORTIONAL=0, FC_DUAL=90, FC_MONO=100, FC_CHARCELL=110
FC_MONO = 100

_FC_FIELDS = ("postscriptname", "fullname", "family", "spacing")
_FC_FORMAT = "\t".join(f"%{{{name}}}" for name in _FC_FIELDS) + "\n"
_UNESCAPED_COMMA = re.compile(r"(?<!\\),")


class ProviderError(Exception):
    """The provider could not list fonts, or could not resolve one of them."""


class FontProvider:
    name = "abstract"

    def list_identifiers(self) -> list[str]:
        raise NotImplementedError

    def display_name(self, ident: str) -> Optional[str]:
        raise NotImplementedError

    def family_name(self, ident: str) -> Optional[str]:
        raise NotImplementedError

    def is_monospaced(self, ident: str) -> bool:
        raise NotImplementedError


class StaticFontProvider(FontProvider):
    """
    Serves a fixed list of rows: (postscript, display, family, monospaced).
    `display` and `family` may be None to exercise the fallbacks.
    """
    name = "static"

    def __init__(self, rows: Iterable[tuple]):
        self._rows = [tuple(r) for r in rows]
        self._by_name: dict[str, tuple] = {}
        for row in self._rows:
            self._by_name.setdefault(row[0], row)

    def list_identifiers(self) -> list[str]:
        return [row[0] for row in self._rows]

    def _row(self, ident: str) -> tuple:
        try:
            return self._by_name[ident]
        except KeyError:
            raise ProviderError(f"Unknown font '{ident}'") from None

    def display_name(self, ident: str) -> Optional[str]:
        return self._row(ident)[1]

    def family_name(self, ident: str) -> Optional[str]:
        return self._row(ident)[2]

    def is_monospaced(self, ident: str) -> bool:
        return bool(self._row(ident)[3])


def _first_value(raw: str) -> Optional[str]:
    """fontconfig joins multi-language values with ','; literal commas are escaped."""
    if not raw:
        return None
    first = _UNESCAPED_COMMA.split(raw, maxsplit=1)[0]
    first = first.replace("\\,", ",").replace("\\\\", "\\").strip()
    return first or None


def _parse_spacing(raw: str) -> int:
    value = _first_value(raw)
    if value is None:
        return 0
    try:
        return int(value)
    except ValueError:
        # Older fontconfig prints the constant name
        return {"mono": FC_MONO, "charcell": 110, "dual": 90}.get(value.lower(), 0)


class FontconfigProvider(FontProvider):
    """Linux/BSD fonts via `fc-list`."""
    name = "fontconfig"

    def __init__(self, executable: str = "fc-list", timeout: float = FC_LIST_TIMEOUT):
        self.executable = executable
        self.timeout = timeout
        self._faces: dict[str, dict] = {}

    def list_identifiers(self) -> list[str]:
        self._faces = self._query()
        return list(self._faces)

    def display_name(self, ident: str) -> Optional[str]:
        return self._face(ident)["fullname"]

    def family_name(self, ident: str) -> Optional[str]:
        return self._face(ident)["family"]

    def is_monospaced(self, ident: str) -> bool:
        return self._face(ident)["spacing"] >= FC_MONO

    # ─── Internal Helpers ──────────────────────────────────────────────────

    def _face(self, ident: str) -> dict:
        try:
            return self._faces[ident]
        except KeyError:
            raise ProviderError(f"fontconfig has no face named '{ident}'") from None

    def _query(self) -> dict[str, dict]:
        try:
            proc = subprocess.run(
                [self.executable, f"--format={_FC_FORMAT}"],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise ProviderError(f"{self.executable} not found") from e
        except subprocess.TimeoutExpired as e:
            raise ProviderError(f"{self.executable} timed out after {self.timeout}s") from e

        if proc.returncode != 0:
            raise ProviderError(f"{self.executable} failed ({proc.returncode}): {proc.stderr.strip()}")

        return self.parse(proc.stdout)

    @staticmethod
    def parse(output: str) -> dict[str, dict]:
        faces: dict[str, dict] = {}
        for line in output.splitlines():
            parts = line.split("\t")
            if len(parts) != len(_FC_FIELDS):
                log.debug(f"Skipping malformed fc-list line: {line!r}")
                continue

            ps_raw, full_raw, family_raw, spacing_raw = parts
            ps = _first_value(ps_raw)
            if not ps or ps in faces:
                continue

            faces[ps] = {
                "fullname": _first_value(full_raw),
                "family":   _first_value(family_raw),
                "spacing":  _parse_spacing(spacing_raw),
            }
        return faces


class QtFontProvider(FontProvider):
    """
    Fonts as the Qt font database sees them.  Qt does not expose PostScript
    names, so one is synthesised from family and style ("DejaVuSans-Bold").
    Needs a QGuiApplication to exist before list_identifiers() is called.
    """
    name = "qt"

    def __init__(self):
        self._faces: dict[str, tuple[str, str]] = {}

    def list_identifiers(self) -> list[str]:
        from PySide6.QtGui import QFontDatabase, QGuiApplication

        if QGuiApplication.instance() is None:
            raise ProviderError("Qt font database needs a running QGuiApplication")

        faces: dict[str, tuple[str, str]] = {}
        for family in QFontDatabase.families():
            if QFontDatabase.isPrivateFamily(family):
                continue
            for style in QFontDatabase.styles(family) or ["Regular"]:
                ident = f"{family}-{style}".replace(" ", "")
                faces.setdefault(ident, (family, style))

        self._faces = faces
        return list(faces)

    def display_name(self, ident: str) -> Optional[str]:
        family, style = self._face(ident)
        if style.lower() in ("regular", "normal", "book", "roman"):
            return family
        return f"{family} {style}"

    def family_name(self, ident: str) -> Optional[str]:
        return self._face(ident)[0]

    def is_monospaced(self, ident: str) -> bool:
        from PySide6.QtGui import QFontDatabase

        family, style = self._face(ident)
        return QFontDatabase.isFixedPitch(family, style)

    def _face(self, ident: str) -> tuple[str, str]:
        try:
            return self._faces[ident]
        except KeyError:
            raise ProviderError(f"Qt has no face named '{ident}'") from None


def default_provider(name: str = "auto") -> FontProvider:
    name = name.lower()
    if name == "auto":
        name = "fontconfig" if shutil.which("fc-list") else "qt"
        log.info(f"Using {name} font provider")

    if name == "fontconfig":
        return FontconfigProvider()
    if name == "qt":
        return QtFontProvider()
    raise ValueError(f"Unknown font provider '{name}' (expected auto, fontconfig or qt)")
