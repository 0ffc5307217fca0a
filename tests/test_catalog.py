from core.catalog import FontCatalog
from core.models import UNKNOWN_FAMILY
from core.providers import FontProvider, ProviderError, StaticFontProvider

from conftest import SAMPLE_ROWS, make_catalog


class FlakyProvider(StaticFontProvider):
    """Static rows, but chosen identifiers fail in chosen ways."""

    def __init__(self, rows, broken_names=(), broken_family=(), broken_mono=(), crash_mono=()):
        super().__init__(rows)
        self.broken_names = set(broken_names)
        self.broken_family = set(broken_family)
        self.broken_mono = set(broken_mono)
        self.crash_mono = set(crash_mono)

    def display_name(self, ident):
        if ident in self.broken_names:
            raise ProviderError("no name")
        return super().display_name(ident)

    def family_name(self, ident):
        if ident in self.broken_family:
            raise ProviderError("no family")
        return super().family_name(ident)

    def is_monospaced(self, ident):
        if ident in self.broken_mono:
            raise ProviderError("no traits")
        if ident in self.crash_mono:
            raise RuntimeError("boom")
        return super().is_monospaced(ident)


class SequenceProvider(FontProvider):
    """Answers each listed row in turn, so one identifier can carry two sets of metadata."""
    name = "sequence"

    def __init__(self, rows):
        self.rows = list(rows)
        self._pending = []
        self._current = None

    def list_identifiers(self):
        self._pending = list(self.rows)
        return [row[0] for row in self.rows]

    def is_monospaced(self, ident):
        # FontCatalog asks for traits first
        self._current = self._pending.pop(0)
        return self._current[3]

    def display_name(self, ident):
        return self._current[1]

    def family_name(self, ident):
        return self._current[2]


class DeadProvider(FontProvider):
    name = "dead"

    def list_identifiers(self):
        raise ProviderError("service unavailable")


def test_catalog_is_sorted(catalog):
    keys = [f.sort_key for f in catalog.fonts]
    assert keys == sorted(keys)
    assert all(a.sort_key <= b.sort_key for a, b in zip(catalog.fonts, catalog.fonts[1:]))
    assert [f.postscript_name for f in catalog.fonts][:3] == ["Arial", "Arial-BoldMT", "CourierNewPSMT"]


def test_sort_is_case_sensitive_by_codepoint():
    catalog = make_catalog([
        ("b", "b", "b", False),
        ("B", "B", "B", False),
        ("a", "a", "a", False),
    ])
    assert [f.postscript_name for f in catalog] == ["B", "a", "b"]


def test_missing_metadata_uses_fallbacks():
    catalog = make_catalog([("Mystery-Regular", None, None, False), ("Blank", "  ", "", True)])
    mystery = catalog.find("Mystery-Regular")
    assert mystery.display_name == "Mystery-Regular"
    assert mystery.family_name == UNKNOWN_FAMILY
    blank = catalog.find("Blank")
    assert blank.display_name == "Blank"
    assert blank.family_name == UNKNOWN_FAMILY


def test_real_unknown_family_is_not_special():
    catalog = make_catalog([("X", "X", "Unknown", False), ("Y", "Y", None, False)])
    assert [f.family_name for f in catalog] == ["Unknown", "Unknown"]


def test_resolution_errors_fall_back_or_skip():
    provider = FlakyProvider(
        SAMPLE_ROWS,
        broken_names={"Arial"},
        broken_family={"Helvetica"},
        broken_mono={"Menlo-Bold"},
        crash_mono={"Menlo-Regular"},
    )
    catalog = FontCatalog(provider)
    fonts = catalog.load()

    assert len(fonts) == len(SAMPLE_ROWS) - 2
    assert catalog.find("Menlo-Bold") is None
    assert catalog.find("Menlo-Regular") is None
    assert catalog.find("Arial").display_name == "Arial"
    assert catalog.find("Helvetica").family_name == UNKNOWN_FAMILY


def test_unavailable_provider_gives_empty_catalog():
    catalog = FontCatalog(DeadProvider())
    fired = []
    catalog.events.register("catalog_loaded", fired.append)

    assert catalog.load() == ()
    assert len(catalog) == 0
    assert fired == [()]


def test_empty_identifiers_skipped():
    catalog = make_catalog([("", "Nothing", "Nothing", False), ("Real", "Real", "Real", False)])
    assert [f.postscript_name for f in catalog] == ["Real"]


def test_duplicates_resolve_deterministically():
    rows_a = [("Dup", "Dup Zeta", "Fam", False), ("Dup", "Dup Alpha", "Fam", False)]
    rows_b = list(reversed(rows_a))

    first = FontCatalog(SequenceProvider(rows_a)).load()
    second = FontCatalog(SequenceProvider(rows_b)).load()
    assert len(first) == len(second) == 1
    assert first[0] == second[0]
    assert first[0].display_name == "Dup Alpha"


def test_reload_replaces_catalog_and_notifies_once(catalog):
    before = catalog.fonts
    events = []
    catalog.events.register("catalog_loaded", events.append)

    after = catalog.reload()

    assert len(events) == 1
    assert events[0] is catalog.fonts is after
    assert after == before
    assert all(a.id != b.id for a, b in zip(before, after))


def test_listener_sees_complete_catalog(catalog):
    seen = []
    catalog.events.register("catalog_loaded", lambda fonts: seen.append(len(catalog)))
    catalog.load()
    assert seen == [len(SAMPLE_ROWS)]


def test_find_and_iteration(catalog):
    assert catalog.find("Helvetica-Oblique").display_name == "Helvetica Oblique"
    assert catalog.find("NoSuchFont") is None
    assert list(catalog) == list(catalog.fonts)
