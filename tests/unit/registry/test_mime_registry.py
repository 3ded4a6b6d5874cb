"""
Tests for MimeRegistry.

Organization
------------
- TestNormalize: casing and override normalization
- TestAdd: storing and resolving observations
- TestCasing: first-seen casing
- TestSentinel: application/octet-stream handling
- TestConflicts: conflict recording and diagnostics
- TestAddIfMissing: resolver bypass for supplements
"""

import logging

import pytest

from mimeconf.registry.media_type import OCTET_STREAM
from mimeconf.registry.registry import Conflict, MimeRegistry, normalize


class TestNormalize:
    """Tests for the pure normalize function."""

    def test_unknown_extension_unchanged(self):
        """Test an unseen extension keeps its casing."""
        assert normalize(".Foo", "text/plain", {}) == (".Foo", "text/plain")

    def test_seen_casing_substituted(self):
        """Test the stored casing replaces the observed one."""
        assert normalize(".js", "text/javascript", {".js": ".JS"}) == (
            ".JS",
            "text/javascript",
        )

    def test_override_applied(self):
        """Test override table rewrites the media type."""
        assert normalize(".woff", "application/font-woff", {}) == (
            ".woff",
            "font/woff",
        )

    def test_override_keyed_on_normalized_extension(self):
        """Test override lookup uses the normalized casing."""
        overrides = {".TTF": {"font/sfnt": "font/ttf"}}

        assert normalize(".ttf", "font/sfnt", {".ttf": ".TTF"}, overrides) == (
            ".TTF",
            "font/ttf",
        )

    def test_override_other_type_untouched(self):
        """Test types not in the override table pass through."""
        assert normalize(".ttf", "font/collection", {}) == (
            ".ttf",
            "font/collection",
        )


class TestAdd:
    """Tests for add()."""

    def test_first_observation_stored(self, registry):
        """Test a new extension is stored directly."""
        registry.add(".json", "application/json")

        assert registry.get(".json") == "application/json"
        assert len(registry) == 1

    def test_returns_normalized_pair(self, registry):
        """Test add() returns the pair it resolved."""
        registry.add(".JS", "application/javascript")

        assert registry.add(".js", "text/javascript") == (".JS", "text/javascript")

    def test_experimental_loses_either_order(self):
        """Test non-experimental wins regardless of arrival order."""
        forward = MimeRegistry()
        forward.add(".q", "text/x-foo")
        forward.add(".q", "application/foo")

        backward = MimeRegistry()
        backward.add(".q", "application/foo")
        backward.add(".q", "text/x-foo")

        assert forward.get(".q") == "application/foo"
        assert backward.get(".q") == "application/foo"

    def test_override_applies_before_resolution(self, registry):
        """Test font overrides collapse duplicates to one IANA type."""
        registry.add(".ttf", "font/ttf")
        registry.add(".ttf", "application/font-sfnt")

        assert registry.get(".ttf") == "font/ttf"
        assert registry.conflicts == []

    def test_override_on_first_observation(self, registry):
        """Test the override also applies when nothing is stored yet."""
        registry.add(".otf", "font/sfnt")

        assert registry.get(".otf") == "font/ttf"

    def test_add_all_preserves_order(self, registry):
        """Test add_all replays observations in order."""
        registry.add_all([(".s", "audio/basic"), (".s", "audio/midi")])

        assert registry.get(".s") == OCTET_STREAM

    def test_items_in_insertion_order(self, registry):
        """Test items() lists extensions as first seen."""
        registry.add(".b", "text/plain")
        registry.add(".a", "text/plain")

        assert registry.items() == [(".b", "text/plain"), (".a", "text/plain")]

    def test_contains_is_case_insensitive(self, registry):
        """Test membership ignores case."""
        registry.add(".Log", "text/plain")

        assert ".log" in registry
        assert ".LOG" in registry
        assert ".txt" not in registry
        assert 42 not in registry

    def test_get_default(self, registry):
        """Test get() default for unknown extensions."""
        assert registry.get(".nope") is None
        assert registry.get(".nope", "x") == "x"


class TestCasing:
    """Tests for first-seen casing."""

    def test_first_casing_kept(self, registry):
        """Test .JS before .js emits .JS."""
        registry.add(".JS", "text/javascript")
        registry.add(".js", "text/javascript")

        assert registry.as_dict() == {".JS": "text/javascript"}

    def test_resolution_is_case_insensitive(self, registry):
        """Test later casing variants still resolve against the stored value."""
        registry.add(".Q", "text/x-foo")
        registry.add(".q", "application/foo")

        assert registry.as_dict() == {".Q": "application/foo"}

    def test_one_entry_per_identity(self, registry):
        """Test case variants never create extra entries."""
        for ext in (".Tar", ".TAR", ".tar"):
            registry.add(ext, "application/x-tar")

        assert len(registry) == 1
        assert list(registry) == [".Tar"]


class TestSentinel:
    """Tests for application/octet-stream handling."""

    def test_conflict_then_resolvable(self, registry):
        """Test basic/midi conflict is superseded by a later value."""
        registry.add(".s", "audio/basic")
        registry.add(".s", "audio/midi")
        assert registry.get(".s") == OCTET_STREAM

        registry.add(".s", "audio/ogg")

        assert registry.get(".s") == "audio/ogg"

    def test_sentinel_observation_is_noop(self, registry):
        """Test observing octet-stream on a sentinel entry changes nothing."""
        registry.add(".s", "audio/basic")
        registry.add(".s", "audio/midi")

        registry.add(".s", OCTET_STREAM)

        assert registry.get(".s") == OCTET_STREAM
        assert len(registry.conflicts) == 1

    def test_override_to_sentinel(self, registry):
        """Test overrides can map a shadowing type to octet-stream."""
        registry.add(".asn", "chemical/x-ncbi-asn1-spec")

        assert registry.get(".asn") == OCTET_STREAM

    def test_override_sentinel_then_real_type(self, registry):
        """Test an override-produced sentinel is replaced by a real type."""
        registry.add(".ent", "chemical/x-ncbi-asn1-ascii")
        registry.add(".ent", "application/xml-external-parsed-entity")

        assert registry.get(".ent") == "application/xml-external-parsed-entity"

    def test_order_dependence(self):
        """Test the final value can depend on arrival order."""
        first = MimeRegistry()
        first.add_all([(".z", "audio/a"), (".z", "audio/b"), (".z", "audio/c")])

        second = MimeRegistry()
        second.add_all([(".z", "audio/a"), (".z", "audio/c"), (".z", "audio/b")])

        assert first.get(".z") == "audio/c"
        assert second.get(".z") == "audio/b"


class TestConflicts:
    """Tests for conflict recording and diagnostics."""

    def test_conflict_recorded(self, registry):
        """Test unresolved conflicts are kept in arrival order."""
        registry.add(".s", "audio/basic")
        registry.add(".s", "audio/midi")

        assert registry.conflicts == [Conflict(".s", "audio/midi", "audio/basic")]

    def test_describe(self):
        """Test the diagnostic wording."""
        conflict = Conflict(".s", "audio/midi", "audio/basic")

        assert conflict.describe() == (
            "Duplicate mimetype: '.s' => 'audio/midi' (already have "
            "'audio/basic'), merging to 'application/octet-stream'"
        )

    def test_nothing_logged_at_warning(self, registry, caplog):
        """Test conflicts never reach the log at the default level."""
        with caplog.at_level(logging.WARNING):
            registry.add(".s", "audio/basic")
            registry.add(".s", "audio/midi")

        assert "Duplicate mimetype" not in caplog.text

    def test_reportable_conflicts(self, registry):
        """Test ordinary conflicts are reportable in arrival order."""
        registry.add(".s", "audio/basic")
        registry.add(".s", "audio/midi")
        registry.add(".t", "audio/a")
        registry.add(".t", "audio/b")

        assert [c.extension for c in registry.reportable_conflicts()] == [".s", ".t"]

    def test_vendor_pairs_not_reportable(self, registry):
        """Test two colliding vendor types are recorded but not reported."""
        registry.add(".v", "application/vnd.a")
        registry.add(".v", "application/vnd.b")

        assert registry.get(".v") == OCTET_STREAM
        assert len(registry.conflicts) == 1
        assert registry.reportable_conflicts() == []


class TestAddIfMissing:
    """Tests for add_if_missing()."""

    def test_adds_unknown(self, registry):
        """Test a missing extension is stored."""
        assert registry.add_if_missing(".log", "text/plain") is True
        assert registry.get(".log") == "text/plain"

    def test_existing_entry_suppresses(self, registry):
        """Test an existing value is never replaced."""
        registry.add(".log", "text/x-log")

        assert registry.add_if_missing(".log", "text/plain") is False
        assert registry.get(".log") == "text/x-log"

    def test_sentinel_suppresses(self, registry):
        """Test even the octet-stream marker suppresses the mapping."""
        registry.add(".log", "audio/a")
        registry.add(".log", "audio/b")

        registry.add_if_missing(".log", "text/plain")

        assert registry.get(".log") == OCTET_STREAM

    def test_case_variant_suppresses(self, registry):
        """Test an entry under another casing suppresses the mapping."""
        registry.add(".LOG", "text/x-log")

        registry.add_if_missing(".log", "text/plain")

        assert registry.as_dict() == {".LOG": "text/x-log"}

    @pytest.mark.parametrize("name", ["README", "Makefile"])
    def test_bare_names(self, registry, name):
        """Test dotless names are accepted."""
        registry.add_if_missing(name, "text/plain")

        assert name in registry
