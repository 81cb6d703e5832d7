"""Unit tests for the reference link registry."""

import pytest

from html2mark.references import ReferenceEntry, ReferenceRegistry


@pytest.mark.unit
class TestReferenceRegistry:
    """Test reference numbering and the definitions block."""

    def test_numbering_starts_at_one(self):
        registry = ReferenceRegistry()
        assert registry.register("http://a.example/") == 1
        assert registry.register("http://b.example/") == 2
        assert len(registry) == 2

    def test_duplicate_urls_get_separate_entries(self):
        registry = ReferenceRegistry()
        registry.register("http://a.example/")
        registry.register("http://a.example/")
        assert [entry.index for entry in registry.entries] == [1, 2]

    def test_flush_empty(self):
        assert ReferenceRegistry().flush() == ""

    def test_flush_block(self):
        registry = ReferenceRegistry()
        registry.register("/a/long/path/to/img", "Title")
        registry.register("http://example.com")
        assert registry.flush() == '\n\n[1]: /a/long/path/to/img "Title"\n[2]: http://example.com\n'

    def test_flush_formats_markers(self):
        registry = ReferenceRegistry()
        registry.register("http://example.com/")
        assert registry.flush(lambda marker: f"<{marker}>") == "\n\n<[1]>: http://example.com/\n"

    def test_empty_title_is_omitted(self):
        registry = ReferenceRegistry()
        registry.register("http://example.com/", "")
        assert registry.entries[0].title is None

    def test_registries_are_independent(self):
        first = ReferenceRegistry()
        first.register("http://a.example/")
        assert ReferenceRegistry().register("http://b.example/") == 1


@pytest.mark.unit
def test_entry_definition():
    entry = ReferenceEntry(3, "http://example.com", "Title")
    assert entry.marker == "[3]"
    assert entry.definition() == '[3]: http://example.com "Title"'
