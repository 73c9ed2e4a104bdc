"""Tests for search query variant generation.

Run: python -m pytest tests/test_query_variants.py -v
"""
from processing.query_variants import variants_for_query
from processing.text import normalize_text


HEADLINES = [
    "Acme Corp announces $50M contract with Navy",
    "Mergers and Acquisitions: Acme Corp to acquire Beta Industries for $2B",
    "Hot Stocks: Acme Corp to acquire Beta for $2B",
    "“Acme”  wins deal with Navy today",
    "Breaking News",
    "FDA: approved",
    "Report: Acme Corp shares slide 12% after guidance cut",
    "",
]


class TestVariantsForQuery:
    """Ordered, deduplicated alternate phrasings of one headline."""

    def test_plain_headline(self):
        query = "Acme Corp announces $50M contract with Navy"
        assert variants_for_query(query) == [
            query,
            '"Acme Corp announces $50M contract with Navy"',
        ]

    def test_colon_headline_order(self):
        query = "Mergers and Acquisitions: Acme Corp to acquire Beta Industries for $2B"
        assert variants_for_query(query) == [
            query,
            "Acme Corp to acquire Beta Industries for $2B",
            "Mergers and Acquisitions",
            f'"{query}"',
            "Mergers and Acquisitions Acme Corp to acquire Beta Industries for $2B",
        ]

    def test_colon_sides_present_after_normalization(self):
        query = "Mergers and Acquisitions:  “Acme” Corp to acquire Beta Industries"
        variants = variants_for_query(query)
        assert "Mergers and Acquisitions" in variants
        assert "Acme Corp to acquire Beta Industries" in variants

    def test_short_category_prefix_dropped(self):
        variants = variants_for_query("Hot Stocks: Acme Corp to acquire Beta for $2B")
        assert "Hot Stocks" not in variants
        assert "Acme Corp to acquire Beta for $2B" in variants

    def test_raw_title_kept_alongside_normalized(self):
        variants = variants_for_query("“Acme”  wins deal with Navy today")
        assert variants == [
            "“Acme”  wins deal with Navy today",
            "Acme wins deal with Navy today",
            '"Acme wins deal with Navy today"',
        ]

    def test_scrubbed_form_removes_symbols(self):
        variants = variants_for_query("Acme (ACME) shares slide 12% after Q3 guidance")
        assert variants[-1] == "Acme ACME shares slide 12% after Q3 guidance"

    def test_too_short_headlines_produce_nothing(self):
        assert variants_for_query("Breaking News") == []
        assert variants_for_query("FDA: approved") == []
        assert variants_for_query("") == []
        assert variants_for_query(None) == []

    def test_generic_phrases_blocked(self):
        generic = frozenset(['acme corp quarterly report'])
        assert variants_for_query("Acme Corp quarterly report", generic_queries=generic) == []

    def test_no_duplicates_and_minimum_size(self):
        for headline in HEADLINES:
            variants = variants_for_query(headline)
            assert len(variants) == len(set(variants))
            for variant in variants:
                assert len(variant) >= 15
                assert len(variant.split()) >= 3

    def test_colon_sides_property(self):
        for headline in HEADLINES:
            cleaned = normalize_text(headline)
            if ':' not in cleaned:
                continue
            head, tail = cleaned.split(':', 1)
            variants = variants_for_query(headline)
            for side in (head.strip(), tail.strip()):
                if len(side) >= 15 and len(side.split()) >= 3:
                    assert side in variants
