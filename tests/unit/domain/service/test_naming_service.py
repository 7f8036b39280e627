"""Unit tests for NamingService and slugify."""

import re

import pytest

from onboard.domain.service import NamingService, slugify


class TestSlugify:
    """Tests for the channel-name slug function."""

    def test_example_name(self):
        """Whitespace runs collapse and punctuation is dropped."""
        assert slugify("Jane  O'Brien!!") == "jane-obrien"

    @pytest.mark.parametrize(
        "value",
        [
            "Maria",
            "  padded  ",
            "Émilie Dupont",
            "tab\tand\nnewline",
            "ALL CAPS 123",
            "",
            "x" * 100,
            "🤝 emoji name",
        ],
    )
    def test_output_shape(self, value):
        """Output is lower-case, [a-z0-9-] only and at most 40 chars."""
        slug = slugify(value)

        assert re.fullmatch(r"[a-z0-9-]*", slug)
        assert len(slug) <= 40

    def test_truncates_to_40(self):
        """Long names are cut to 40 characters."""
        assert slugify("a" * 60) == "a" * 40

    def test_keeps_existing_hyphens(self):
        """Hyphens in the input survive."""
        assert slugify("Anne-Marie") == "anne-marie"


class TestResolveFirstname:
    """Tests for the firstname fallback chain."""

    def setup_method(self):
        self.naming = NamingService(business_name="Nomads", channel_emoji="🤝")

    def test_registry_name_wins(self):
        """A registry hit takes precedence over display name and username."""
        assert self.naming.resolve_firstname("Maria", "maria_g", "mg") == "Maria"

    def test_username_after_blank_display_name(self):
        """Registry miss and empty display name fall back to the username."""
        assert self.naming.resolve_firstname(None, "", "jdoe") == "jdoe"

    def test_display_name_before_username(self):
        """Display name is used before the username."""
        assert self.naming.resolve_firstname(None, "Jo", "jdoe") == "Jo"

    def test_blank_candidates_are_skipped(self):
        """Whitespace-only candidates count as missing."""
        assert self.naming.resolve_firstname("   ", " ", "jdoe") == "jdoe"

    def test_literal_fallback(self):
        """Nothing usable resolves to "Client"."""
        assert self.naming.resolve_firstname(None, None, None) == "Client"

    def test_result_is_trimmed(self):
        """The chosen candidate is trimmed."""
        assert self.naming.resolve_firstname("  Bob ", None, None) == "Bob"


class TestWorkspaceNames:
    """Tests for category and channel names."""

    def test_category_name(self):
        """Category name is "<firstname> - <business>"."""
        naming = NamingService(business_name="Nomads", channel_emoji="🤝")

        assert naming.category_name("Maria") == "Maria - Nomads"

    def test_channel_name(self):
        """Channel name is "<emoji>│<business slug>-<firstname slug>"."""
        naming = NamingService(business_name="Nomads", channel_emoji="🤝")

        assert naming.channel_name("Maria") == "🤝│nomads-maria"

    def test_channel_name_slugs_both_parts(self):
        """Business name and firstname are both slugged."""
        naming = NamingService(business_name="Digital Nomads", channel_emoji="💼")

        assert naming.channel_name("Jane O'Brien") == "💼│digital-nomads-jane-obrien"

    def test_long_category_name_fits_discord_limit(self):
        """A 100-character firstname is cut so the category stays valid."""
        naming = NamingService(business_name="Nomads", channel_emoji="🤝")

        name = naming.category_name("M" * 100)

        assert len(name) == 100
        assert name == "M" * 91 + " - Nomads"

    def test_cut_firstname_drops_trailing_space(self):
        naming = NamingService(business_name="Nomads", channel_emoji="🤝")

        name = naming.category_name("M" * 90 + " Smith")

        assert name == "M" * 90 + " - Nomads"

    def test_long_channel_name_fits_discord_limit(self):
        naming = NamingService(business_name="N" * 60, channel_emoji="🤝")

        assert len(naming.channel_name("M" * 100)) <= 100
