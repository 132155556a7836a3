"""Unit tests for bit-flag families."""

import pytest

from circle.domain.error import ValidationError
from circle.domain.value import (
    EXPERTISE_DOMAINS,
    EXPERTISE_TOPICS,
    MENTORING_LEVELS,
    PAYMENT_TYPES,
    ExpertiseDomain,
    MentoringLevel,
    PaymentType,
)
from circle.domain.value.flags import (
    add,
    from_names,
    has,
    known_mask,
    matches_any,
    names_of,
    parse_flags,
    remove,
    toggle,
)


class TestBitOperations:
    """Tests for has/add/remove/toggle."""

    def test_add_sets_bit(self):
        """Adding a member should set its bit and keep the others."""
        # Act
        flags = add(MentoringLevel.ENTRY, MentoringLevel.STAFF)

        # Assert
        assert flags == 5
        assert has(flags, MentoringLevel.ENTRY)
        assert has(flags, MentoringLevel.STAFF)
        assert not has(flags, MentoringLevel.SENIOR)

    def test_add_returns_plain_int(self):
        """Results should be plain integers ready to store."""
        assert type(add(0, PaymentType.VENMO)) is int
        assert type(remove(3, PaymentType.VENMO)) is int
        assert type(toggle(0, PaymentType.VENMO)) is int

    def test_add_is_idempotent(self):
        """Adding a member twice should not change the flags."""
        once = add(0, PaymentType.ZELLE)
        assert add(once, PaymentType.ZELLE) == once

    def test_remove_clears_bit(self):
        """Removing a member should clear only its bit."""
        # Arrange
        flags = add(add(0, MentoringLevel.ENTRY), MentoringLevel.STAFF)

        # Act
        result = remove(flags, MentoringLevel.STAFF)

        # Assert
        assert result == 1
        assert not has(result, MentoringLevel.STAFF)

    def test_remove_unset_member_is_noop(self):
        """Removing a member that is not set should change nothing."""
        assert remove(1, MentoringLevel.MANAGEMENT) == 1

    def test_toggle_is_involution(self):
        """Toggling the same member twice should restore the original flags."""
        flags = 5
        assert toggle(flags, MentoringLevel.SENIOR) == 7
        assert toggle(toggle(flags, MentoringLevel.SENIOR), MentoringLevel.SENIOR) == 5

    def test_undefined_bits_are_preserved(self):
        """Bits no member defines should survive add/remove."""
        # Arrange
        flags = 64 | 1

        # Act
        result = add(remove(flags, MentoringLevel.ENTRY), MentoringLevel.SENIOR)

        # Assert
        assert result == 64 | 2


class TestNamesOf:
    """Tests for names_of."""

    def test_names_in_declaration_order(self):
        """Names should follow the family order, not the order bits were set."""
        # Arrange
        flags = add(add(0, PaymentType.WECHAT), PaymentType.VENMO)

        # Act
        names = names_of(flags, PAYMENT_TYPES)

        # Assert
        assert names == ["Venmo", "WeChat"]

    def test_zero_has_no_names(self):
        """Empty flags should give an empty list."""
        assert names_of(0, MENTORING_LEVELS) == []

    def test_undefined_bits_are_ignored(self):
        """Unknown bits should not produce names."""
        assert names_of(1 | 128, MENTORING_LEVELS) == ["Entry"]

    def test_expertise_domain_labels(self):
        """Domain families should use their display labels."""
        flags = ExpertiseDomain.PRODUCT_AND_PROJECT | ExpertiseDomain.CAREER_DEVELOPMENT
        assert names_of(flags, EXPERTISE_DOMAINS) == [
            "Product & Project",
            "Career Development",
        ]


class TestFromNames:
    """Tests for from_names."""

    def test_names_are_case_insensitive(self):
        """Display names should match regardless of case."""
        assert from_names(["staff", "ENTRY"], MENTORING_LEVELS) == 5

    def test_enum_names_are_accepted(self):
        """Enum member names should match as well as display names."""
        assert from_names(["product_and_project"], EXPERTISE_DOMAINS) == 2

    def test_unknown_names_are_ignored(self):
        """Unrecognized names should be skipped."""
        assert from_names(["Venmo", "Cash"], PAYMENT_TYPES) == 1

    def test_empty_names_give_zero(self):
        """No names should give 0."""
        assert from_names([], PAYMENT_TYPES) == 0

    def test_names_round_trip_drops_unknown_bits(self):
        """Decoding then encoding should keep exactly the known bits."""
        for flags in (0, 5, 63, 64 | 2, 255):
            names = names_of(flags, PAYMENT_TYPES)
            assert from_names(names, PAYMENT_TYPES) == flags & known_mask(PAYMENT_TYPES)


class TestKnownMask:
    """Tests for known_mask."""

    def test_masks_cover_every_member(self):
        """Mask should be the OR of every member in the family."""
        assert known_mask(MENTORING_LEVELS) == 15
        assert known_mask(PAYMENT_TYPES) == 63
        assert known_mask(EXPERTISE_DOMAINS) == 15
        assert known_mask(EXPERTISE_TOPICS) == 1023


class TestMatchesAny:
    """Tests for matches_any."""

    def test_shared_bit_matches(self):
        """Flags sharing a bit with the filter should match."""
        assert matches_any(5, 4)

    def test_disjoint_bits_do_not_match(self):
        """Flags sharing no bit with the filter should not match."""
        assert not matches_any(5, 2)

    def test_zero_filter_never_matches(self):
        """A zero filter should never match."""
        assert not matches_any(15, 0)


class TestParseFlags:
    """Tests for parse_flags."""

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty_input_parses_to_zero(self, raw):
        """Missing query values should mean no filter."""
        assert parse_flags(raw, MENTORING_LEVELS) == 0

    def test_integer_string(self):
        """Stored integers should parse as-is."""
        assert parse_flags(" 5 ") == 5

    def test_integer_value(self):
        """Integers should pass through."""
        assert parse_flags(12, PAYMENT_TYPES) == 12

    def test_comma_separated_names(self):
        """Names should be combined with the family."""
        assert parse_flags("entry, staff", MENTORING_LEVELS) == 5
        assert parse_flags("WeChat,crypto", PAYMENT_TYPES) == 48

    def test_negative_integer_raises(self):
        """Negative integers should be rejected."""
        with pytest.raises(ValidationError):
            parse_flags(-1)

    def test_negative_string_raises(self):
        """Negative integer strings should be rejected."""
        with pytest.raises(ValidationError):
            parse_flags("-3", MENTORING_LEVELS)

    def test_unknown_names_raise(self):
        """Text matching no member should be rejected."""
        with pytest.raises(ValidationError, match="mentoring_levels"):
            parse_flags("wizard", MENTORING_LEVELS)

    def test_names_without_family_raise(self):
        """Names cannot be parsed without a family."""
        with pytest.raises(ValidationError):
            parse_flags("entry")
