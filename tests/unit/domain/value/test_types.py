"""Unit tests for stamp card value objects."""

import pytest
from pydantic import ValidationError

from stampcard.domain.value import MAX_STAMPS, MailAddress, clamp_stamps


class TestMailAddress:
    """Tests for MailAddress."""

    def test_normalizes_case_and_space(self):
        """Addresses are stored trimmed and lowercased."""
        assert MailAddress(" Foo@Example.COM ").root == "foo@example.com"

    def test_matches_ignores_case(self):
        """Comparison uses the normalized form."""
        assert MailAddress("foo@example.com").matches("FOO@example.com ")
        assert not MailAddress("foo@example.com").matches("bar@example.com")

    def test_empty_is_rejected(self):
        """Blank addresses are invalid."""
        with pytest.raises(ValidationError):
            MailAddress("   ")


@pytest.mark.parametrize(
    "stored,expected",
    [(-3, 0), (0, 0), (7, 7), (MAX_STAMPS, MAX_STAMPS), (99, MAX_STAMPS)],
)
def test_clamp_stamps(stored, expected):
    """Stored counters are read back within 0..MAX_STAMPS."""
    assert clamp_stamps(stored) == expected
