"""Unit tests for value objects."""

import pytest
from pydantic import ValidationError

from tymer.domain.value import AvatarColor, InviteCode


class TestInviteCode:
    """Tests for InviteCode."""

    def test_normalized_to_upper_case(self):
        assert InviteCode(" ab3xq9kz ").root == "AB3XQ9KZ"

    @pytest.mark.parametrize(
        "raw",
        [
            "AB3XQ9K",  # too short
            "AB3XQ9KZA",  # too long
            "AB3XQ9K0",  # zero
            "AB3XQ9KO",  # letter O
            "AB3XQ9K1",  # one
            "AB3XQ9KI",  # letter I
        ],
    )
    def test_rejects_bad_codes(self, raw):
        with pytest.raises(ValidationError):
            InviteCode(raw)


class TestAvatarColor:
    """Tests for AvatarColor.parse."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("mint", AvatarColor.MINT),
            (" Indigo ", AvatarColor.INDIGO),
            ("gray", AvatarColor.GRAY),
            ("magenta", AvatarColor.BLUE),
            ("", AvatarColor.BLUE),
            (None, AvatarColor.BLUE),
        ],
    )
    def test_parse(self, name, expected):
        assert AvatarColor.parse(name) is expected

    def test_palette_has_fourteen_colors(self):
        assert len(AvatarColor) == 14
