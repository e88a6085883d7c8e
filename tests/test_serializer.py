"""Tests for biscuits.serializer — to_string and Biscuit.__str__."""

from biscuits.cookie import Biscuit, create_biscuit
from biscuits.parser import parse_biscuit
from biscuits.serializer import to_string


class TestToString:
    def test_set_cookie_example(self) -> None:
        b = create_biscuit("thisisakey", "thisisavalue", path="/", max_age="300", http_only=True)
        assert b.to_string(include_name=True) == (
            "Set-Cookie: thisisakey=thisisavalue; path=/; max-age=300; HttpOnly"
        )

    def test_without_name(self) -> None:
        b = create_biscuit("thisisakey", "thisisavalue", path="/", max_age="300", http_only=True)
        assert to_string(b) == "thisisakey=thisisavalue; path=/; max-age=300; HttpOnly"

    def test_field_order(self) -> None:
        b = create_biscuit(
            {"b": "2", "a": "1"},
            max_age="60",
            expires="Wed, 30 Dec 2015 12:00:00 UTC",
            path="/",
            domain="example.com",
            secure=True,
            http_only=True,
        )
        assert to_string(b) == (
            "b=2; a=1; domain=example.com; path=/; "
            "expires=Wed, 30 Dec 2015 12:00:00 UTC; max-age=60; secure; HttpOnly"
        )

    def test_modified_example(self) -> None:
        b = parse_biscuit(
            "username=John Doe; password=notverysecure; "
            "expires=Thu, 30 Dec 2015 12:00:00 UTC; path=/; secure"
        )
        b.set_key("password", "reallyshouldbechanged")
        b.set_key("userLevel", "admin")
        b.set_path("/example/")
        assert str(b) == (
            "username=John Doe; password=reallyshouldbechanged; userLevel=admin; "
            "path=/example/; expires=Thu, 30 Dec 2015 12:00:00 UTC; secure"
        )

    def test_empty(self) -> None:
        assert to_string(Biscuit()) == ""

    def test_empty_with_name(self) -> None:
        assert to_string(Biscuit(), include_name=True) == "Set-Cookie:"

    def test_flags_only(self) -> None:
        assert to_string(Biscuit(secure=True, http_only=True)) == "secure; HttpOnly"

    def test_empty_directives_omitted(self) -> None:
        b = create_biscuit("a", "1", domain="", path="")
        assert to_string(b) == "a=1"

    def test_empty_value_kept(self) -> None:
        b = create_biscuit("a", "")
        assert to_string(b) == "a="

    def test_str_matches_to_string(self) -> None:
        b = create_biscuit("a", "1", secure=True)
        assert str(b) == to_string(b) == b.to_string()
