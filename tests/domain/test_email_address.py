"""Unit tests for the EmailAddress value object."""

from dataclasses import FrozenInstanceError

import pytest
from pydantic import BaseModel, ValidationError

from addrspec.grammar.domain.errors import EmailAddressError, Error
from addrspec.grammar.domain.options import Options
from addrspec.grammar.domain.value_objects.email_address import EmailAddress


class TestConstruction:
    """Tests for building EmailAddress values."""

    def test_constructor_validates(self) -> None:
        """Test that EmailAddress(text) validates with default options."""
        email = EmailAddress("name@example.org")

        assert email.value == "name@example.org"
        assert email.local_part == "name"
        assert email.domain == "example.org"

    def test_constructor_rejects_invalid_text(self) -> None:
        """Test that invalid text raises with the specific kind."""
        with pytest.raises(EmailAddressError) as exc_info:
            EmailAddress("Abc.example.com")

        assert exc_info.value.kind == Error.MISSING_SEPARATOR
        assert isinstance(exc_info.value, ValueError)

    def test_parse_with_options(self) -> None:
        """Test that parse honours the given options."""
        with pytest.raises(EmailAddressError) as exc_info:
            EmailAddress.parse("a@localhost", Options(minimum_sub_domains=2))

        assert exc_info.value.kind == Error.TOO_FEW_SUB_DOMAINS
        assert EmailAddress.parse("a@localhost").domain == "localhost"

    def test_parse_drops_display_text(self) -> None:
        """Test that only the address token is stored."""
        email = EmailAddress.parse("Jane <jane@example.com>", Options(allow_display_text=True))

        assert email.value == "jane@example.com"
        assert str(email) == "jane@example.com"

    def test_quoted_local_part_accessors(self) -> None:
        """Test that the separator offset skips quoted '@'."""
        email = EmailAddress('"Abc@def"@example.com')

        assert email.local_part == '"Abc@def"'
        assert email.domain == "example.com"

    def test_is_immutable(self) -> None:
        """Test that attributes cannot be reassigned."""
        email = EmailAddress("name@example.org")

        with pytest.raises(FrozenInstanceError):
            email.value = "other@example.org"  # type: ignore[misc]


class TestFromUnchecked:
    """Tests for EmailAddress.from_unchecked."""

    def test_wraps_valid_text(self) -> None:
        """Test that a valid address splits as usual."""
        email = EmailAddress.from_unchecked("name@example.org")

        assert email.local_part == "name"
        assert email.domain == "example.org"
        assert email == EmailAddress("name@example.org")

    def test_quoted_local_part(self) -> None:
        """Test that the quote-aware separator search is used."""
        email = EmailAddress.from_unchecked('"a@b"@example.org')
        assert email.local_part == '"a@b"'

    def test_does_not_validate(self) -> None:
        """Test that invalid text is wrapped without raising."""
        assert EmailAddress.from_unchecked("a@b@c").domain == "c"
        email = EmailAddress.from_unchecked("nothing")
        assert email.local_part == "nothing"
        assert email.domain == ""


class TestEqualityAndOrdering:
    """Tests for case rules in equality, hashing and ordering."""

    def test_domain_is_case_insensitive(self) -> None:
        """Test that domains compare case-insensitively."""
        assert EmailAddress("User@Example.com") == EmailAddress("User@example.COM")

    def test_local_part_is_case_sensitive(self) -> None:
        """Test that local parts compare exactly."""
        assert EmailAddress("User@x.com") != EmailAddress("user@x.com")

    def test_accessors_keep_original_case(self) -> None:
        """Test that the domain is not folded on access."""
        assert EmailAddress("User@Example.COM").domain == "Example.COM"

    def test_hash_matches_equality(self) -> None:
        """Test that equal addresses hash equally."""
        addresses = {
            EmailAddress("User@Example.com"),
            EmailAddress("User@example.COM"),
            EmailAddress("user@example.com"),
        }
        assert len(addresses) == 2

    def test_not_equal_to_strings(self) -> None:
        """Test that comparison with other types is not supported."""
        assert EmailAddress("a@example.com") != "a@example.com"

    def test_ordering_folds_domain(self) -> None:
        """Test lexicographic ordering with case-folded domains."""
        addresses = [
            EmailAddress("b@x.com"),
            EmailAddress("a@Y.com"),
            EmailAddress("a@x.com"),
        ]

        assert [str(a) for a in sorted(addresses)] == ["a@x.com", "a@Y.com", "b@x.com"]
        assert EmailAddress("a@X.com") <= EmailAddress("a@x.com")

    def test_ordering_by_full_text(self) -> None:
        """Test that ordering compares the full text, separator included."""
        assert EmailAddress("a.b@x.com") < EmailAddress("a@x.com")


class TestRoundTrip:
    """Tests for re-parsing rendered addresses."""

    @pytest.mark.parametrize(
        "address",
        [
            "simple@example.com",
            '"john..doe"@example.org',
            "jsmith@[IPv6:2001:db8::1]",
            "коля@пример.рф",
        ],
    )
    def test_rendered_text_reparses_equal(self, address: str) -> None:
        """Test that str(parse(t)) parses back to an equal value."""
        email = EmailAddress.parse(address)
        assert EmailAddress.parse(str(email)) == email


class TestFormatting:
    """Tests for mailto and display formatting."""

    def test_to_uri(self) -> None:
        """Test mailto URIs."""
        assert EmailAddress("name@example.org").to_uri() == "mailto:name@example.org"
        assert EmailAddress("коля@пример.рф").to_uri() == "mailto:коля@пример.рф"
        assert EmailAddress("user+tag@example.com").to_uri() == "mailto:user%2Btag@example.com"

    def test_to_uri_encodes_quoted_and_literal_parts(self) -> None:
        """Test that quotes, spaces and brackets are percent-encoded."""
        assert EmailAddress('"a b"@example.com').to_uri() == "mailto:%22a%20b%22@example.com"
        assert EmailAddress("a@[192.168.0.1]").to_uri() == "mailto:a@%5B192.168.0.1%5D"

    def test_to_display(self) -> None:
        """Test display name formatting."""
        email = EmailAddress("name@example.org")

        assert email.to_display("My Name") == "My Name <name@example.org>"
        assert email.to_display("Doe, John") == '"Doe, John" <name@example.org>'


class TestPydanticIntegration:
    """Tests for using EmailAddress as a pydantic field type."""

    class Contact(BaseModel):
        email: EmailAddress

    def test_validates_from_string(self) -> None:
        """Test that string input is parsed."""
        contact = self.Contact(email="a@Example.com")

        assert isinstance(contact.email, EmailAddress)
        assert contact.email == EmailAddress("a@example.com")

    def test_accepts_instances(self) -> None:
        """Test that EmailAddress instances pass through."""
        email = EmailAddress("a@example.com")
        assert self.Contact(email=email).email is email

    def test_rejects_invalid_string(self) -> None:
        """Test that invalid input becomes a ValidationError."""
        with pytest.raises(ValidationError):
            self.Contact(email="not-an-address")

    def test_json_round_trip(self) -> None:
        """Test JSON serialization and validation."""
        contact = self.Contact(email="a@Example.com")
        payload = contact.model_dump_json()

        assert payload == '{"email":"a@Example.com"}'
        assert self.Contact.model_validate_json(payload) == contact
