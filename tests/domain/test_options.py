"""Unit tests for Options and the error taxonomy."""

from dataclasses import FrozenInstanceError, replace

import pytest

from addrspec.grammar.domain.errors import EmailAddressError, Error
from addrspec.grammar.domain.options import DEFAULT_OPTIONS, Options


class TestOptions:
    """Tests for the Options policy object."""

    def test_defaults(self) -> None:
        """Test the documented default policy."""
        options = Options()

        assert options.minimum_sub_domains == 1
        assert options.allow_domain_literal is True
        assert options.allow_quoted_local_part is True
        assert options.allow_display_text is False
        assert options.allow_unicode is True
        assert options == DEFAULT_OPTIONS

    def test_negative_minimum_rejected(self) -> None:
        """Test that a negative label count is refused."""
        with pytest.raises(ValueError, match="cannot be negative"):
            Options(minimum_sub_domains=-1)

    def test_non_integer_minimum_rejected(self) -> None:
        """Test that booleans and floats are not label counts."""
        with pytest.raises(TypeError):
            Options(minimum_sub_domains=True)
        with pytest.raises(TypeError):
            Options(minimum_sub_domains=1.5)  # type: ignore[arg-type]

    def test_is_immutable(self) -> None:
        """Test that options cannot be changed in place."""
        with pytest.raises(FrozenInstanceError):
            DEFAULT_OPTIONS.allow_unicode = False  # type: ignore[misc]

    def test_replace_builds_new_policy(self) -> None:
        """Test deriving a policy with dataclasses.replace."""
        strict = replace(DEFAULT_OPTIONS, allow_domain_literal=False, minimum_sub_domains=2)

        assert strict.allow_domain_literal is False
        assert strict.minimum_sub_domains == 2
        assert DEFAULT_OPTIONS.allow_domain_literal is True


class TestErrors:
    """Tests for Error and EmailAddressError."""

    def test_every_error_has_a_message(self) -> None:
        """Test that each error kind describes itself."""
        for kind in Error:
            assert kind.message

    def test_messages_name_limits(self) -> None:
        """Test that length errors state their limit."""
        assert "64" in Error.LOCAL_PART_TOO_LONG.message
        assert "255" in Error.DOMAIN_TOO_LONG.message
        assert "63" in Error.SUB_DOMAIN_TOO_LONG.message

    def test_exception_carries_kind(self) -> None:
        """Test the exception attributes."""
        error = EmailAddressError(Error.DOMAIN_EMPTY, "simon@")

        assert error.kind == Error.DOMAIN_EMPTY
        assert error.text == "simon@"
        assert str(error) == "Domain is empty."
        assert repr(error) == "EmailAddressError(DOMAIN_EMPTY)"
