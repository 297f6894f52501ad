"""EmailAddress value object for validated e-mail addresses."""

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Optional, Self, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from addrspec.grammar.domain.errors import Error
from addrspec.grammar.domain.options import DEFAULT_OPTIONS, Options
from addrspec.grammar.domain.services.address_parser import AddressParser, locate_separator
from addrspec.grammar.domain.services.uri_encoding import format_display, to_mailto_uri

_DEFAULT_PARSER = AddressParser()


@total_ordering
@dataclass(frozen=True, eq=False)
class EmailAddress:
    """Immutable value object representing a validated e-mail address.

    ``EmailAddress("jdoe@example.com")`` validates with default Options and
    raises EmailAddressError on failure; use `parse` for other policies.

    Equality and hashing treat the local part case-sensitively and the
    domain case-insensitively, so ``User@Example.COM`` equals
    ``User@example.com`` but not ``user@example.com``.

    Attributes:
        value: The address text exactly as written (no display name).
    """

    value: str
    _separator: int = field(default=-1, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the address after initialization."""
        span = _DEFAULT_PARSER.scan(self.value, DEFAULT_OPTIONS)
        object.__setattr__(self, "value", span.address)
        object.__setattr__(self, "_separator", span.separator)

    @classmethod
    def parse(
        cls,
        text: Union[str, bytes],
        options: Optional[Options] = None,
        parser: Optional[AddressParser] = None,
    ) -> Self:
        """Validate ``text`` and build an EmailAddress from it.

        Args:
            text: The address, optionally preceded by display text when
                ``options.allow_display_text`` is set.
            options: Validation policy (default: ``Options()``).
            parser: Parser to use (default: shared AddressParser).

        Returns:
            A new EmailAddress holding only the address token.

        Raises:
            EmailAddressError: With the first grammar violation found.
        """
        span = (parser or _DEFAULT_PARSER).scan(text, options or DEFAULT_OPTIONS)
        return cls._build(span.address, span.separator)

    @classmethod
    def from_unchecked(cls, text: str) -> Self:
        """Create an EmailAddress without validating ``text``.

        Only call this for text already known to be a valid address; the
        accessors of an invalid one return unspecified slices.
        """
        separator = locate_separator(text)
        if isinstance(separator, Error):
            separator = text.rfind("@")
            if separator < 0:
                separator = len(text)
        return cls._build(text, separator)

    @classmethod
    def _build(cls, text: str, separator: int) -> Self:
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", text)
        object.__setattr__(instance, "_separator", separator)
        return instance

    @property
    def local_part(self) -> str:
        """The part before the separator, as written."""
        return self.value[: self._separator]

    @property
    def domain(self) -> str:
        """The part after the separator, as written (not case-folded)."""
        return self.value[self._separator + 1 :]

    def to_uri(self) -> str:
        """Return the address as a ``mailto:`` URI.

        >>> EmailAddress("name@example.org").to_uri()
        'mailto:name@example.org'
        """
        return to_mailto_uri(self.local_part, self.domain)

    def to_display(self, display_name: str) -> str:
        """Return ``display_name <address>`` for use in mail headers."""
        return format_display(display_name, self.value)

    def _key(self) -> tuple[str, str]:
        return self.local_part, self.domain.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return self._key() == other._key()

    def _sort_key(self) -> str:
        return f"{self.local_part}@{self.domain.lower()}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.value

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        from_str = core_schema.no_info_after_validator_function(
            cls.parse, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.to_string_ser_schema(),
        )
