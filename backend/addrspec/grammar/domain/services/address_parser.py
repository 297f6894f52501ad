"""Address parser domain service.

Splits an address into local part and domain at the unquoted ``@`` and
delegates each side to its validator:

    Start -> InLocalPart(quoted | unquoted) -> FoundSeparator
          -> InDomain(literal | atom) -> Accepted

Any violation ends the scan with the first Error found. Nothing is revisited
once the separator has been placed.
"""

from dataclasses import dataclass
from typing import Optional, Union

from addrspec.grammar.domain.errors import EmailAddressError, Error
from addrspec.grammar.domain.options import DEFAULT_OPTIONS, Options
from addrspec.grammar.domain.services.character_classifier import BACKSLASH, DQUOTE
from addrspec.grammar.domain.services.display_text import (
    AngleBracketScanner,
    DisplayTextScanner,
)
from addrspec.grammar.domain.services.domain_validator import check_domain
from addrspec.grammar.domain.services.local_part_validator import check_local_part

AT = "@"


@dataclass(frozen=True)
class AddressSpan:
    """A validated address and where its separator sits.

    Attributes:
        address: The address token, without any display text.
        separator: Index of the ``@`` dividing local part from domain.
        display_text: The skipped display name, if one was present.
    """

    address: str
    separator: int
    display_text: Optional[str] = None

    @property
    def local_part(self) -> str:
        return self.address[: self.separator]

    @property
    def domain(self) -> str:
        return self.address[self.separator + 1 :]


class AddressParser:
    """Domain service that validates complete address text.

    The service is stateless; one instance can be shared freely between
    threads.
    """

    def __init__(self, display_text_scanner: Optional[DisplayTextScanner] = None) -> None:
        """Initialize the parser.

        Args:
            display_text_scanner: Rule used to skip a leading display name when
                ``Options.allow_display_text`` is set. Defaults to the
                ``Name <address>`` form.
        """
        self._display_text_scanner = display_text_scanner or AngleBracketScanner()

    def scan(
        self,
        text: Union[str, bytes],
        options: Options = DEFAULT_OPTIONS,
    ) -> AddressSpan:
        """Validate ``text`` and locate its separator.

        Args:
            text: The address, optionally preceded by display text. Bytes
                are decoded as strict UTF-8.
            options: Validation policy.

        Returns:
            The AddressSpan of the validated address.

        Raises:
            EmailAddressError: With the first grammar violation found.
            TypeError: If ``text`` is neither str nor bytes.
        """
        result = self._scan(text, options)
        if isinstance(result, Error):
            raise EmailAddressError(result, _as_text(text))
        return result

    def check(
        self,
        text: Union[str, bytes],
        options: Options = DEFAULT_OPTIONS,
    ) -> Optional[Error]:
        """Return the first violation in ``text``, or None if it is valid."""
        result = self._scan(text, options)
        return result if isinstance(result, Error) else None

    def _scan(self, text: Union[str, bytes], options: Options) -> Union[AddressSpan, Error]:
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError:
                return Error.INVALID_CHARACTER
        elif not isinstance(text, str):
            raise TypeError(f"Address must be str or bytes, not {type(text).__name__}")

        display_text = None
        address = text
        if options.allow_display_text:
            split = self._display_text_scanner.split(text)
            display_text = split.display_text
            address = split.address

        separator = locate_separator(address)
        if isinstance(separator, Error):
            return separator

        span = AddressSpan(address=address, separator=separator, display_text=display_text)
        if not span.local_part:
            return Error.LOCAL_PART_EMPTY
        if not span.domain:
            return Error.DOMAIN_EMPTY

        error = check_local_part(span.local_part, options)
        if error is None:
            error = check_domain(span.domain, options)
        if error is not None:
            return error
        return span


def locate_separator(address: str) -> Union[int, Error]:
    """Find the ``@`` that separates local part from domain.

    An ``@`` inside a leading quoted string does not count. A second
    unquoted ``@`` is an error.

    Args:
        address: The address token.

    Returns:
        The separator index, or MISSING_SEPARATOR / TOO_MANY_SEPARATORS.
    """
    start = 0
    if address.startswith(DQUOTE):
        closing = _closing_quote(address)
        if closing is not None:
            start = closing + 1

    separator = address.find(AT, start)
    if separator < 0:
        return Error.MISSING_SEPARATOR
    if address.find(AT, separator + 1) >= 0:
        return Error.TOO_MANY_SEPARATORS
    return separator


def _closing_quote(address: str) -> Optional[int]:
    i = 1
    while i < len(address):
        c = address[i]
        if c == BACKSLASH:
            i += 2
            continue
        if c == DQUOTE:
            return i
        i += 1
    return None


def _as_text(text: Union[str, bytes]) -> str:
    if isinstance(text, bytes):
        return text.decode("utf-8", "replace")
    return text
