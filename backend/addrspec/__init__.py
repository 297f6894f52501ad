"""Parse and validate e-mail addresses (RFC 5322 / 5321 / 6531 / 6532).

Typical use::

    import addrspec

    addrspec.is_valid("jdoe@example.com")            # True
    email = addrspec.parse("Jane.Doe@Example.COM")
    email.local_part, email.domain                  # ("Jane.Doe", "Example.COM")
    addrspec.parse("a@localhost", addrspec.Options(minimum_sub_domains=2))
    # EmailAddressError: Too few sub-domains in the domain.
"""

from typing import Optional, Union

from addrspec.grammar.domain.errors import EmailAddressError, Error
from addrspec.grammar.domain.options import DEFAULT_OPTIONS, Options
from addrspec.grammar.domain.services.address_parser import AddressParser
from addrspec.grammar.domain.services.display_text import (
    AngleBracketScanner,
    DisplayTextScanner,
    DisplayTextSplit,
)
from addrspec.grammar.domain.services.domain_validator import check_domain
from addrspec.grammar.domain.services.local_part_validator import check_local_part
from addrspec.grammar.domain.value_objects.email_address import EmailAddress

__version__ = "0.1.0"

__all__ = [
    "AddressParser",
    "AngleBracketScanner",
    "DisplayTextScanner",
    "DisplayTextSplit",
    "EmailAddress",
    "EmailAddressError",
    "Error",
    "Options",
    "from_unchecked",
    "is_valid",
    "is_valid_domain",
    "is_valid_local_part",
    "parse",
    "__version__",
]

_parser = AddressParser()


def is_valid(text: Union[str, bytes], options: Optional[Options] = None) -> bool:
    """True if the whole address grammar accepts ``text``."""
    return _parser.check(text, options or DEFAULT_OPTIONS) is None


def is_valid_local_part(text: str, options: Optional[Options] = None) -> bool:
    """True if ``text`` would be a valid local part."""
    return check_local_part(text, options or DEFAULT_OPTIONS) is None


def is_valid_domain(text: str, options: Optional[Options] = None) -> bool:
    """True if ``text`` would be a valid domain."""
    return check_domain(text, options or DEFAULT_OPTIONS) is None


def parse(text: Union[str, bytes], options: Optional[Options] = None) -> EmailAddress:
    """Parse ``text`` into an EmailAddress.

    Raises:
        EmailAddressError: With the first grammar violation found.
    """
    return EmailAddress.parse(text, options, _parser)


def from_unchecked(text: str) -> EmailAddress:
    """Wrap ``text`` as an EmailAddress without validating it."""
    return EmailAddress.from_unchecked(text)
