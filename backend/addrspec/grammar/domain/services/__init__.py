"""Domain services implementing the address grammar."""

from addrspec.grammar.domain.services.address_parser import (
    AddressParser,
    AddressSpan,
    locate_separator,
)
from addrspec.grammar.domain.services.display_text import (
    AngleBracketScanner,
    DisplayTextScanner,
    DisplayTextSplit,
)
from addrspec.grammar.domain.services.domain_validator import check_domain
from addrspec.grammar.domain.services.local_part_validator import check_local_part

__all__ = [
    "AddressParser",
    "AddressSpan",
    "locate_separator",
    "AngleBracketScanner",
    "DisplayTextScanner",
    "DisplayTextSplit",
    "check_domain",
    "check_local_part",
]
