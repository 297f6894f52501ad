"""Closed set of grammar violations reported by the address validators.

Every validator stops at the first violation it finds and reports exactly one
`Error` member. Only the public parsing entry points raise, and they always
raise `EmailAddressError` carrying the specific member.
"""

from enum import Enum
from typing import Optional

LOCAL_PART_MAX_LENGTH = 64
DOMAIN_MAX_LENGTH = 255
SUB_DOMAIN_MAX_LENGTH = 63


class Error(Enum):
    """Grammar violations, one member per distinguishable failure."""

    MISSING_SEPARATOR = "missing_separator"
    TOO_MANY_SEPARATORS = "too_many_separators"
    LOCAL_PART_EMPTY = "local_part_empty"
    LOCAL_PART_TOO_LONG = "local_part_too_long"
    UNBALANCED_QUOTES = "unbalanced_quotes"
    QUOTING_NOT_PERMITTED = "quoting_not_permitted"
    INVALID_CHARACTER = "invalid_character"
    DOMAIN_EMPTY = "domain_empty"
    DOMAIN_TOO_LONG = "domain_too_long"
    SUB_DOMAIN_EMPTY = "sub_domain_empty"
    SUB_DOMAIN_TOO_LONG = "sub_domain_too_long"
    TOO_FEW_SUB_DOMAINS = "too_few_sub_domains"
    DOMAIN_LITERAL_NOT_PERMITTED = "domain_literal_not_permitted"
    INVALID_IP_ADDRESS = "invalid_ip_address"
    INVALID_DOMAIN_LITERAL = "invalid_domain_literal"

    @property
    def message(self) -> str:
        """Human-readable description of the violation."""
        return _MESSAGES[self]


_MESSAGES: dict[Error, str] = {
    Error.MISSING_SEPARATOR: "Missing separator character '@'.",
    Error.TOO_MANY_SEPARATORS: "More than one unquoted separator character '@'.",
    Error.LOCAL_PART_EMPTY: "Local part is empty.",
    Error.LOCAL_PART_TOO_LONG: (
        f"Local part is too long. Length limit: {LOCAL_PART_MAX_LENGTH}"
    ),
    Error.UNBALANCED_QUOTES: "Quotes around the local part are unbalanced.",
    Error.QUOTING_NOT_PERMITTED: "Quoted local parts are not permitted.",
    Error.INVALID_CHARACTER: "Invalid character.",
    Error.DOMAIN_EMPTY: "Domain is empty.",
    Error.DOMAIN_TOO_LONG: f"Domain is too long. Length limit: {DOMAIN_MAX_LENGTH}",
    Error.SUB_DOMAIN_EMPTY: "A sub-domain or atom is empty.",
    Error.SUB_DOMAIN_TOO_LONG: (
        f"A sub-domain is too long. Length limit: {SUB_DOMAIN_MAX_LENGTH}"
    ),
    Error.TOO_FEW_SUB_DOMAINS: "Too few sub-domains in the domain.",
    Error.DOMAIN_LITERAL_NOT_PERMITTED: "Domain literals are not permitted.",
    Error.INVALID_IP_ADDRESS: "Invalid IP address specified for domain.",
    Error.INVALID_DOMAIN_LITERAL: "Invalid domain literal.",
}


class EmailAddressError(ValueError):
    """Raised when text is not a valid e-mail address.

    Attributes:
        kind: The grammar violation that was found first.
        text: The rejected input.
    """

    def __init__(self, kind: Error, text: Optional[str] = None) -> None:
        super().__init__(kind.message)
        self.kind = kind
        self.text = text

    def __repr__(self) -> str:
        return f"EmailAddressError({self.kind.name})"
