"""Domain validator: host name labels or a bracketed address literal.

Host names follow RFC 1035 / RFC 1123 label rules (extended to UTF-8 labels
by RFC 6531). Address literals follow RFC 5321 4.1.3:

    address-literal  = "[" ( IPv4-address-literal /
                             IPv6-address-literal /
                             General-address-literal ) "]"
"""

import ipaddress
from typing import Optional

from addrspec.grammar.domain.errors import (
    DOMAIN_MAX_LENGTH,
    SUB_DOMAIN_MAX_LENGTH,
    Error,
)
from addrspec.grammar.domain.options import DEFAULT_OPTIONS, Options
from addrspec.grammar.domain.services.character_classifier import (
    is_alphanumeric,
    is_combining_mark,
    is_digit,
    is_dtext,
    is_hex_digit,
    is_hostname_char,
    is_hyphen,
    is_unicode_allowed,
    is_unicode_alphanumeric,
)
from addrspec.grammar.domain.services.local_part_validator import DOT, octet_length

LBRACKET = "["
RBRACKET = "]"
COLON = ":"
IPV6_TAG = "IPv6:"

_IPV4_OCTETS = 4
_IPV4_OCTET_MAX_DIGITS = 3


def check_domain(text: str, options: Options = DEFAULT_OPTIONS) -> Optional[Error]:
    """Return the first violation in ``text`` as a domain, or None if valid.

    Args:
        text: The candidate domain (everything after the separator).
        options: Validation policy.

    Returns:
        None when the domain is valid, otherwise the first Error found.
    """
    if not text:
        return Error.DOMAIN_EMPTY
    if len(text) >= 2 and text.startswith(LBRACKET) and text.endswith(RBRACKET):
        if not options.allow_domain_literal:
            return Error.DOMAIN_LITERAL_NOT_PERMITTED
        if octet_length(text) > DOMAIN_MAX_LENGTH:
            return Error.DOMAIN_TOO_LONG
        return check_domain_literal(text[1:-1])
    return _check_host_name(text, options)


def _check_host_name(text: str, options: Options) -> Optional[Error]:
    labels = text.split(DOT)
    if len(labels) < options.minimum_sub_domains:
        return Error.TOO_FEW_SUB_DOMAINS
    if octet_length(text) > DOMAIN_MAX_LENGTH:
        return Error.DOMAIN_TOO_LONG
    for label in labels:
        error = _check_label(label, options)
        if error is not None:
            return error
    return None


def _check_label(label: str, options: Options) -> Optional[Error]:
    if not label:
        return Error.SUB_DOMAIN_EMPTY
    if octet_length(label) > SUB_DOMAIN_MAX_LENGTH:
        return Error.SUB_DOMAIN_TOO_LONG
    for c in label:
        if is_hostname_char(c):
            continue
        if options.allow_unicode and is_unicode_allowed(c):
            continue
        return Error.INVALID_CHARACTER
    if not _is_label_start(label[0], options) or not _is_label_end(label[-1], options):
        return Error.INVALID_CHARACTER
    return None


def _is_label_start(c: str, options: Options) -> bool:
    return is_alphanumeric(c) or (options.allow_unicode and is_unicode_alphanumeric(c))


def _is_label_end(c: str, options: Options) -> bool:
    return _is_label_start(c, options) or (
        options.allow_unicode and is_combining_mark(c)
    )


def check_domain_literal(interior: str) -> Optional[Error]:
    """Classify the text between the brackets of a domain literal.

    Args:
        interior: The literal without its enclosing ``[`` and ``]``.

    Returns:
        None when the literal is a valid IPv4, IPv6 or general address
        literal, otherwise INVALID_IP_ADDRESS or INVALID_DOMAIN_LITERAL.
    """
    if interior[: len(IPV6_TAG)].lower() == IPV6_TAG.lower():
        if is_ipv6_address(interior[len(IPV6_TAG):]):
            return None
        return Error.INVALID_IP_ADDRESS

    if interior and all(is_digit(c) or c == DOT for c in interior):
        return None if is_ipv4_address(interior) else Error.INVALID_IP_ADDRESS

    if COLON in interior and all(
        is_hex_digit(c) or c == COLON or c == DOT for c in interior
    ):
        if is_ipv6_address(interior) or is_general_address_literal(interior):
            return None
        return Error.INVALID_IP_ADDRESS

    if is_general_address_literal(interior):
        return None
    return Error.INVALID_DOMAIN_LITERAL


def is_ipv4_address(text: str) -> bool:
    """Dotted-decimal IPv4 address: four 1-3 digit octets, each 0-255."""
    octets = text.split(DOT)
    if len(octets) != _IPV4_OCTETS:
        return False
    for octet in octets:
        if not octet or len(octet) > _IPV4_OCTET_MAX_DIGITS:
            return False
        if not all(is_digit(c) for c in octet):
            return False
        if int(octet) > 255:
            return False
    return True


def is_ipv6_address(text: str) -> bool:
    """RFC 4291 2.2 text form, with an optional trailing dotted IPv4 part.

    Zone identifiers (``%eth0``) have no place in an address literal.
    """
    if not text or not all(is_hex_digit(c) or c == COLON or c == DOT for c in text):
        return False
    try:
        ipaddress.IPv6Address(text)
    except ValueError:
        return False
    return True


def is_general_address_literal(text: str) -> bool:
    """RFC 5321 General-address-literal: ``Standardized-tag ":" 1*dcontent``."""
    tag, sep, value = text.partition(COLON)
    if not sep or not value:
        return False
    if not _is_ldh_str(tag):
        return False
    return all(is_dtext(c) for c in value)


def _is_ldh_str(text: str) -> bool:
    # Ldh-str = *( ALPHA / DIGIT / "-" ) Let-dig
    if not text:
        return False
    if not is_alphanumeric(text[-1]):
        return False
    return all(is_alphanumeric(c) or is_hyphen(c) for c in text)
