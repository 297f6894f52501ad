"""Formatting of validated addresses for ``mailto:`` links and headers."""

from addrspec.grammar.domain.services.character_classifier import (
    BACKSLASH,
    DQUOTE,
    SPECIALS,
)

MAILTO_URI_PREFIX = "mailto:"

# RFC 3986 reserved characters plus the ASCII characters that are never
# allowed raw in a URI. '@' stays as-is, the mailto scheme uses it.
URI_RESERVED = frozenset("!#$%&'()*+,/:;=?[]") | frozenset(' "<>\\^`{|}')


def encode_mailto_component(text: str) -> str:
    """Percent-encode URI-reserved ASCII characters in ``text``.

    Non-ASCII characters are left alone, giving an IRI (RFC 3987) rather
    than a pure-ASCII URI.
    """
    return "".join(f"%{ord(c):02X}" if c in URI_RESERVED else c for c in text)


def to_mailto_uri(local_part: str, domain: str) -> str:
    """Build a ``mailto:`` URI for an already validated address.

    >>> to_mailto_uri("name+tag", "example.org")
    'mailto:name%2Btag@example.org'
    """
    return (
        f"{MAILTO_URI_PREFIX}{encode_mailto_component(local_part)}"
        f"@{encode_mailto_component(domain)}"
    )


def format_display(display_name: str, address: str) -> str:
    """Format ``display_name <address>``, quoting the name when required.

    A name containing RFC 5322 specials is wrapped in double quotes with
    embedded quotes and backslashes escaped.
    """
    name = display_name.strip()
    if not name:
        return f"<{address}>"
    if any(c in SPECIALS for c in name):
        escaped = name.replace(BACKSLASH, BACKSLASH * 2).replace(DQUOTE, BACKSLASH + DQUOTE)
        name = f"{DQUOTE}{escaped}{DQUOTE}"
    return f"{name} <{address}>"
