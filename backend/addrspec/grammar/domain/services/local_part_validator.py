"""Local-part validator: dot-atom or quoted-string (RFC 5322 3.4.1, RFC 6532 3.2)."""

from typing import Optional

from addrspec.grammar.domain.errors import LOCAL_PART_MAX_LENGTH, Error
from addrspec.grammar.domain.options import DEFAULT_OPTIONS, Options
from addrspec.grammar.domain.services.character_classifier import (
    BACKSLASH,
    DQUOTE,
    is_atext,
    is_quoted_pair_safe,
    is_quoted_safe,
    is_unicode_allowed,
)

DOT = "."


def octet_length(text: str) -> int:
    """Length of ``text`` in UTF-8 octets, the unit of the RFC 5321 limits."""
    return len(text.encode("utf-8", "surrogatepass"))


def check_local_part(text: str, options: Options = DEFAULT_OPTIONS) -> Optional[Error]:
    """Return the first violation in ``text`` as a local part, or None if valid.

    Args:
        text: The candidate local part (everything before the separator).
        options: Validation policy.

    Returns:
        None when the local part is valid, otherwise the first Error found.
    """
    if not text:
        return Error.LOCAL_PART_EMPTY
    if octet_length(text) > LOCAL_PART_MAX_LENGTH:
        return Error.LOCAL_PART_TOO_LONG
    if text.startswith(DQUOTE):
        if not options.allow_quoted_local_part:
            return Error.QUOTING_NOT_PERMITTED
        return _check_quoted_string(text, options)
    return _check_dot_atom(text, options)


def _check_dot_atom(text: str, options: Options) -> Optional[Error]:
    for atom in text.split(DOT):
        if not atom:
            return Error.SUB_DOMAIN_EMPTY
        for c in atom:
            if is_atext(c):
                continue
            if options.allow_unicode and is_unicode_allowed(c):
                continue
            return Error.INVALID_CHARACTER
    return None


def _check_quoted_string(text: str, options: Options) -> Optional[Error]:
    # text[0] is the opening quote.
    last = len(text) - 1
    i = 1
    while i <= last:
        c = text[i]
        if c == BACKSLASH:
            if i == last:
                break
            escaped = text[i + 1]
            if not (
                is_quoted_pair_safe(escaped)
                or (options.allow_unicode and is_unicode_allowed(escaped))
            ):
                return Error.INVALID_CHARACTER
            i += 2
            continue
        if c == DQUOTE:
            if i != last:
                return Error.INVALID_CHARACTER
            if i == 1:
                return Error.LOCAL_PART_EMPTY
            return None
        if not (is_quoted_safe(c) or (options.allow_unicode and is_unicode_allowed(c))):
            return Error.INVALID_CHARACTER
        i += 1
    return Error.UNBALANCED_QUOTES
