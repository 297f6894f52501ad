"""Character classes of the RFC 5322 / 5321 / 6531 address grammar.

Each predicate takes a single character and answers whether it belongs to
one grammar category. Anything that is not exactly one character belongs to
no category.
"""

from unicodedata import category

ATEXT_SPECIALS = frozenset("!#$%&'*+-/=?^_`{|}~")

# RFC 5322 3.2.3
SPECIALS = frozenset('()<>[]:;@\\,."')

SP = " "
HTAB = "\t"
DQUOTE = '"'
BACKSLASH = "\\"
HYPHEN = "-"

_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_UTF8_START = 0x80
_SURROGATE_START = 0xD800
_SURROGATE_END = 0xDFFF


def _is_char(c: str) -> bool:
    return isinstance(c, str) and len(c) == 1


def is_digit(c: str) -> bool:
    """ASCII decimal digit (DIGIT)."""
    return _is_char(c) and c in _DIGITS


def is_hex_digit(c: str) -> bool:
    """ASCII hexadecimal digit (HEXDIG, either case)."""
    return _is_char(c) and c in _HEX_DIGITS


def is_alpha(c: str) -> bool:
    """ASCII letter (ALPHA)."""
    return _is_char(c) and c in _ASCII_LETTERS


def is_alphanumeric(c: str) -> bool:
    return is_alpha(c) or is_digit(c)


def is_hyphen(c: str) -> bool:
    return c == HYPHEN


def is_vchar(c: str) -> bool:
    """Visible (printing) ASCII character, %x21-7E."""
    return _is_char(c) and "\x21" <= c <= "\x7e"


def is_wsp(c: str) -> bool:
    return c == SP or c == HTAB


def is_unicode_allowed(c: str) -> bool:
    """Any well-formed code point above ASCII (RFC 6531 UTF8-non-ascii).

    Lone surrogates never are: they are what undecodable UTF-8 turns into
    under the ``surrogateescape`` error handler.
    """
    if not _is_char(c):
        return False
    code = ord(c)
    return code >= _UTF8_START and not (_SURROGATE_START <= code <= _SURROGATE_END)


def is_unicode_alphanumeric(c: str) -> bool:
    """Non-ASCII letter or decimal digit (Unicode categories L* and Nd)."""
    if not is_unicode_allowed(c):
        return False
    cat = category(c)
    return cat[0] == "L" or cat == "Nd"


def is_combining_mark(c: str) -> bool:
    """Non-ASCII spacing or non-spacing combining mark (Mc, Mn)."""
    return is_unicode_allowed(c) and category(c) in ("Mc", "Mn")


def is_atext(c: str) -> bool:
    """ASCII atom text: letters, digits and the RFC 5322 atom specials."""
    return is_alphanumeric(c) or (_is_char(c) and c in ATEXT_SPECIALS)


def is_special(c: str) -> bool:
    return _is_char(c) and c in SPECIALS


def is_quoted_safe(c: str) -> bool:
    """Characters allowed unescaped inside a quoted string.

    qtext (printable ASCII except ``"`` and ``\\``) plus the space and tab
    that RFC 5321 admits inside quoted local parts.
    """
    return (is_vchar(c) and c != DQUOTE and c != BACKSLASH) or is_wsp(c)


def is_quoted_pair_safe(c: str) -> bool:
    """Characters that may follow a backslash (quoted-pair)."""
    return is_vchar(c) or is_wsp(c)


def is_hostname_char(c: str) -> bool:
    """Letter-digit-hyphen characters of an ASCII host name label."""
    return is_alphanumeric(c) or is_hyphen(c)


def is_dtext(c: str) -> bool:
    """RFC 5321 dcontent: %d33-90 / %d94-126 (printable minus ``[``, ``\\``, ``]``)."""
    return _is_char(c) and ("\x21" <= c <= "\x5a" or "\x5e" <= c <= "\x7e")
