"""Pre-scan that separates a free-text display name from the address token.

Only plain text skipping is supported: no RFC 5322 phrase decoding, comments
or folding whitespace. The rule that delimits the display name is pluggable;
`AngleBracketScanner` implements the common ``Name <local@domain>`` form.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from addrspec.grammar.domain.services.character_classifier import BACKSLASH, DQUOTE

LANGLE = "<"
RANGLE = ">"


@dataclass(frozen=True)
class DisplayTextSplit:
    """Result of a display-text pre-scan.

    Attributes:
        display_text: The discarded leading text, or None if there was none.
        address: The remaining address token to validate.
    """

    display_text: Optional[str]
    address: str


class DisplayTextScanner(ABC):
    """Abstract base class for display-text pre-scan rules.

    `AddressParser` calls `split` only when `Options.allow_display_text` is
    set, then validates the returned address token.
    """

    @abstractmethod
    def split(self, text: str) -> DisplayTextSplit:
        """Separate leading display text from the address token.

        Args:
            text: The complete input.

        Returns:
            A DisplayTextSplit. Text the rule does not recognise is returned
            unchanged as the address.
        """
        ...


class AngleBracketScanner(DisplayTextScanner):
    """Treats ``display text <address>`` as a display name plus address.

    The address is whatever lies between the first ``<`` that is not inside
    a quoted display name and a ``>`` that ends the text. Text without that
    shape is returned unchanged as the address.
    """

    def split(self, text: str) -> DisplayTextSplit:
        stripped = text.rstrip()
        if not stripped.endswith(RANGLE):
            return DisplayTextSplit(display_text=None, address=text)

        start = _find_unquoted(stripped, LANGLE)
        if start is None:
            return DisplayTextSplit(display_text=None, address=text)

        display_text = stripped[:start].strip() or None
        return DisplayTextSplit(
            display_text=display_text,
            address=stripped[start + 1 : -1],
        )


def _find_unquoted(text: str, target: str) -> Optional[int]:
    in_quotes = False
    i = 0
    while i < len(text):
        c = text[i]
        if in_quotes and c == BACKSLASH:
            i += 2
            continue
        if c == DQUOTE:
            in_quotes = not in_quotes
        elif c == target and not in_quotes:
            return i
        i += 1
    return None
