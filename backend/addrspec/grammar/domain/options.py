"""Options controlling which grammar productions are accepted."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Options:
    """Immutable validation policy passed to every validator.

    Attributes:
        minimum_sub_domains: Fewest dot-separated labels a host name domain
            may have (default 1, so ``admin@mailserver1`` is accepted).
        allow_domain_literal: Accept bracketed domains such as
            ``[192.168.0.1]`` or ``[IPv6:::1]``.
        allow_quoted_local_part: Accept quoted local parts such as ``"a b"``.
        allow_display_text: Skip a leading display name, e.g.
            ``John Doe <john@example.com>``.
        allow_unicode: Accept non-ASCII characters (RFC 6531 / SMTPUTF8).
    """

    minimum_sub_domains: int = 1
    allow_domain_literal: bool = True
    allow_quoted_local_part: bool = True
    allow_display_text: bool = False
    allow_unicode: bool = True

    def __post_init__(self) -> None:
        """Validate option constraints after initialization."""
        if isinstance(self.minimum_sub_domains, bool) or not isinstance(
            self.minimum_sub_domains, int
        ):
            raise TypeError("minimum_sub_domains must be an integer")
        if self.minimum_sub_domains < 0:
            raise ValueError("minimum_sub_domains cannot be negative")


DEFAULT_OPTIONS = Options()
