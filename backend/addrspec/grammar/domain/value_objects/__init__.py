"""Domain value objects for address validation.

This module exports immutable value objects used throughout the domain layer:
- EmailAddress: Validated e-mail addresses
"""

from addrspec.grammar.domain.value_objects.email_address import EmailAddress

__all__ = ["EmailAddress"]
