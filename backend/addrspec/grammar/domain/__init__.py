# Domain layer - pure grammar rules, no I/O

from addrspec.grammar.domain.errors import EmailAddressError, Error
from addrspec.grammar.domain.options import DEFAULT_OPTIONS, Options
from addrspec.grammar.domain.services import AddressParser
from addrspec.grammar.domain.value_objects import EmailAddress

__all__ = [
    # Errors
    "Error",
    "EmailAddressError",
    # Policy
    "Options",
    "DEFAULT_OPTIONS",
    # Value objects
    "EmailAddress",
    # Services
    "AddressParser",
]
