"""Application layer - use cases and orchestration.

This layer contains:
- DTOs: Data Transfer Objects for input/output
- Use Cases: Application services that orchestrate domain logic
- Exceptions: Application-level error types
"""

from addrspec.grammar.application.dto import (
    AddressCheckDTO,
    BatchValidationDTO,
    ParseAddressRequest,
    ParsedAddressDTO,
)
from addrspec.grammar.application.exceptions import ApplicationError, InvalidEmailError
from addrspec.grammar.application.use_cases import (
    ParseAddressUseCase,
    ValidateAddressesUseCase,
)

__all__ = [
    # DTOs
    "ParseAddressRequest",
    "ParsedAddressDTO",
    "AddressCheckDTO",
    "BatchValidationDTO",
    # Use Cases
    "ParseAddressUseCase",
    "ValidateAddressesUseCase",
    # Exceptions
    "ApplicationError",
    "InvalidEmailError",
]
