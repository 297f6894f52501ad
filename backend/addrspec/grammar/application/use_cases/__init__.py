"""Application use cases for orchestrating domain logic."""

from addrspec.grammar.application.use_cases.parse_address import (
    ParseAddressUseCase,
    ValidateAddressesUseCase,
)

__all__ = [
    "ParseAddressUseCase",
    "ValidateAddressesUseCase",
]
