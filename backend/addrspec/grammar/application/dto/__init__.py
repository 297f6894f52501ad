"""Data transfer objects for application layer."""

from addrspec.grammar.application.dto.address_dto import (
    AddressCheckDTO,
    BatchValidationDTO,
    ParseAddressRequest,
    ParsedAddressDTO,
)

__all__ = [
    "ParseAddressRequest",
    "ParsedAddressDTO",
    "AddressCheckDTO",
    "BatchValidationDTO",
]
