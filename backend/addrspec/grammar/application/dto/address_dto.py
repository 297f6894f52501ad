"""Data Transfer Objects for address validation requests and responses.

These DTOs are the external contract of the use cases. They are decoupled
from the domain value objects and optimized for JSON serialization.
"""

from typing import Optional

from pydantic import BaseModel, Field

from addrspec.grammar.domain.errors import Error


class ParseAddressRequest(BaseModel):
    """Request payload for parsing a single address.

    Option fields left as None fall back to the configured defaults.
    """

    address: str = Field(description="Address text, optionally with a display name")
    minimum_sub_domains: Optional[int] = Field(
        default=None,
        ge=0,
        description="Fewest labels a host name domain may have"
    )
    allow_domain_literal: Optional[bool] = Field(
        default=None,
        description="Accept bracketed IP or tagged domain literals"
    )
    allow_quoted_local_part: Optional[bool] = Field(
        default=None,
        description="Accept quoted local parts such as \"a b\""
    )
    allow_display_text: Optional[bool] = Field(
        default=None,
        description="Skip a leading display name such as 'Jane <jane@example.com>'"
    )
    allow_unicode: Optional[bool] = Field(
        default=None,
        description="Accept non-ASCII characters (SMTPUTF8)"
    )

    def option_overrides(self) -> dict[str, int | bool]:
        """Return only the option fields that were explicitly set."""
        return self.model_dump(exclude={"address"}, exclude_none=True)


class ParsedAddressDTO(BaseModel):
    """A successfully parsed address."""

    email: str = Field(description="The address without any display name")
    local_part: str = Field(description="Part before the separator, as written")
    domain: str = Field(description="Part after the separator, as written")
    uri: str = Field(description="mailto: URI for the address")


class AddressCheckDTO(BaseModel):
    """Outcome of checking one address in a batch."""

    address: str = Field(description="The input text")
    is_valid: bool = Field(description="Whether the address was accepted")
    error: Optional[Error] = Field(default=None, description="First violation found")
    message: Optional[str] = Field(default=None, description="Readable violation")


class BatchValidationDTO(BaseModel):
    """Results of validating a list of addresses."""

    results: list[AddressCheckDTO] = Field(default_factory=list, description="Per-address results")
    valid_count: int = Field(default=0, ge=0, description="Number of accepted addresses")
    invalid_count: int = Field(default=0, ge=0, description="Number of rejected addresses")
