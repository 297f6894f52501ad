"""Use cases for validating user-supplied e-mail addresses.

Orchestrates:
- Option resolution from Settings plus per-request overrides
- Grammar validation via the EmailAddress value object
- Logging of rejected input
"""

from dataclasses import replace
from typing import Iterable, Optional

from addrspec.core.config import get_settings
from addrspec.core.logging import get_logger
from addrspec.grammar.application.dto.address_dto import (
    AddressCheckDTO,
    BatchValidationDTO,
    ParseAddressRequest,
    ParsedAddressDTO,
)
from addrspec.grammar.application.exceptions import InvalidEmailError
from addrspec.grammar.domain.errors import EmailAddressError
from addrspec.grammar.domain.options import Options
from addrspec.grammar.domain.services.address_parser import AddressParser
from addrspec.grammar.domain.value_objects.email_address import EmailAddress

logger = get_logger(__name__)


class ParseAddressUseCase:
    """Application service for parsing a single address.

    Validates the address under the configured policy, adjusted by any
    overrides carried in the request.
    """

    def __init__(
        self,
        options: Optional[Options] = None,
        parser: Optional[AddressParser] = None,
    ) -> None:
        """Initialize the use case.

        Args:
            options: Base validation policy (default: from Settings).
            parser: Address parser (default: shared AddressParser).
        """
        self._options = options or get_settings().to_options()
        self._parser = parser

    def execute(self, request: ParseAddressRequest) -> ParsedAddressDTO:
        """Execute the parse.

        Args:
            request: ParseAddressRequest with the address and option overrides.

        Returns:
            ParsedAddressDTO describing the validated address.

        Raises:
            InvalidEmailError: If the address is rejected; ``kind`` holds
                the grammar violation.
        """
        options = replace(self._options, **request.option_overrides())

        try:
            email_address = EmailAddress.parse(request.address, options, self._parser)
        except EmailAddressError as e:
            logger.debug("Rejected address %r: %s", request.address, e.kind.name)
            raise InvalidEmailError(request.address, e.kind) from e

        return ParsedAddressDTO(
            email=email_address.value,
            local_part=email_address.local_part,
            domain=email_address.domain,
            uri=email_address.to_uri(),
        )


class ValidateAddressesUseCase:
    """Application service for checking many addresses at once.

    Each address is checked independently; one rejection never stops the
    batch.
    """

    def __init__(
        self,
        options: Optional[Options] = None,
        parser: Optional[AddressParser] = None,
    ) -> None:
        """Initialize the use case.

        Args:
            options: Validation policy (default: from Settings).
            parser: Address parser (default: a new AddressParser).
        """
        self._options = options or get_settings().to_options()
        self._parser = parser or AddressParser()

    def execute(self, addresses: Iterable[str]) -> BatchValidationDTO:
        """Check every address and summarize the outcome.

        Args:
            addresses: Address texts to check.

        Returns:
            BatchValidationDTO with one result per input, in input order.
        """
        results: list[AddressCheckDTO] = []
        for address in addresses:
            error = self._parser.check(address, self._options)
            if error is None:
                results.append(AddressCheckDTO(address=address, is_valid=True))
                continue
            logger.debug("Rejected address %r: %s", address, error.name)
            results.append(
                AddressCheckDTO(
                    address=address,
                    is_valid=False,
                    error=error,
                    message=error.message,
                )
            )

        valid_count = sum(1 for r in results if r.is_valid)
        batch = BatchValidationDTO(
            results=results,
            valid_count=valid_count,
            invalid_count=len(results) - valid_count,
        )
        logger.info(
            "Validated %d addresses: %d valid, %d invalid",
            len(results),
            batch.valid_count,
            batch.invalid_count,
        )
        return batch
