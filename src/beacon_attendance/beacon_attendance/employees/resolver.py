from __future__ import annotations

import logging

from ..common import hex_codec
from ..core.exceptions import DecodeError, NotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class IdentifierResolver:
    """Use case: map a beacon identifier to an active employee.

    Lookup order:
    1. exact match on the stored identifier;
    2. decode the identifier (byte-pair hex -> text) and match the display
       name case-insensitively.

    Raises DecodeError when step 1 misses and the identifier is not decodable,
    NotFoundError when decoding worked but nobody matched.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def resolve(self, identifier: str) -> Employee:
        identifier = (identifier or "").strip()
        if identifier:
            employee = self._employees.get_active_by_identifier(identifier)
            if employee:
                return employee

        try:
            name = hex_codec.decode(identifier)
        except DecodeError:
            logger.warning("Identifier %r matched no employee and could not be decoded", identifier)
            raise

        employee = self._employees.get_active_by_name(name.strip())
        if not employee:
            logger.warning("No active employee for identifier %r (decoded name %r)", identifier, name)
            raise NotFoundError(f"No active employee found with identifier '{identifier}'")
        return employee
