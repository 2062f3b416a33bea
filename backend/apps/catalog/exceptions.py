"""Catalog errors raised by the service layer.

Both carry their HTTP mapping through ``ApplicationError`` so the global DRF
exception handler renders them in the standard error envelope.
"""

from __future__ import annotations

from typing import Any, Optional

from rest_framework import status

from apps.api.exceptions import ApplicationError


class InvalidArgumentError(ApplicationError):
    """Caller input is missing or malformed (bad id, blank name, bad page)."""

    default_code = "INVALID_ARGUMENT"

    def __init__(self, message: str, *, details: Optional[Any] = None):
        super().__init__(
            self.default_code,
            message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )


class ResourceNotFoundError(ApplicationError):
    """No record matches, or the requested page holds no records."""

    default_code = "NOT_FOUND"

    def __init__(self, message: str, *, details: Optional[Any] = None):
        super().__init__(
            self.default_code,
            message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
        )
