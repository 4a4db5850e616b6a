from __future__ import annotations
from typing import Any, Dict, List, Optional


class DeskExchangeError(Exception):
    """Base error for everything that can go wrong talking to DESK Exchange."""

    default_code = "DESK_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str | int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.details = details or {}

    @property
    def errors(self) -> Any:
        """Upstream `errors` payload, when the exchange sent one."""
        return self.details.get("errors")

    def __str__(self) -> str:
        return self.message


class MissingParameterError(DeskExchangeError):
    default_code = "MISSING_PARAMETER"

    def __init__(self, message: str = "Missing required parameters", **kw):
        super().__init__(message, **kw)


class MissingOrderDigestError(DeskExchangeError):
    default_code = "MISSING_ORDER_DIGEST"

    def __init__(self, message: str = "Missing order digest", **kw):
        super().__init__(message, **kw)


class InvalidParameterError(DeskExchangeError, ValueError):
    default_code = "INVALID_PARAMETER"


class AuthenticationError(DeskExchangeError):
    default_code = "AUTHENTICATION_FAILED"

    def __init__(self, message: str = "Could not generate JWT", **kw):
        super().__init__(message, **kw)


class ValidationFailedError(DeskExchangeError):
    """Schema violations, one entry per failing field."""

    default_code = "VALIDATION_FAILED"

    def __init__(self, message: str, violations: List[Dict[str, str]]):
        super().__init__(message, details={"violations": violations})
        self.violations = violations


class HttpRequestFailedError(DeskExchangeError):
    default_code = "HTTP_REQUEST_FAILED"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        code: Optional[str | int] = None,
    ):
        super().__init__(
            message,
            code=code if code is not None else status_code,
            details=details,
        )
        self.status_code = status_code


class UpstreamDataMissingError(DeskExchangeError):
    default_code = "UPSTREAM_DATA_MISSING"


class IntentExtractionError(DeskExchangeError):
    default_code = "INTENT_UNPARSEABLE"

    def __init__(
        self, message: str = "Could not parse trading parameters from conversation", **kw
    ):
        super().__init__(message, **kw)
