"""Error Taxonomy — one exception type for every Centrifugo API failure.

Invariants:
    - CentrifugoError is the only exception a client method raises
    - Every error has a code (str) and a category (ErrorCategory)
    - Category discriminates the cause; there are no per-cause subclasses
    - to_dict() never includes the API key or request body

Design Decisions:
    - Category field instead of a subclass tree: callers catch one type and
      branch on .category only when they care
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Cause of a failed call."""
    CONNECTION = "connection"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    DECODE = "decode"
    API_ERROR = "api_error"


# ─── Error Codes ─────────────────────────────────────────────────

CODE_CONNECTION = "CENTRIFUGO_CONNECTION_ERROR"
CODE_TIMEOUT = "CENTRIFUGO_TIMEOUT"
CODE_HTTP = "CENTRIFUGO_HTTP_ERROR"
CODE_DECODE = "CENTRIFUGO_DECODE_ERROR"
CODE_API = "CENTRIFUGO_API_ERROR"

_CODES_BY_CATEGORY = {
    ErrorCategory.CONNECTION: CODE_CONNECTION,
    ErrorCategory.TIMEOUT: CODE_TIMEOUT,
    ErrorCategory.HTTP_STATUS: CODE_HTTP,
    ErrorCategory.DECODE: CODE_DECODE,
    ErrorCategory.API_ERROR: CODE_API,
}


@dataclass
class ErrorContext:
    """Where and how a call failed."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    method: str | None = None
    status_code: int | None = None
    api_code: int | None = None
    debug_info: dict[str, Any] | None = None


class CentrifugoError(Exception):
    """Base Centrifugo exception: any failure reported by or on the way to the server."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        context: ErrorContext | None = None,
        code: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.code = code or _CODES_BY_CATEGORY[category]
        self.context = context or ErrorContext()

    @property
    def method(self) -> str | None:
        return self.context.method

    @property
    def status_code(self) -> int | None:
        """HTTP status, set for http_status and api_error failures."""
        return self.context.status_code

    @property
    def api_code(self) -> int | None:
        """Centrifugo error code, set only for api_error failures."""
        return self.context.api_code

    def to_dict(self) -> dict:
        """Structured envelope for logs and callers."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "method": self.context.method,
                    "status_code": self.context.status_code,
                    "api_code": self.context.api_code,
                },
            }
        }

    def __repr__(self) -> str:
        return (
            f"CentrifugoError(code={self.code!r}, category={self.category.value!r}, "
            f"method={self.method!r}, message={self.message!r})"
        )


# ─── Constructors ────────────────────────────────────────────────

def connection_error(method: str, cause: Exception) -> CentrifugoError:
    return CentrifugoError(
        f"Connection to Centrifugo failed on {method}: {cause}",
        ErrorCategory.CONNECTION,
        ErrorContext(method=method, debug_info={"cause": type(cause).__name__}),
    )


def timeout_error(method: str, cause: Exception) -> CentrifugoError:
    return CentrifugoError(
        f"Centrifugo request timed out on {method}",
        ErrorCategory.TIMEOUT,
        ErrorContext(method=method, debug_info={"cause": type(cause).__name__}),
    )


def http_status_error(method: str, status_code: int, body: str) -> CentrifugoError:
    """Non-2xx HTTP reply. Body is truncated to keep log lines bounded."""
    return CentrifugoError(
        f"Centrifugo returned HTTP {status_code} on {method}",
        ErrorCategory.HTTP_STATUS,
        ErrorContext(
            method=method, status_code=status_code,
            debug_info={"body": body[:500]},
        ),
    )


def decode_error(method: str, detail: str, status_code: int | None = None) -> CentrifugoError:
    return CentrifugoError(
        f"Malformed Centrifugo reply on {method}: {detail}",
        ErrorCategory.DECODE,
        ErrorContext(method=method, status_code=status_code),
    )


def api_error(method: str, api_code: int, message: str, status_code: int = 200) -> CentrifugoError:
    """Business-level rejection carried in the reply's "error" object."""
    return CentrifugoError(
        f"Centrifugo rejected {method} (code {api_code}): {message}",
        ErrorCategory.API_ERROR,
        ErrorContext(method=method, status_code=status_code, api_code=api_code),
    )
