"""API Transport Helpers — endpoint table, reply decoding, and httpx error mapping.

Shared by the sync and async clients so both honor the same contract.

Invariants:
    - Every httpx failure maps to CentrifugoError (timeout / connection / decode)
    - Non-2xx status → http_status; {"error": {...}} → api_error, a malformed
      error object (null, empty, not an object) → decode;
      bad JSON or result/schema mismatch → decode
    - A reply without "result" decodes as an empty result ({})
    - The API key appears only in the X-API-Key header, never in logs or errors
"""

import logging
import time
from typing import TypeVar

import httpx
from pydantic import ValidationError

from centrifugo_push.core.domain_types import ApiMethod
from centrifugo_push.core.errors import (
    CentrifugoError,
    api_error,
    connection_error,
    decode_error,
    http_status_error,
    timeout_error,
)
from centrifugo_push.schemas.base import ApiModel, EmptyResponse
from centrifugo_push.schemas.device import DeviceListResponse, DeviceRegisterResponse
from centrifugo_push.schemas.push import SendPushNotificationResponse
from centrifugo_push.schemas.topic import DeviceTopicListResponse, UserTopicListResponse

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=ApiModel)

API_KEY_HEADER = "X-API-Key"

RESPONSE_TYPES: dict[ApiMethod, type[ApiModel]] = {
    ApiMethod.CANCEL_PUSH: EmptyResponse,
    ApiMethod.DEVICE_LIST: DeviceListResponse,
    ApiMethod.DEVICE_REGISTER: DeviceRegisterResponse,
    ApiMethod.DEVICE_UPDATE: EmptyResponse,
    ApiMethod.DEVICE_REMOVE: EmptyResponse,
    ApiMethod.DEVICE_TOPIC_LIST: DeviceTopicListResponse,
    ApiMethod.DEVICE_TOPIC_UPDATE: EmptyResponse,
    ApiMethod.SEND_PUSH_NOTIFICATION: SendPushNotificationResponse,
    ApiMethod.UPDATE_PUSH_STATUS: EmptyResponse,
    ApiMethod.USER_TOPIC_LIST: UserTopicListResponse,
    ApiMethod.USER_TOPIC_UPDATE: EmptyResponse,
}


def build_headers(api_key: str) -> dict[str, str]:
    headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if api_key:
        headers[API_KEY_HEADER] = api_key
    return headers


def map_transport_error(method: ApiMethod, exc: httpx.HTTPError) -> CentrifugoError:
    """Translate an httpx exception raised while sending into CentrifugoError."""
    if isinstance(exc, httpx.TimeoutException):
        return timeout_error(method.value, exc)
    if isinstance(exc, httpx.DecodingError):
        return decode_error(method.value, f"undecodable response body ({exc})")
    return connection_error(method.value, exc)


def decode_reply(method: ApiMethod, response: httpx.Response, response_type: type[R]) -> R:
    """Turn an HTTP reply into response_type, or raise CentrifugoError."""
    status = response.status_code
    if not response.is_success:
        raise http_status_error(method.value, status, response.text)

    try:
        body = response.json()
    except ValueError as e:
        raise decode_error(method.value, f"invalid JSON ({e})", status) from e
    if not isinstance(body, dict):
        raise decode_error(method.value, "reply is not a JSON object", status)

    if "error" in body:
        error = body["error"]
        if not isinstance(error, dict) or not ("code" in error or "message" in error):
            raise decode_error(method.value, "malformed error object", status)
        code = error.get("code")
        raise api_error(
            method.value,
            code if isinstance(code, int) else 0,
            str(error.get("message", "")),
            status,
        )

    result = body.get("result")
    if result is None:
        result = {}
    if not isinstance(result, dict):
        raise decode_error(method.value, "result field is not an object", status)

    try:
        return response_type.model_validate(result)
    except ValidationError as e:
        raise decode_error(
            method.value,
            f"result does not match {response_type.__name__} ({e.error_count()} error(s))",
            status,
        ) from e


def elapsed_ms(started: float) -> int:
    """Milliseconds since a time.perf_counter() reading."""
    return int((time.perf_counter() - started) * 1000)


def log_success(method: ApiMethod, status_code: int, duration_ms: int) -> None:
    logger.debug(
        f"Centrifugo {method.value} ok",
        extra={
            "method": method.value,
            "status_code": status_code,
            "duration_ms": duration_ms,
        },
    )


def log_failure(err: CentrifugoError, duration_ms: int) -> None:
    logger.warning(
        f"Centrifugo call failed: {err.message}",
        extra={
            "method": err.method,
            "error_code": err.code,
            "status_code": err.status_code,
            "api_code": err.api_code,
            "duration_ms": duration_ms,
        },
    )
