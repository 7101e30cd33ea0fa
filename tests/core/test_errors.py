"""Error Taxonomy — verifies CentrifugoError construction and envelope shape.

Tests:
    - Each constructor sets the right category, code, and context fields
    - to_dict() produces the structured envelope
    - Category is the only discriminator (constructors all return CentrifugoError)
"""

import httpx
import pytest

from centrifugo_push.core.errors import (
    CODE_API, CODE_CONNECTION, CODE_DECODE, CODE_HTTP, CODE_TIMEOUT,
    CentrifugoError, ErrorCategory, ErrorContext,
    api_error, connection_error, decode_error, http_status_error, timeout_error,
)


def test_base_error_defaults_code_from_category():
    err = CentrifugoError("boom", ErrorCategory.DECODE)
    assert err.code == CODE_DECODE
    assert err.message == "boom"
    assert str(err) == "boom"
    assert isinstance(err.context, ErrorContext)


def test_explicit_code_overrides_category_default():
    err = CentrifugoError("boom", ErrorCategory.API_ERROR, code="CUSTOM")
    assert err.code == "CUSTOM"


def test_connection_error_records_cause():
    err = connection_error("device_list", httpx.ConnectError("refused"))
    assert err.category == ErrorCategory.CONNECTION
    assert err.code == CODE_CONNECTION
    assert err.method == "device_list"
    assert err.context.debug_info == {"cause": "ConnectError"}


def test_timeout_error():
    err = timeout_error("cancel_push", httpx.ReadTimeout("slow"))
    assert err.category == ErrorCategory.TIMEOUT
    assert err.code == CODE_TIMEOUT
    assert "cancel_push" in err.message


def test_http_status_error_truncates_body():
    err = http_status_error("device_register", 503, "x" * 2000)
    assert err.category == ErrorCategory.HTTP_STATUS
    assert err.code == CODE_HTTP
    assert err.status_code == 503
    assert len(err.context.debug_info["body"]) == 500


def test_api_error_carries_server_code():
    err = api_error("device_update", 107, "bad request")
    assert err.category == ErrorCategory.API_ERROR
    assert err.code == CODE_API
    assert err.api_code == 107
    assert err.status_code == 200
    assert "bad request" in err.message


def test_decode_error():
    err = decode_error("user_topic_list", "invalid JSON", 200)
    assert err.category == ErrorCategory.DECODE
    assert err.status_code == 200
    assert err.api_code is None


def test_to_dict_envelope():
    err = api_error("send_push_notification", 106, "limit exceeded")
    envelope = err.to_dict()["error"]
    assert envelope["code"] == CODE_API
    assert envelope["category"] == "api_error"
    assert envelope["context"] == {
        "method": "send_push_notification", "status_code": 200, "api_code": 106,
    }
    assert "timestamp" in envelope


@pytest.mark.parametrize("err", [
    connection_error("m", httpx.ConnectError("x")),
    timeout_error("m", httpx.ConnectTimeout("x")),
    http_status_error("m", 500, ""),
    decode_error("m", "x"),
    api_error("m", 1, "x"),
])
def test_all_constructors_return_the_single_base_type(err):
    assert type(err) is CentrifugoError


def test_repr_mentions_code_and_method():
    err = decode_error("device_list", "bad")
    assert "CENTRIFUGO_DECODE_ERROR" in repr(err)
    assert "device_list" in repr(err)
