"""API Transport Helpers — reply decoding and httpx error mapping in isolation.

Tests:
    - {"result": ...} decodes into the declared response type
    - Missing/null result decodes as empty result
    - Non-2xx, invalid JSON, non-object bodies, {"error": ...}, and schema
      mismatches all raise CentrifugoError with the right category
    - httpx timeouts/connection/decoding errors map to timeout/connection/decode
    - API key header only set when a key is configured
"""

import httpx
import pytest

from centrifugo_push.core.domain_types import ApiMethod
from centrifugo_push.core.errors import CentrifugoError, ErrorCategory
from centrifugo_push.infrastructure.api_transport import (
    API_KEY_HEADER, RESPONSE_TYPES, build_headers, decode_reply, map_transport_error,
)
from centrifugo_push.schemas.base import EmptyResponse
from centrifugo_push.schemas.device import DeviceListResponse, DeviceRegisterResponse


def _decode(response, method=ApiMethod.DEVICE_REGISTER, response_type=DeviceRegisterResponse):
    return decode_reply(method, response, response_type)


def test_response_table_covers_every_method():
    assert set(RESPONSE_TYPES) == set(ApiMethod)


def test_decodes_result():
    resp = _decode(httpx.Response(200, json={"result": {"id": "dev-1"}}))
    assert resp == DeviceRegisterResponse(id="dev-1")


@pytest.mark.parametrize("body", [{}, {"result": None}, {"result": {}}])
def test_missing_result_is_empty(body):
    resp = _decode(
        httpx.Response(200, json=body), ApiMethod.DEVICE_REMOVE, EmptyResponse,
    )
    assert resp == EmptyResponse()


def test_empty_list_result_uses_defaults():
    resp = _decode(
        httpx.Response(200, json={"result": {}}), ApiMethod.DEVICE_LIST, DeviceListResponse,
    )
    assert resp.items == []


def test_non_2xx_raises_http_status():
    with pytest.raises(CentrifugoError) as exc_info:
        _decode(httpx.Response(401, text="Unauthorized"))
    err = exc_info.value
    assert err.category == ErrorCategory.HTTP_STATUS
    assert err.status_code == 401
    assert err.method == "device_register"


def test_invalid_json_raises_decode():
    with pytest.raises(CentrifugoError) as exc_info:
        _decode(httpx.Response(200, content=b"<html>oops</html>"))
    assert exc_info.value.category == ErrorCategory.DECODE


@pytest.mark.parametrize("body", [
    [1, 2], {"result": [1]}, {"error": "nope"}, {"error": None}, {"error": {}},
    {"error": {"detail": "x"}, "result": {"id": "dev-1"}},
])
def test_unexpected_shapes_raise_decode(body):
    with pytest.raises(CentrifugoError) as exc_info:
        _decode(httpx.Response(200, json=body))
    assert exc_info.value.category == ErrorCategory.DECODE


def test_api_error_object_raises_api_error():
    with pytest.raises(CentrifugoError) as exc_info:
        _decode(httpx.Response(200, json={"error": {"code": 107, "message": "bad request"}}))
    err = exc_info.value
    assert err.category == ErrorCategory.API_ERROR
    assert err.api_code == 107
    assert "bad request" in err.message


def test_api_error_without_numeric_code():
    with pytest.raises(CentrifugoError) as exc_info:
        _decode(httpx.Response(200, json={"error": {"message": "odd"}}))
    assert exc_info.value.api_code == 0


def test_result_schema_mismatch_raises_decode():
    with pytest.raises(CentrifugoError) as exc_info:
        _decode(httpx.Response(200, json={"result": {"id": ""}}))
    err = exc_info.value
    assert err.category == ErrorCategory.DECODE
    assert "DeviceRegisterResponse" in err.message


@pytest.mark.parametrize("exc, category", [
    (httpx.ConnectTimeout("t"), ErrorCategory.TIMEOUT),
    (httpx.ReadTimeout("t"), ErrorCategory.TIMEOUT),
    (httpx.ConnectError("refused"), ErrorCategory.CONNECTION),
    (httpx.RemoteProtocolError("eof"), ErrorCategory.CONNECTION),
    (httpx.DecodingError("gzip"), ErrorCategory.DECODE),
])
def test_map_transport_error(exc, category):
    err = map_transport_error(ApiMethod.DEVICE_LIST, exc)
    assert isinstance(err, CentrifugoError)
    assert err.category == category
    assert err.method == "device_list"


def test_build_headers_with_and_without_key():
    assert API_KEY_HEADER not in build_headers("")
    assert build_headers("k")[API_KEY_HEADER] == "k"
