"""Centrifugo Push Client — blocking PushNotificationCommand over httpx.Client.

Invariants:
    - One POST per call to {api_url}/{method}; no retries
    - All failures raised as CentrifugoError (see api_transport.py for the mapping)
    - No partial response is returned: decode succeeds completely or raises
    - Client owns the httpx.Client it creates and closes it on close()/__exit__;
      an injected http_client is left open
    - An injected http_client is configured with api_url, api_key and timeout
      like an owned one; transport and http_client are mutually exclusive

Design Decisions:
    - Wrapper over a raw httpx.Client: connection pooling, TLS and timeouts stay in httpx
    - transport= hook accepts httpx.MockTransport for tests
"""

import time

import httpx

from centrifugo_push.core.domain_types import ApiMethod
from centrifugo_push.core.errors import CentrifugoError
from centrifugo_push.infrastructure.api_transport import (
    R,
    build_headers,
    decode_reply,
    elapsed_ms,
    log_failure,
    log_success,
    map_transport_error,
)
from centrifugo_push.schemas.base import ApiRequest, EmptyResponse
from centrifugo_push.schemas.device import (
    DeviceListRequest, DeviceListResponse,
    DeviceRegisterRequest, DeviceRegisterResponse,
    DeviceRemoveRequest, DeviceUpdateRequest,
)
from centrifugo_push.schemas.push import (
    CancelPushRequest, SendPushNotificationRequest,
    SendPushNotificationResponse, UpdatePushStatusRequest,
)
from centrifugo_push.schemas.topic import (
    DeviceTopicListRequest, DeviceTopicListResponse, DeviceTopicUpdateRequest,
    UserTopicListRequest, UserTopicListResponse, UserTopicUpdateRequest,
)


class CentrifugoPushClient:
    """HTTP-backed implementation of PushNotificationCommand."""

    def __init__(
        self,
        api_url: str,
        api_key: str = "",
        timeout_seconds: float = 10.0,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ):
        if http_client is not None and transport is not None:
            raise ValueError("pass either transport or http_client, not both")
        self.api_url = api_url.rstrip("/")
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(transport=transport)
        http_client.base_url = self.api_url
        http_client.headers.update(build_headers(api_key))
        http_client.timeout = httpx.Timeout(timeout_seconds)
        self._http = http_client

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> "CentrifugoPushClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ─── Push API ────────────────────────────────────────────────

    def cancel_push(self, request: CancelPushRequest) -> EmptyResponse:
        return self._call(ApiMethod.CANCEL_PUSH, request, EmptyResponse)

    def device_list(self, request: DeviceListRequest) -> DeviceListResponse:
        return self._call(ApiMethod.DEVICE_LIST, request, DeviceListResponse)

    def device_register(self, request: DeviceRegisterRequest) -> DeviceRegisterResponse:
        return self._call(ApiMethod.DEVICE_REGISTER, request, DeviceRegisterResponse)

    def device_update(self, request: DeviceUpdateRequest) -> EmptyResponse:
        return self._call(ApiMethod.DEVICE_UPDATE, request, EmptyResponse)

    def device_remove(self, request: DeviceRemoveRequest) -> EmptyResponse:
        return self._call(ApiMethod.DEVICE_REMOVE, request, EmptyResponse)

    def device_topic_list(self, request: DeviceTopicListRequest) -> DeviceTopicListResponse:
        return self._call(ApiMethod.DEVICE_TOPIC_LIST, request, DeviceTopicListResponse)

    def device_topic_update(self, request: DeviceTopicUpdateRequest) -> EmptyResponse:
        return self._call(ApiMethod.DEVICE_TOPIC_UPDATE, request, EmptyResponse)

    def send_push_notification(
        self, request: SendPushNotificationRequest,
    ) -> SendPushNotificationResponse:
        return self._call(
            ApiMethod.SEND_PUSH_NOTIFICATION, request, SendPushNotificationResponse,
        )

    def update_push_status(self, request: UpdatePushStatusRequest) -> EmptyResponse:
        return self._call(ApiMethod.UPDATE_PUSH_STATUS, request, EmptyResponse)

    def user_topic_list(self, request: UserTopicListRequest) -> UserTopicListResponse:
        return self._call(ApiMethod.USER_TOPIC_LIST, request, UserTopicListResponse)

    def user_topic_update(self, request: UserTopicUpdateRequest) -> EmptyResponse:
        return self._call(ApiMethod.USER_TOPIC_UPDATE, request, EmptyResponse)

    # ─── Transport ───────────────────────────────────────────────

    def _call(
        self, method: ApiMethod, request: ApiRequest, response_type: type[R],
    ) -> R:
        """POST request to method's endpoint and decode the declared response type."""
        started = time.perf_counter()
        try:
            response = self._http.post(method.value, json=request.to_payload())
        except httpx.HTTPError as e:
            err = map_transport_error(method, e)
            log_failure(err, elapsed_ms(started))
            raise err from e

        try:
            result = decode_reply(method, response, response_type)
        except CentrifugoError as err:
            log_failure(err, elapsed_ms(started))
            raise
        log_success(method, response.status_code, elapsed_ms(started))
        return result
