"""Async Centrifugo Push Client — AsyncPushNotificationCommand over httpx.AsyncClient.

Same wire format, error mapping and logging as CentrifugoPushClient.

Invariants:
    - One POST per call; no retries
    - CancelledError (BaseException) passes through uncaught
    - Client owns the httpx.AsyncClient it creates; an injected one is left open
    - An injected http_client gets the same base_url, headers and timeout
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


class AsyncCentrifugoPushClient:
    """Async HTTP-backed push client."""

    def __init__(
        self,
        api_url: str,
        api_key: str = "",
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        if http_client is not None and transport is not None:
            raise ValueError("pass either transport or http_client, not both")
        self.api_url = api_url.rstrip("/")
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(transport=transport)
        http_client.base_url = self.api_url
        http_client.headers.update(build_headers(api_key))
        http_client.timeout = httpx.Timeout(timeout_seconds)
        self._http = http_client

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "AsyncCentrifugoPushClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def cancel_push(self, request: CancelPushRequest) -> EmptyResponse:
        return await self._call(ApiMethod.CANCEL_PUSH, request, EmptyResponse)

    async def device_list(self, request: DeviceListRequest) -> DeviceListResponse:
        return await self._call(ApiMethod.DEVICE_LIST, request, DeviceListResponse)

    async def device_register(
        self, request: DeviceRegisterRequest,
    ) -> DeviceRegisterResponse:
        return await self._call(ApiMethod.DEVICE_REGISTER, request, DeviceRegisterResponse)

    async def device_update(self, request: DeviceUpdateRequest) -> EmptyResponse:
        return await self._call(ApiMethod.DEVICE_UPDATE, request, EmptyResponse)

    async def device_remove(self, request: DeviceRemoveRequest) -> EmptyResponse:
        return await self._call(ApiMethod.DEVICE_REMOVE, request, EmptyResponse)

    async def device_topic_list(
        self, request: DeviceTopicListRequest,
    ) -> DeviceTopicListResponse:
        return await self._call(
            ApiMethod.DEVICE_TOPIC_LIST, request, DeviceTopicListResponse,
        )

    async def device_topic_update(
        self, request: DeviceTopicUpdateRequest,
    ) -> EmptyResponse:
        return await self._call(ApiMethod.DEVICE_TOPIC_UPDATE, request, EmptyResponse)

    async def send_push_notification(
        self, request: SendPushNotificationRequest,
    ) -> SendPushNotificationResponse:
        return await self._call(
            ApiMethod.SEND_PUSH_NOTIFICATION, request, SendPushNotificationResponse,
        )

    async def update_push_status(self, request: UpdatePushStatusRequest) -> EmptyResponse:
        return await self._call(ApiMethod.UPDATE_PUSH_STATUS, request, EmptyResponse)

    async def user_topic_list(self, request: UserTopicListRequest) -> UserTopicListResponse:
        return await self._call(ApiMethod.USER_TOPIC_LIST, request, UserTopicListResponse)

    async def user_topic_update(self, request: UserTopicUpdateRequest) -> EmptyResponse:
        return await self._call(ApiMethod.USER_TOPIC_UPDATE, request, EmptyResponse)

    async def _call(
        self, method: ApiMethod, request: ApiRequest, response_type: type[R],
    ) -> R:
        started = time.perf_counter()
        try:
            response = await self._http.post(method.value, json=request.to_payload())
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
