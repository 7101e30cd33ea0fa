"""Push Command Protocols — the capability set of a Centrifugo PRO push client.

Invariants:
    - One method per Centrifugo push API call; one request value in, one response value out
    - Every method raises CentrifugoError on any failure and nothing else
    - No retries, no caching, no ordering between calls

Design Decisions:
    - Protocol over ABC: structural subtyping, implementations need not inherit
    - AsyncPushNotificationCommand mirrors the sync contract with awaitables
"""

from typing import Protocol, runtime_checkable

from centrifugo_push.schemas.base import EmptyResponse
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


@runtime_checkable
class PushNotificationCommand(Protocol):
    """Centrifugo PRO push-notification administrative calls.

    Every method raises CentrifugoError (base Centrifugo exception).
    """

    def cancel_push(self, request: CancelPushRequest) -> EmptyResponse:
        """Cancel a delayed push notification (one sent with a custom send_at)."""
        ...

    def device_list(self, request: DeviceListRequest) -> DeviceListResponse:
        """Paginated list of registered devices matching the request filter."""
        ...

    def device_register(self, request: DeviceRegisterRequest) -> DeviceRegisterResponse:
        """Register or update device information; returns the device id."""
        ...

    def device_update(self, request: DeviceUpdateRequest) -> EmptyResponse:
        """Update device information.

        For example, detach the user id from a device when the user logs out.
        """
        ...

    def device_remove(self, request: DeviceRemoveRequest) -> EmptyResponse:
        """Remove devices from storage, e.g. on logout when the token is no longer needed."""
        ...

    def device_topic_list(self, request: DeviceTopicListRequest) -> DeviceTopicListResponse:
        """List device to topic mapping."""
        ...

    def device_topic_update(self, request: DeviceTopicUpdateRequest) -> EmptyResponse:
        """Manage mapping of a device to topics."""
        ...

    def send_push_notification(
        self, request: SendPushNotificationRequest,
    ) -> SendPushNotificationResponse:
        """Send a push to device ids, topics, or native identifiers (FCM tokens/topic, ...).

        Returns the unique send id; it matches request.uid when one was provided.
        """
        ...

    def update_push_status(self, request: UpdatePushStatusRequest) -> EmptyResponse:
        """Experimental API. Update push notification status."""
        ...

    def user_topic_list(self, request: UserTopicListRequest) -> UserTopicListResponse:
        """List user to topic mapping."""
        ...

    def user_topic_update(self, request: UserTopicUpdateRequest) -> EmptyResponse:
        """Manage mapping of topics with users.

        User topics are attached to the user's devices on registration and
        removed from a device when the user is detached from it.
        """
        ...


@runtime_checkable
class AsyncPushNotificationCommand(Protocol):
    """Awaitable counterpart of PushNotificationCommand."""

    async def cancel_push(self, request: CancelPushRequest) -> EmptyResponse: ...
    async def device_list(self, request: DeviceListRequest) -> DeviceListResponse: ...
    async def device_register(
        self, request: DeviceRegisterRequest,
    ) -> DeviceRegisterResponse: ...
    async def device_update(self, request: DeviceUpdateRequest) -> EmptyResponse: ...
    async def device_remove(self, request: DeviceRemoveRequest) -> EmptyResponse: ...
    async def device_topic_list(
        self, request: DeviceTopicListRequest,
    ) -> DeviceTopicListResponse: ...
    async def device_topic_update(
        self, request: DeviceTopicUpdateRequest,
    ) -> EmptyResponse: ...
    async def send_push_notification(
        self, request: SendPushNotificationRequest,
    ) -> SendPushNotificationResponse: ...
    async def update_push_status(self, request: UpdatePushStatusRequest) -> EmptyResponse: ...
    async def user_topic_list(self, request: UserTopicListRequest) -> UserTopicListResponse: ...
    async def user_topic_update(self, request: UserTopicUpdateRequest) -> EmptyResponse: ...
