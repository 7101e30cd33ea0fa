"""Push Schemas — push dispatch, status update, and delayed push cancellation.

Invariants:
    - PushRecipient names exactly one target kind (device filter, FCM, HMS or APNs)
    - PushNotification carries at least one provider payload
    - Provider payloads (FCM/HMS message, APNs payload) are passed through untouched
    - send_at/expire_at are Unix seconds
"""

from typing import Any

from pydantic import Field, model_validator

from centrifugo_push.core.domain_types import PushStatus, SendId
from centrifugo_push.schemas.base import ApiModel, ApiRequest, RequestModel
from centrifugo_push.schemas.device import DeviceFilter


# Recipient fields grouped by target kind; a recipient may use one group only.
_TARGET_GROUPS = {
    "filter": ("filter",),
    "fcm": ("fcm_tokens", "fcm_topic", "fcm_condition"),
    "hms": ("hms_tokens", "hms_topic", "hms_condition"),
    "apns": ("apns_tokens",),
}


def _is_set(value) -> bool:
    if isinstance(value, RequestModel):
        return not value.is_empty()
    return bool(value)


class PushRecipient(RequestModel):
    """Target selector: registered devices or provider-native identifiers."""
    filter: DeviceFilter | None = None
    fcm_tokens: list[str] | None = None
    fcm_topic: str | None = None
    fcm_condition: str | None = None
    hms_tokens: list[str] | None = None
    hms_topic: str | None = None
    hms_condition: str | None = None
    apns_tokens: list[str] | None = None

    @model_validator(mode="after")
    def require_single_target(self):
        used = [
            name for name, fields in _TARGET_GROUPS.items()
            if any(_is_set(getattr(self, f)) for f in fields)
        ]
        if not used:
            raise ValueError("recipient requires a device filter or provider tokens/topic")
        if len(used) > 1:
            raise ValueError(f"recipient mixes target kinds: {', '.join(used)}")
        fcm_set = [f for f in _TARGET_GROUPS["fcm"] if getattr(self, f)]
        hms_set = [f for f in _TARGET_GROUPS["hms"] if getattr(self, f)]
        if len(fcm_set) > 1 or len(hms_set) > 1:
            raise ValueError("use one of tokens, topic or condition per provider")
        return self


class FcmPushNotification(RequestModel):
    """FCM v1 Message object (https://firebase.google.com/docs/reference/fcm/rest/v1/projects.messages)."""
    message: dict[str, Any]


class HmsPushNotification(RequestModel):
    message: dict[str, Any]


class ApnsPushNotification(RequestModel):
    headers: dict[str, str] | None = None
    payload: dict[str, Any]


class PushNotification(RequestModel):
    fcm: FcmPushNotification | None = None
    hms: HmsPushNotification | None = None
    apns: ApnsPushNotification | None = None
    expire_at: int | None = Field(None, ge=0)

    @model_validator(mode="after")
    def require_payload(self):
        if not (self.fcm or self.hms or self.apns):
            raise ValueError("notification requires an fcm, hms or apns payload")
        return self


# --- send_push_notification ---------------------------------------------------

class SendPushNotificationRequest(ApiRequest):
    """Send a push now, or at send_at. uid, when given, becomes the send id."""
    recipient: PushRecipient
    notification: PushNotification
    uid: str | None = Field(None, min_length=1)
    send_at: int | None = Field(None, ge=0)
    analytics_uid: str | None = None
    optimize_for_reliability: bool | None = None


class SendPushNotificationResponse(ApiModel):
    uid: SendId = Field(min_length=1)


# --- update_push_status (experimental upstream API) ---------------------------

class UpdatePushStatusRequest(ApiRequest):
    analytics_uid: str = Field(min_length=1)
    status: PushStatus
    device_id: str | None = None
    msg_id: str | None = None


# --- cancel_push --------------------------------------------------------------

class CancelPushRequest(ApiRequest):
    """Cancel a delayed push (one sent with send_at) by its uid."""
    uid: SendId = Field(min_length=1)
