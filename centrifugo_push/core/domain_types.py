"""Domain Types — identifiers and enumerated values of the push API.

Invariants:
    - DeviceId, SendId, UserId wrap str — Centrifugo ids are opaque strings
    - All enumerated wire values encoded as str Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: pydantic dumps them as plain JSON strings
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DeviceId = NewType("DeviceId", str)
SendId = NewType("SendId", str)
UserId = NewType("UserId", str)


# ─── Enums ───────────────────────────────────────────────────────

class PushProvider(str, Enum):
    """Push delivery provider a device token belongs to."""
    FCM = "fcm"
    HMS = "hms"
    APNS = "apns"


class DevicePlatform(str, Enum):
    IOS = "ios"
    ANDROID = "android"
    WEB = "web"


class TopicOp(str, Enum):
    """Topic set mutation applied by topic update calls."""
    ADD = "add"
    REMOVE = "remove"
    SET = "set"


class PushStatus(str, Enum):
    """Status values accepted by update_push_status (experimental upstream)."""
    DELIVERED = "delivered"
    INTERACTED = "interacted"


class ApiMethod(str, Enum):
    """Centrifugo API method names — the last path segment of each endpoint."""
    CANCEL_PUSH = "cancel_push"
    DEVICE_LIST = "device_list"
    DEVICE_REGISTER = "device_register"
    DEVICE_UPDATE = "device_update"
    DEVICE_REMOVE = "device_remove"
    DEVICE_TOPIC_LIST = "device_topic_list"
    DEVICE_TOPIC_UPDATE = "device_topic_update"
    SEND_PUSH_NOTIFICATION = "send_push_notification"
    UPDATE_PUSH_STATUS = "update_push_status"
    USER_TOPIC_LIST = "user_topic_list"
    USER_TOPIC_UPDATE = "user_topic_update"
