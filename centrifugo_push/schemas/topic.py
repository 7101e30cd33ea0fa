"""Topic Schemas — device-to-topic and user-to-topic mappings.

Invariants:
    - Update requests carry an op (add|remove|set) and the topic set it applies
    - add/remove require a non-empty topic list; set accepts [] (clears all topics)
"""

from pydantic import Field, model_validator

from centrifugo_push.core.domain_types import (
    DeviceId, DevicePlatform, PushProvider, TopicOp, UserId,
)
from centrifugo_push.schemas.base import ApiModel, ApiRequest, RequestModel
from centrifugo_push.schemas.device import Device


def _check_topic_set(op: TopicOp, topics: list[str]) -> None:
    if op != TopicOp.SET and not topics:
        raise ValueError(f"op '{op.value}' requires at least one topic")
    if any(not t for t in topics):
        raise ValueError("topic names cannot be empty")


# --- device topics ------------------------------------------------------------

class DeviceTopicFilter(RequestModel):
    device_ids: list[str] | None = None
    device_providers: list[PushProvider] | None = None
    device_platforms: list[DevicePlatform] | None = None
    device_users: list[str] | None = None
    topics: list[str] | None = None
    topic_prefix: str | None = None


class DeviceTopic(ApiModel):
    id: str
    topic: str
    device: Device | None = None


class DeviceTopicListRequest(ApiRequest):
    filter: DeviceTopicFilter | None = None
    include_total_count: bool = False
    include_device: bool = False
    cursor: str | None = None
    limit: int | None = Field(None, ge=1)


class DeviceTopicListResponse(ApiModel):
    items: list[DeviceTopic] = Field(default_factory=list)
    next_cursor: str = ""
    total_count: int = 0


class DeviceTopicUpdateRequest(ApiRequest):
    device_id: DeviceId = Field(min_length=1)
    op: TopicOp
    topics: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_topics(self):
        _check_topic_set(self.op, self.topics)
        return self


# --- user topics --------------------------------------------------------------

class UserTopicFilter(RequestModel):
    users: list[str] | None = None
    topics: list[str] | None = None
    topic_prefix: str | None = None


class UserTopic(ApiModel):
    id: str
    user: UserId
    topic: str


class UserTopicListRequest(ApiRequest):
    filter: UserTopicFilter | None = None
    include_total_count: bool = False
    cursor: str | None = None
    limit: int | None = Field(None, ge=1)


class UserTopicListResponse(ApiModel):
    items: list[UserTopic] = Field(default_factory=list)
    next_cursor: str = ""
    total_count: int = 0


class UserTopicUpdateRequest(ApiRequest):
    """Mutate a user's topics. The server mirrors them onto the user's devices."""
    user: UserId = Field(min_length=1)
    op: TopicOp
    topics: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_topics(self):
        _check_topic_set(self.op, self.topics)
        return self
