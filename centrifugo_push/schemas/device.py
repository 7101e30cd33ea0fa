"""Device Schemas — device registry records and the device_* calls.

Invariants:
    - DeviceRegisterRequest: provider, platform, token required; token non-empty
    - DeviceUpdateRequest/DeviceRemoveRequest select devices by ids and/or users,
      at least one selector required
    - List responses default to empty: Centrifugo omits zero-valued fields
"""

from pydantic import Field, field_validator, model_validator

from centrifugo_push.core.domain_types import (
    DeviceId, DevicePlatform, PushProvider, TopicOp, UserId,
)
from centrifugo_push.schemas.base import ApiModel, ApiRequest, RequestModel


class Device(ApiModel):
    """Registered push endpoint as returned by device_list."""
    id: DeviceId
    platform: str = ""
    provider: str = ""
    token: str = ""
    user: UserId = UserId("")
    created_at: int = 0
    updated_at: int = 0
    meta: dict[str, str] = Field(default_factory=dict)
    topics: list[str] = Field(default_factory=list)


class DeviceFilter(RequestModel):
    """Device selector shared by device_list and push recipients."""
    ids: list[str] | None = None
    users: list[str] | None = None
    topics: list[str] | None = None
    providers: list[PushProvider] | None = None
    platforms: list[DevicePlatform] | None = None


# --- device_register ----------------------------------------------------------

class DeviceRegisterRequest(ApiRequest):
    """Register a device, or update it when id is given."""
    id: str | None = None
    provider: PushProvider
    token: str = Field(min_length=1)
    platform: DevicePlatform
    user: str | None = None
    timezone: str | None = None
    locale: str | None = None
    meta: dict[str, str] | None = None
    topics: list[str] | None = None

    @field_validator("token")
    @classmethod
    def strip_token(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("token cannot be empty or whitespace")
        return v


class DeviceRegisterResponse(ApiModel):
    id: DeviceId = Field(min_length=1)


# --- device_update ------------------------------------------------------------

class DeviceUserUpdate(RequestModel):
    """Set the device's user; empty string detaches the user."""
    user: str


class DeviceMetaUpdate(RequestModel):
    meta: dict[str, str]


class DeviceTopicsUpdate(RequestModel):
    op: TopicOp
    topics: list[str]


class DeviceTimezoneUpdate(RequestModel):
    timezone: str


class DeviceLocaleUpdate(RequestModel):
    locale: str


class DeviceUpdateRequest(ApiRequest):
    """Update devices selected by ids and/or users."""
    ids: list[str] | None = None
    users: list[str] | None = None
    user_update: DeviceUserUpdate | None = None
    meta_update: DeviceMetaUpdate | None = None
    topics_update: DeviceTopicsUpdate | None = None
    timezone_update: DeviceTimezoneUpdate | None = None
    locale_update: DeviceLocaleUpdate | None = None

    @model_validator(mode="after")
    def require_selector(self):
        if not self.ids and not self.users:
            raise ValueError("device_update requires ids or users")
        return self


# --- device_remove ------------------------------------------------------------

class DeviceRemoveRequest(ApiRequest):
    ids: list[str] | None = None
    users: list[str] | None = None

    @model_validator(mode="after")
    def require_selector(self):
        if not self.ids and not self.users:
            raise ValueError("device_remove requires ids or users")
        return self


# --- device_list --------------------------------------------------------------

class DeviceListRequest(ApiRequest):
    """Paginated device query. Pass next_cursor back as cursor for the next page."""
    filter: DeviceFilter | None = None
    include_total_count: bool = False
    include_meta: bool = False
    include_topics: bool = False
    cursor: str | None = None
    limit: int | None = Field(None, ge=1)


class DeviceListResponse(ApiModel):
    items: list[Device] = Field(default_factory=list)
    next_cursor: str = ""
    total_count: int = 0
