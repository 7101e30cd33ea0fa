"""Schema Base — frozen pydantic models shared by all push API records.

Invariants:
    - Records are immutable after construction (frozen=True)
    - Request records, nested ones included, reject unknown fields;
      response records ignore them (server may add fields)
    - to_payload() drops None values: Centrifugo treats absent and null alike
"""

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Immutable value record, tolerant of unknown keys in server replies."""
    model_config = ConfigDict(frozen=True, extra="ignore")


class RequestModel(ApiModel):
    """Record nested inside a request body. A misspelled field is an error."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    def is_empty(self) -> bool:
        """True when no field carries a value (None and empty lists alike)."""
        return not any(self.model_dump(exclude_none=True).values())


class ApiRequest(RequestModel):
    """Base for request records — serialized into the POST body."""

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class EmptyResponse(ApiModel):
    """Acknowledgment with no data (Centrifugo replies {"result": {}})."""
