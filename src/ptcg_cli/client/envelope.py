"""Response envelopes — success ``{"data", "totalCount"}`` or ``{"error"}``."""

from __future__ import annotations

from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ptcg_cli.client.errors import DecodeFailedError, classify_error

T = TypeVar("T")


class DataEnvelope(BaseModel, Generic[T]):
    """Successful response. ``total_count`` only appears on collections."""

    model_config = ConfigDict(populate_by_name=True)

    data: T
    total_count: int | None = Field(default=None, alias="totalCount")


class ApiError(BaseModel):
    message: str
    code: int


class ErrorEnvelope(BaseModel):
    """Failed response."""

    error: ApiError


Envelope = Union[DataEnvelope[T], ErrorEnvelope]


def decode_envelope(body: Any, payload_type: Any) -> DataEnvelope[Any] | ErrorEnvelope:
    """Decode a JSON body as a success envelope, falling back to an error envelope.

    Raises DecodeFailedError when the body matches neither shape.
    """
    try:
        return DataEnvelope[payload_type].model_validate(body)
    except PydanticValidationError as data_exc:
        try:
            return ErrorEnvelope.model_validate(body)
        except PydanticValidationError:
            raise DecodeFailedError(str(data_exc)) from data_exc


def resolve(envelope: DataEnvelope[T] | ErrorEnvelope) -> T:
    """Return the payload of a success envelope or raise the classified error."""
    if isinstance(envelope, ErrorEnvelope):
        raise classify_error(envelope.error.code, envelope.error.message)
    return envelope.data
