"""Tests for envelope decoding and resolution."""

from __future__ import annotations

import pytest

from ptcg_cli.client.envelope import (
    ApiError,
    DataEnvelope,
    ErrorEnvelope,
    decode_envelope,
    resolve,
)
from ptcg_cli.client.errors import (
    BadRequestError,
    DecodeFailedError,
    NotFoundError,
    TooManyRequestsError,
)
from ptcg_cli.models.card import Card


class TestDecodeEnvelope:
    def test_single_entity(self, make_card):
        env = decode_envelope({"data": make_card(1)}, Card)
        assert isinstance(env, DataEnvelope)
        assert isinstance(env.data, Card)
        assert env.data.id == "base1-1"
        assert env.total_count is None

    def test_collection_with_total_count(self, make_card):
        body = {"data": [make_card(1), make_card(2)], "totalCount": 2, "page": 1}
        env = decode_envelope(body, list[Card])
        assert [c.id for c in env.data] == ["base1-1", "base1-2"]
        assert env.total_count == 2

    def test_string_list(self):
        env = decode_envelope({"data": ["Fire", "Water"]}, list[str])
        assert env.data == ["Fire", "Water"]

    def test_error_shape(self):
        body = {"error": {"message": "Not found", "code": 404}}
        env = decode_envelope(body, Card)
        assert isinstance(env, ErrorEnvelope)
        assert env.error.code == 404
        assert env.error.message == "Not found"

    def test_neither_shape_raises(self):
        with pytest.raises(DecodeFailedError):
            decode_envelope({"unexpected": True}, Card)

    def test_non_object_body_raises(self):
        with pytest.raises(DecodeFailedError):
            decode_envelope(["not", "an", "envelope"], list[str])

    def test_payload_of_wrong_shape_raises(self):
        # A card without its identifying fields is not a valid success payload
        with pytest.raises(DecodeFailedError):
            decode_envelope({"data": {"hp": "60"}}, Card)


class TestResolve:
    def test_returns_data(self):
        env = DataEnvelope[list[str]](data=["a", "b"], total_count=2)
        assert resolve(env) == ["a", "b"]

    def test_bad_request_keeps_message(self):
        env = ErrorEnvelope(error=ApiError(message="Invalid query: foo:", code=400))
        with pytest.raises(BadRequestError) as exc_info:
            resolve(env)
        assert exc_info.value.message == "Invalid query: foo:"
        assert exc_info.value.code == 400

    def test_not_found(self):
        env = ErrorEnvelope(error=ApiError(message="gone", code=404))
        with pytest.raises(NotFoundError):
            resolve(env)

    def test_rate_limited(self):
        env = ErrorEnvelope(error=ApiError(message="slow down", code=429))
        with pytest.raises(TooManyRequestsError):
            resolve(env)
