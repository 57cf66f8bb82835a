"""
Tests for generic envelope decoding.
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from core.decoding import decode_envelope
from core.domain.models import Channel, Followed, Follower
from core.errors import DecodeError, HelixError

FOLLOWED_BODY = (
    b'{"data":[{"broadcaster_id":"55","broadcaster_login":"foo","broadcaster_name":"Foo",'
    b'"followed_at":"2023-01-01T00:00:00Z"}],"pagination":{"cursor":"abc123"}}'
)


def test_decodes_followed_page():
    envelope = decode_envelope(FOLLOWED_BODY, Followed)

    assert len(envelope.data) == 1
    assert envelope.data[0].broadcaster_id == "55"
    assert envelope.data[0].broadcaster_login == "foo"
    assert envelope.pagination.cursor == "abc123"


def test_timestamps_are_timezone_aware():
    envelope = decode_envelope(FOLLOWED_BODY, Followed)

    followed_at = envelope.data[0].followed_at
    assert followed_at.tzinfo is not None
    assert followed_at == datetime(2023, 1, 1, tzinfo=timezone.utc)


def test_naive_timestamp_is_rejected():
    body = (
        b'{"data":[{"user_id":"1","user_login":"a","user_name":"A",'
        b'"followed_at":"2023-01-01T00:00:00"}]}'
    )
    with pytest.raises(DecodeError):
        decode_envelope(body, Follower)


def test_empty_data_is_not_an_error():
    envelope = decode_envelope(b'{"data": [], "pagination": {}}', Follower)

    assert envelope.data == []
    assert envelope.pagination.cursor == ""


def test_missing_pagination_yields_empty_cursor():
    body = (
        b'{"data":[{"broadcaster_id":"1","broadcaster_login":"a","broadcaster_name":"A",'
        b'"game_id":"509658","game_name":"Just Chatting","title":"hi","delay":0,'
        b'"tags":["English"],"content_classification_labels":[],"is_branded_content":false}]}'
    )
    envelope = decode_envelope(body, Channel)

    assert envelope.pagination.cursor == ""
    channel = envelope.data[0]
    assert channel.id == "1"
    assert channel.login == "a"
    assert channel.display_name == "A"
    assert channel.tags == ["English"]


def test_null_cursor_yields_empty_cursor():
    envelope = decode_envelope(b'{"data": [], "pagination": {"cursor": null}}', Followed)
    assert envelope.pagination.cursor == ""


def test_missing_data_is_decode_error():
    with pytest.raises(DecodeError):
        decode_envelope(b'{"pagination": {"cursor": "x"}}', Followed)


def test_wrong_data_type_is_decode_error():
    with pytest.raises(DecodeError):
        decode_envelope(b'{"data": {"broadcaster_id": "1"}}', Channel)


def test_malformed_json_is_decode_error():
    with pytest.raises(DecodeError) as excinfo:
        decode_envelope(b'{"data": [', Channel)
    assert isinstance(excinfo.value, HelixError)


def test_empty_body_is_decode_error():
    with pytest.raises(DecodeError):
        decode_envelope(b"", Channel)


def test_rejects_non_model_type():
    with pytest.raises(TypeError):
        decode_envelope(b'{"data": []}', dict)


def test_entities_are_immutable():
    envelope = decode_envelope(FOLLOWED_BODY, Followed)
    with pytest.raises(ValidationError):
        envelope.data[0].broadcaster_id = "other"
