"""
Tests for request option composition.
"""
from core.options import (
    RequestSpec,
    add_header,
    add_query_parameter,
    apply_options,
    set_header,
    set_query_parameter,
)


def _spec():
    return RequestSpec(method="GET", path="/channels")


class TestSetQueryParameter:
    def test_last_set_wins(self):
        spec = apply_options(
            _spec(),
            [
                set_query_parameter("first", "10"),
                set_query_parameter("first", "20"),
                set_query_parameter("first", "30"),
            ],
        )
        assert spec.query_values("first") == ["30"]

    def test_set_replaces_accumulated_adds(self):
        spec = apply_options(
            _spec(),
            [
                add_query_parameter("broadcaster_id", "1"),
                add_query_parameter("broadcaster_id", "2"),
                set_query_parameter("broadcaster_id", "3"),
            ],
        )
        assert spec.query_values("broadcaster_id") == ["3"]

    def test_set_does_not_touch_other_keys(self):
        spec = apply_options(
            _spec(),
            [set_query_parameter("user_id", "1"), set_query_parameter("first", "5")],
        )
        assert spec.params == [("user_id", "1"), ("first", "5")]


class TestAddQueryParameter:
    def test_adds_accumulate_in_order(self):
        values = [str(i) for i in range(7)]
        spec = apply_options(_spec(), [add_query_parameter("broadcaster_id", v) for v in values])
        assert spec.query_values("broadcaster_id") == values

    def test_add_after_set_keeps_both(self):
        spec = apply_options(
            _spec(),
            [set_query_parameter("id", "a"), add_query_parameter("id", "b")],
        )
        assert spec.query_values("id") == ["a", "b"]


class TestHeaders:
    def test_set_header_is_case_insensitive(self):
        spec = apply_options(
            _spec(),
            [set_header("Client-Id", "one"), set_header("client-id", "two")],
        )
        assert spec.headers == [("client-id", "two")]

    def test_add_header_accumulates(self):
        spec = apply_options(_spec(), [add_header("X-Trace", "a"), add_header("X-Trace", "b")])
        assert spec.headers == [("X-Trace", "a"), ("X-Trace", "b")]

    def test_header_options_do_not_touch_query(self):
        spec = apply_options(_spec(), [set_header("first", "1")])
        assert spec.params == []


def test_options_are_values():
    assert set_query_parameter("a", "1") == set_query_parameter("a", "1")
    assert set_query_parameter("a", "1") != add_query_parameter("a", "1")


def test_apply_options_returns_same_spec():
    spec = _spec()
    assert apply_options(spec, []) is spec
