"""Behaviour of the writer-style debug pipeline."""

from __future__ import annotations

import math

import pytest

from monadic.writer import DebugPair, add_five, bind, compose_debug, lift, square, unit


def test_unit_carries_empty_message():
    assert unit(4) == DebugPair(4, "")
    assert unit("x") == ("x", "")


def test_reference_stages_report_their_work():
    assert add_five(3) == (8, "3 + 5 = 8.")
    assert square(4) == (16, "4^2 = 16.")


def test_bind_appends_message_after_previous():
    pair = bind(add_five)(DebugPair(1, "start."))
    assert pair.value == 6
    assert pair.message == "start.1 + 5 = 6."


def test_pipeline_squares_then_adds_five():
    value, message = compose_debug(add_five, square)(3)
    assert value == 14
    assert message == "3^2 = 9.9 + 5 = 14."


def test_pipeline_order_follows_application():
    result = compose_debug(square, add_five, add_five)(0)
    assert result.value == 100
    assert result.message == "0 + 5 = 5.5 + 5 = 10.10^2 = 100."


def test_empty_pipeline_returns_unit():
    assert compose_debug()(9) == DebugPair(9, "")


def test_lifted_stage_is_silent():
    result = compose_debug(lift(abs))(-4)
    assert result.value == abs(-4)
    assert result.message == ""


def test_lifted_stage_adds_no_fragment_mid_pipeline():
    result = compose_debug(add_five, lift(lambda x: x * 3), square)(2)
    assert result == (17, "2^2 = 4.12 + 5 = 17.")


def test_nan_flows_through_unchanged():
    value, message = compose_debug(add_five, square)(float("nan"))
    assert math.isnan(value)
    assert message == "nan^2 = nan.nan + 5 = nan."


def test_stage_faults_propagate():
    with pytest.raises(TypeError):
        compose_debug(add_five)("three")
