"""Tests for filter chain execution"""

import pytest

from eventdispatch import InvalidFilterEntryError, OutputSlot, run_filters


def test_filters_run_in_order():
    calls = []

    def make(label):
        def _filter(params, output):
            calls.append(label)
        return _filter

    run_filters([make("a"), make("b"), make("c")], [], OutputSlot())

    assert calls == ["a", "b", "c"]


def test_false_stops_the_chain():
    calls = []

    def first(params, output):
        calls.append("first")
        return False

    def second(params, output):
        calls.append("second")

    run_filters([first, second], [], OutputSlot())

    assert calls == ["first"]


@pytest.mark.parametrize("value", [None, 0, "", [], True, "stop"])
def test_only_false_short_circuits(value):
    calls = []

    def first(params, output):
        return value

    def second(params, output):
        calls.append("second")

    run_filters([first, second], [], OutputSlot())

    assert calls == ["second"]


def test_filters_share_params_and_output():
    params = ["ada"]
    output = OutputSlot("hello")

    def upper(params, output):
        params[0] = params[0].upper()

    def exclaim(params, output):
        output.value += "!"

    run_filters([upper, exclaim], params, output)

    assert params == ["ADA"]
    assert output.value == "hello!"


def test_non_callable_entry_reports_position():
    calls = []

    def ok(params, output):
        calls.append("ok")

    with pytest.raises(InvalidFilterEntryError) as exc_info:
        run_filters([ok, "not-a-filter", ok], [], OutputSlot())

    assert exc_info.value.position == 1
    assert exc_info.value.entry == "not-a-filter"
    assert "filters[1]" in str(exc_info.value)
    assert calls == ["ok"]


def test_filter_exceptions_propagate():
    class Boom(Exception):
        pass

    def explode(params, output):
        raise Boom("filter failed")

    with pytest.raises(Boom, match="filter failed"):
        run_filters([explode], [], OutputSlot())


def test_output_slot_defaults_to_none():
    assert OutputSlot().value is None
    assert repr(OutputSlot(3)) == "OutputSlot(3)"
