"""
Tests for the advisory transmissibility check.
"""

import enum
import math
from collections import OrderedDict, defaultdict

import pytest

from syncstate.errors import TransportEncodeError
from syncstate.serialization import (
    MAX_WIRE_INT,
    MIN_WIRE_INT,
    is_transmissible,
)
from syncstate.transport import encode_value


class TestTransmissibleValues:
    """Values that cross the bridge unchanged."""

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "text",
            True,
            False,
            0,
            -12,
            MIN_WIRE_INT,
            MAX_WIRE_INT,
            1.5,
            [],
            {},
            [1, "two", None, [3.0]],
            {"nested": {"list": [1, 2, {"deep": True}]}},
        ],
    )
    def test_plain_data(self, value):
        assert is_transmissible(value) is True

    def test_shared_reference_is_not_a_cycle(self):
        """The same list referenced twice side by side is still a tree."""
        shared = [1, 2]

        assert is_transmissible({"a": shared, "b": shared}) is True
        assert is_transmissible([shared, shared]) is True


class TestNonTransmissibleValues:
    """Values the transport cannot carry unchanged."""

    @pytest.mark.parametrize(
        "value",
        [
            lambda: None,
            print,
            (1, 2),
            {1, 2},
            frozenset(),
            b"bytes",
            object(),
            math.nan,
            math.inf,
            -math.inf,
            MAX_WIRE_INT + 1,
            MIN_WIRE_INT - 1,
        ],
    )
    def test_top_level(self, value):
        assert is_transmissible(value) is False

    def test_nested_callable(self):
        assert is_transmissible({"handler": lambda value: value}) is False
        assert is_transmissible([1, [2, [print]]]) is False

    def test_non_string_keys(self):
        assert is_transmissible({1: "one"}) is False
        assert is_transmissible({"ok": {None: 1}}) is False

    def test_self_referencing_list(self):
        value: list = [1]
        value.append(value)

        assert is_transmissible(value) is False

    def test_indirect_cycle(self):
        first: dict = {}
        second = {"back": first}
        first["forward"] = second

        assert is_transmissible(first) is False


class TestBuiltinSubclasses:
    """Subclasses of builtins are refused by the transport encoder."""

    def test_ordered_dict(self):
        assert is_transmissible(OrderedDict(a=1)) is False

    def test_default_dict(self):
        assert is_transmissible(defaultdict(list)) is False

    def test_nested_subclass(self):
        class Name(str):
            pass

        class Items(list):
            pass

        assert is_transmissible({"name": Name("counter")}) is False
        assert is_transmissible([Items([1])]) is False
        assert is_transmissible({Name("key"): 1}) is False

    def test_int_enum_is_transmissible(self):
        class Color(enum.IntEnum):
            RED = 1

        assert is_transmissible(Color.RED) is True
        assert is_transmissible({"color": Color.RED}) is True

    def test_plain_enum_is_not_transmissible(self):
        class Mode(enum.Enum):
            FAST = "fast"

        assert is_transmissible(Mode.FAST) is False

    @pytest.mark.parametrize(
        "value",
        [
            OrderedDict(a=1),
            defaultdict(int, a=1),
            {"nested": OrderedDict(b=2)},
            {"plain": [1, 2, {"ok": True}]},
        ],
    )
    def test_guard_agrees_with_encoder(self, value):
        try:
            encode_value(value)
            encodes = True

        except TransportEncodeError:
            encodes = False

        assert is_transmissible(value) is encodes
