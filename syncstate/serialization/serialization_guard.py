"""
Advisory check for whether a value can cross the bridge and arrive equal
to what was sent.

Transmissible values are None, str, bool, 64-bit ints, finite floats,
lists of transmissible values and str-keyed dicts of transmissible values
without reference cycles. Subclasses of str, int, list and dict
(OrderedDict, defaultdict, ...) are refused by the transport encoder and
so are not transmissible. IntEnum and StrEnum members are encoded as
their value, which compares equal to the member. A failing check is only
a diagnostic, a slot holding such a value is still usable from the host.
"""

from __future__ import annotations

import enum
import math
from typing import Any


MIN_WIRE_INT = -(2**63)
MAX_WIRE_INT = 2**64 - 1


def is_transmissible(value: Any) -> bool:
    return _check(value, set())


def _check(value: Any, ancestors: set[int]) -> bool:
    if value is None:
        return True

    if isinstance(value, enum.Enum):
        return isinstance(value, (int, str)) and _check(value.value, ancestors)

    value_type = type(value)

    if value_type is str or value_type is bool:
        return True

    if value_type is int:
        return MIN_WIRE_INT <= value <= MAX_WIRE_INT

    if isinstance(value, float):
        return math.isfinite(value)

    if value_type is list or value_type is dict:
        value_id = id(value)
        if value_id in ancestors:
            return False

        ancestors.add(value_id)

        try:
            if value_type is list:
                return all(_check(item, ancestors) for item in value)

            return all(
                type(key) is str and _check(item, ancestors)
                for key, item in value.items()
            )

        finally:
            ancestors.discard(value_id)

    # Callables, tuples, sets, bytes, builtin subclasses and arbitrary
    # objects are refused by the encoder.
    return False
