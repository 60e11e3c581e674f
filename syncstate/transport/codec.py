from typing import Any

import orjson

from syncstate.errors import TransportEncodeError


# Values that orjson would silently reshape (dataclasses, datetimes,
# subclasses of builtins) are refused so that what arrives equals what
# was sent.
ENCODE_OPTIONS = (
    orjson.OPT_PASSTHROUGH_DATACLASS
    | orjson.OPT_PASSTHROUGH_DATETIME
    | orjson.OPT_PASSTHROUGH_SUBCLASS
)


def encode_value(value: Any) -> bytes:
    try:
        return orjson.dumps(value, option=ENCODE_OPTIONS)

    except TypeError as err:
        raise TransportEncodeError(
            f"Value of type {type(value).__name__} cannot cross the bridge: {err}"
        ) from err


def decode_value(data: bytes) -> Any:
    return orjson.loads(data)
