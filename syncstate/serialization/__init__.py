from .serialization_guard import (
    MAX_WIRE_INT,
    MIN_WIRE_INT,
    is_transmissible,
)

__all__ = [
    "MAX_WIRE_INT",
    "MIN_WIRE_INT",
    "is_transmissible",
]
