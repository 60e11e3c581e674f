from .env import Env, PrimaryType, parse_bool
from .load_env import load_env

__all__ = [
    "Env",
    "PrimaryType",
    "load_env",
    "parse_bool",
]
