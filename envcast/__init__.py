"""
envcast - deserialize environment variables into typed pydantic models.

Usage:
    from pydantic import BaseModel
    from envcast import deserialize_from_env

    class Config(BaseModel):
        port: int
        debug: bool = False
        hosts: list[str]

    config = deserialize_from_env(Config)
"""

from .api import deserialize_from_env, deserialize_from_iter, with_prefix
from .environment import read_environment
from .exceptions import CustomError, EnvcastError, MissingValueError
from .prefixed import PrefixedSource

__version__ = "0.1.0"

__all__ = [
    "deserialize_from_env",
    "deserialize_from_iter",
    "with_prefix",
    "PrefixedSource",
    "read_environment",
    "EnvcastError",
    "MissingValueError",
    "CustomError",
]
