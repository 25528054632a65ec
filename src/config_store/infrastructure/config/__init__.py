"""
Configuration Infrastructure

JSON 설정 파일 검색/로드와 타입 접근자
"""

from .env_utils import expand_env_vars
from .loader import JsonConfigLoader, load_config
from .store import ConfigStore

__all__ = [
    "expand_env_vars",
    "JsonConfigLoader",
    "load_config",
    "ConfigStore",
]
