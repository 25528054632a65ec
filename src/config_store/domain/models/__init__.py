"""
Domain Models

설정 값 도메인 모델
"""

from .value import ValueKind, ConfigValue

__all__ = [
    "ValueKind",
    "ConfigValue",
]
