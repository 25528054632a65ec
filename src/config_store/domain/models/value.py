"""
설정 값 도메인 모델

ValueKind: JSON 값의 종류 (Enum)
ConfigValue: 종류 태그가 붙은 설정 값 (tagged union)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """JSON 값의 종류"""
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class ConfigValue:
    """
    설정 값 도메인 모델

    json.loads 결과를 종류 태그와 함께 보관합니다.
    중첩 구조(array, object)는 해석하지 않고 그대로 전달합니다.

    Attributes:
        kind: 값의 종류
        raw: 디코딩된 원본 값
    """
    kind: ValueKind
    raw: Any

    @classmethod
    def from_json(cls, raw: Any) -> "ConfigValue":
        """
        디코딩된 JSON 값에서 객체 생성

        Args:
            raw: json 모듈이 반환한 값

        Returns:
            ConfigValue 인스턴스

        Raises:
            TypeError: JSON으로 표현할 수 없는 값인 경우
        """
        # bool은 int의 서브클래스이므로 숫자보다 먼저 확인
        if raw is None:
            kind = ValueKind.NULL
        elif isinstance(raw, bool):
            kind = ValueKind.BOOL
        elif isinstance(raw, (int, float)):
            kind = ValueKind.NUMBER
        elif isinstance(raw, str):
            kind = ValueKind.STRING
        elif isinstance(raw, list):
            kind = ValueKind.ARRAY
        elif isinstance(raw, dict):
            kind = ValueKind.OBJECT
        else:
            raise TypeError(f"JSON 값이 아닙니다: {type(raw).__name__}")
        return cls(kind=kind, raw=raw)

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    @property
    def is_empty_string(self) -> bool:
        return self.kind is ValueKind.STRING and self.raw == ""
