"""
설정 저장소 구현

ConfigStore: 로드된 JSON 설정에 대한 읽기 전용 타입 접근자
"""

import copy
import math
import re
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional, Union

from config_store.domain.errors import (
    AccessError,
    ErrorCode,
    handle_error,
)
from config_store.domain.models import ConfigValue, ValueKind
from config_store.infrastructure.logging import get_logger

logger = get_logger(__name__, component="ConfigStore")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# 부호 + 10진수 숫자만 허용 (공백, '_' 불가)
_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")


class ConfigStore:
    """
    JSON 설정 저장소

    키 -> ConfigValue 매핑을 한 번 생성한 뒤 변경하지 않습니다.
    setter, 저장, reload 기능은 없습니다.

    Example:
        >>> store = ConfigStore.load("config.json", ["$HOME/.app", "/etc/app"])
        >>> store.get_int("port")
        8080
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        source_path: Optional[Union[str, Path]] = None,
    ):
        """
        Args:
            data: 디코딩된 JSON 최상위 객체
            source_path: 로드한 파일 경로 (직접 생성 시 None)
        """
        # 중첩 list/dict까지 복사하여 원본 변경이 저장소에 반영되지 않도록 함
        values = {
            key: ConfigValue.from_json(copy.deepcopy(raw)) for key, raw in data.items()
        }
        self._data: Mapping[str, ConfigValue] = MappingProxyType(values)
        self._source_path = Path(source_path) if source_path is not None else None

    @classmethod
    def load(
        cls,
        file_name: str,
        search_paths: Iterable[Union[str, Path]],
    ) -> "ConfigStore":
        """검색 경로에서 설정 파일을 찾아 로드 (load_config 참고)"""
        from .loader import load_config
        return load_config(file_name, search_paths)

    @property
    def source_path(self) -> Optional[Path]:
        return self._source_path

    # ==================== 읽기 전용 컨테이너 ====================

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def keys(self):
        return self._data.keys()

    def get_value(self, key: str) -> ConfigValue:
        """
        키에 해당하는 ConfigValue 반환

        Raises:
            KeyNotFoundError: 키가 없을 경우
        """
        try:
            value = self._data[key]
        except KeyError:
            raise handle_error(ErrorCode.KEY_NOT_FOUND, key=key) from None
        if value.kind in (ValueKind.ARRAY, ValueKind.OBJECT):
            return ConfigValue(kind=value.kind, raw=copy.deepcopy(value.raw))
        return value

    def __repr__(self) -> str:
        return f"ConfigStore(keys={len(self._data)}, source_path={self._source_path!r})"

    # ==================== String ====================

    def get_string_strict(self, key: str) -> str:
        """
        문자열 값 조회

        Raises:
            KeyNotFoundError: 키가 없을 경우
            TypeMismatchError: 값이 문자열이 아닐 경우
        """
        value = self.get_value(key)
        if value.kind is ValueKind.STRING:
            return value.raw
        raise self._type_mismatch(key, "string", value)

    def get_string(self, key: str) -> str:
        """문자열 값 조회 (실패 시 "")"""
        try:
            return self.get_string_strict(key)
        except AccessError as e:
            self._log_fallback(e)
            return ""

    # ==================== Int ====================

    def get_int_strict(self, key: str) -> int:
        """
        정수 값 조회

        변환 규칙:
        - number: 0 방향으로 버림 (3.7 -> 3, -3.7 -> -3)
        - string: 10진수 정수 파싱 ("8888" -> 8888), 실패 시 TypeMismatchError
        - 그 외: TypeMismatchError

        결과는 64비트 부호 있는 정수 범위여야 합니다.

        Raises:
            KeyNotFoundError: 키가 없을 경우
            TypeMismatchError: 정수로 변환할 수 없을 경우
        """
        value = self.get_value(key)

        if value.kind is ValueKind.NUMBER:
            raw = value.raw
            if isinstance(raw, float) and not math.isfinite(raw):
                raise self._type_mismatch(key, "int", value)
            result = math.trunc(raw)
        elif value.kind is ValueKind.STRING:
            if not _DECIMAL_INT.fullmatch(value.raw):
                raise self._type_mismatch(key, "int", value)
            result = int(value.raw, 10)
        else:
            # bool, null, array, object
            raise self._type_mismatch(key, "int", value)

        if not INT64_MIN <= result <= INT64_MAX:
            raise self._type_mismatch(key, "int", value)
        return result

    def get_int(self, key: str) -> int:
        """정수 값 조회 (실패 시 0)"""
        try:
            return self.get_int_strict(key)
        except AccessError as e:
            self._log_fallback(e)
            return 0

    # ==================== Bool ====================

    def get_bool_strict(self, key: str) -> bool:
        """
        불리언 값 조회

        문자열/숫자에서의 변환은 하지 않습니다 ("true" -> TypeMismatchError).

        Raises:
            KeyNotFoundError: 키가 없을 경우
            TypeMismatchError: 값이 불리언이 아닐 경우
        """
        value = self.get_value(key)
        if value.kind is ValueKind.BOOL:
            return value.raw
        raise self._type_mismatch(key, "bool", value)

    def get_bool(self, key: str) -> bool:
        """불리언 값 조회 (실패 시 False)"""
        try:
            return self.get_bool_strict(key)
        except AccessError as e:
            self._log_fallback(e)
            return False

    # ==================== 키 검증 ====================

    def check_keys(self, keys: Iterable[str]) -> None:
        """
        필수 키 검증

        주어진 순서대로 검사하여 첫 번째 실패에서 즉시 예외를 발생시킵니다.
        0, false, 빈 배열/객체는 유효한 값으로 봅니다.

        Args:
            keys: 검증할 키 목록

        Raises:
            ValidationError: 키가 없거나 null이거나 빈 문자열일 경우
        """
        for key in keys:
            value = self._data.get(key)
            if value is None or value.is_null:
                raise handle_error(ErrorCode.KEY_MISSING_OR_EMPTY, key=key)
            if value.is_empty_string:
                raise handle_error(ErrorCode.KEY_EMPTY_STRING, key=key)

    # ==================== 내부 헬퍼 ====================

    @staticmethod
    def _type_mismatch(key: str, expected: str, value: ConfigValue) -> AccessError:
        return handle_error(
            ErrorCode.TYPE_MISMATCH,
            key=key,
            expected=expected,
            actual=value.kind.value,
        )

    @staticmethod
    def _log_fallback(error: AccessError) -> None:
        logger.debug(
            "Falling back to zero value",
            key=error.key,
            error_code=error.error_code.name,
        )
