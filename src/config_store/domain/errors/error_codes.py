"""에러 코드 정의

config-store의 모든 에러를 카테고리별로 분류하여 관리합니다.
"""

from enum import Enum


class ErrorCode(Enum):
    """config-store 에러 코드

    에러 코드는 4자리 숫자로 구성되며, 앞 자리는 카테고리를 나타냅니다.

    Categories:
        20xx: 설정 파일 로드 관련 에러
        30xx: 키 조회(Accessor) 관련 에러
        40xx: 키 검증 관련 에러
    """

    # ==================== Load 관련 (2000-2999) ====================
    CONFIG_FILE_NOT_FOUND = 2001
    """검색 경로 어디에도 설정 파일이 없음"""

    CONFIG_READ_FAILED = 2002
    """설정 파일은 존재하지만 읽을 수 없음"""

    CONFIG_PARSE_FAILED = 2003
    """JSON 형식 오류 또는 최상위 값이 객체가 아님"""

    # ==================== Access 관련 (3000-3999) ====================
    KEY_NOT_FOUND = 3001
    """조회한 키가 없음"""

    TYPE_MISMATCH = 3002
    """값의 타입이 요청한 타입과 다르거나 변환 불가"""

    # ==================== Validation 관련 (4000-4999) ====================
    KEY_MISSING_OR_EMPTY = 4001
    """필수 키가 없거나 null"""

    KEY_EMPTY_STRING = 4002
    """필수 키의 값이 빈 문자열"""

    def __str__(self) -> str:
        """에러 코드를 문자열로 반환 (예: 'KEY_NOT_FOUND (3001)')"""
        return f"{self.name} ({self.value})"

    @property
    def code(self) -> int:
        """에러 코드 숫자 반환"""
        return self.value

    @property
    def category(self) -> str:
        """에러 카테고리 반환"""
        code = self.value
        if 2000 <= code < 3000:
            return "Load"
        elif 3000 <= code < 4000:
            return "Access"
        elif 4000 <= code < 5000:
            return "Validation"
        else:
            return "Other"
