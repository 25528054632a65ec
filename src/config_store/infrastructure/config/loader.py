"""
설정 로더 구현

JsonConfigLoader: 검색 경로 목록에서 JSON 설정 파일을 찾아 로드
"""

import json
import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from config_store.domain.errors import ErrorCode, handle_error
from config_store.infrastructure.logging import get_logger

from .env_utils import expand_env_vars
from .store import ConfigStore

logger = get_logger(__name__, component="ConfigLoader")

PathLike = Union[str, "os.PathLike[str]"]


def _reject_constant(name: str) -> None:
    """NaN, Infinity, -Infinity는 표준 JSON이 아니므로 거부"""
    raise ValueError(f"허용되지 않는 JSON 상수입니다: {name}")


class JsonConfigLoader:
    """
    JSON 설정 로더

    search_paths를 순서대로 검사하여 처음 존재하는 파일만 사용합니다.
    그 파일을 읽거나 파싱하지 못해도 이후 경로는 검사하지 않습니다.
    """

    def __init__(self, file_name: str, search_paths: Iterable[PathLike]):
        """
        Args:
            file_name: 설정 파일 이름 (예: "config.json")
            search_paths: 디렉토리 후보 목록 (우선순위 순, $VAR / ${VAR} 허용)
        """
        self.file_name = file_name
        self.search_paths: List[str] = [os.fspath(p) for p in search_paths]

    def candidates(self) -> List[Path]:
        """
        환경변수를 확장한 후보 파일 경로 목록

        Returns:
            search_paths와 같은 순서의 전체 파일 경로 리스트
        """
        return [
            Path(os.path.join(expand_env_vars(path), self.file_name))
            for path in self.search_paths
        ]

    def find(self) -> Optional[Path]:
        """
        처음으로 존재하는 후보 파일 경로 반환

        Returns:
            파일 경로 또는 None
        """
        for candidate in self.candidates():
            # 이름이 너무 길거나 접근 권한이 없는 경로도 "없음"으로 보고 다음 후보로
            try:
                candidate.stat()
            except OSError:
                continue
            logger.debug("Config file found", file_path=str(candidate))
            return candidate
        return None

    def load(self) -> ConfigStore:
        """
        설정 파일 로드

        Returns:
            ConfigStore 인스턴스

        Raises:
            NotFoundError: 어떤 검색 경로에도 파일이 없을 경우
            ReadError: 파일이 존재하지만 읽을 수 없을 경우
            ParseError: JSON 형식이 잘못되었거나 최상위 값이 객체가 아닐 경우
        """
        config_path = self.find()
        if config_path is None:
            raise handle_error(
                ErrorCode.CONFIG_FILE_NOT_FOUND,
                file_name=self.file_name,
                search_paths=list(self.search_paths),
                candidates=[str(c) for c in self.candidates()],
            )

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise handle_error(
                ErrorCode.CONFIG_PARSE_FAILED,
                original_error=e,
                file_path=str(config_path),
            ) from e
        except OSError as e:
            raise handle_error(
                ErrorCode.CONFIG_READ_FAILED,
                original_error=e,
                file_path=str(config_path),
            ) from e

        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            raise handle_error(
                ErrorCode.CONFIG_PARSE_FAILED,
                original_error=e,
                file_path=str(config_path),
            ) from e

        if not isinstance(data, dict):
            raise handle_error(
                ErrorCode.CONFIG_PARSE_FAILED,
                file_path=str(config_path),
                error=f"최상위 값이 객체가 아닙니다 ({type(data).__name__})",
            )

        store = ConfigStore(data, source_path=config_path)
        logger.info("Config loaded", file_path=str(config_path), key_count=len(store))
        return store


def load_config(file_name: str, search_paths: Iterable[PathLike]) -> ConfigStore:
    """
    검색 경로에서 설정 파일을 찾아 ConfigStore로 로드

    Args:
        file_name: 설정 파일 이름
        search_paths: 디렉토리 후보 목록 (우선순위 순)

    Returns:
        ConfigStore 인스턴스

    Raises:
        NotFoundError, ReadError, ParseError

    Example:
        >>> store = load_config("config.json", ["./config", "$HOME/.myapp"])
        >>> store.check_keys(["api_url", "port"])
    """
    return JsonConfigLoader(file_name, search_paths).load()
