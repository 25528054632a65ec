"""Pytest configuration and fixtures."""

import json
import sys
import pytest
from pathlib import Path
from typing import Any, Callable

# Add src directory to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: 단위 테스트")


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """
    설정 파일 작성 헬퍼

    write_config(content, directory="conf", file_name="config.json")
    content가 str이면 그대로, 아니면 json.dumps 결과를 기록하고
    파일이 위치한 디렉토리를 반환합니다.
    """
    def _write(content: Any, directory: str = "conf", file_name: str = "config.json") -> Path:
        config_dir = tmp_path / directory
        config_dir.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content)
        (config_dir / file_name).write_text(text, encoding="utf-8")
        return config_dir

    return _write


@pytest.fixture
def make_store(write_config) -> Callable[[Any], Any]:
    """JSON 내용으로 바로 ConfigStore를 로드하는 헬퍼"""
    from config_store import load_config

    def _make(content: Any):
        config_dir = write_config(content)
        return load_config("config.json", [str(config_dir)])

    return _make
