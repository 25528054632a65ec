#!/usr/bin/env python3
"""
config-store 사용 예제.

검색 경로에서 설정 파일을 찾아 필수 키를 검증하고 타입 접근자로 값을 읽습니다.
"""

import json
import sys
import tempfile
from pathlib import Path

from config_store import (
    ConfigStoreError,
    TypeMismatchError,
    configure_structlog,
    load_config,
)


def main() -> int:
    configure_structlog(log_level="DEBUG", enable_json=False)

    with tempfile.TemporaryDirectory() as temp_dir:
        config_dir = Path(temp_dir) / "conf"
        config_dir.mkdir()
        (config_dir / "app.json").write_text(json.dumps({
            "api_url": "https://example.com",
            "port": "8080",
            "debug": True,
        }), encoding="utf-8")

        try:
            store = load_config("app.json", ["$APP_CONFIG_DIR", str(config_dir)])
            store.check_keys(["api_url", "port"])
        except ConfigStoreError as e:
            print(f"설정 오류: {e}", file=sys.stderr)
            return 1

        print("api_url:", store.get_string("api_url"))
        print("port:", store.get_int("port"))
        print("debug:", store.get_bool("debug"))
        print("timeout (기본값):", store.get_int("timeout"))

        try:
            store.get_bool_strict("port")
        except TypeMismatchError as e:
            print("strict 접근자 에러:", e)

    return 0


if __name__ == "__main__":
    sys.exit(main())
