"""
목적:
- 패턴 데모를 명령행에서 실행하는 드라이버 스크립트를 제공한다.

설명:
- 라이브러리 본체는 환경 변수를 직접 읽지 않는다.
- 이 스크립트가 인자와 `PATTERN_DEMOS_LOG_LEVEL`을 읽어 설정 객체를 만들고
  로깅을 구성한 뒤 데모를 실행한다.

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/pattern_demos/config/models.py
- src_py/pattern_demos/runner.py
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from pattern_demos import DEMO_NAMES, build_runner_config, run_demos


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="디자인 패턴 데모 드라이버")
    parser.add_argument(
        "--pattern",
        choices=[*DEMO_NAMES, "all"],
        default="all",
        help="실행할 데모 이름 (기본: all)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("PATTERN_DEMOS_LOG_LEVEL", "WARNING"),
        help="로그 레벨 (기본: PATTERN_DEMOS_LOG_LEVEL 또는 WARNING)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    patterns = list(DEMO_NAMES) if args.pattern == "all" else [args.pattern]
    config = build_runner_config(patterns, log_level=args.log_level)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    executed = run_demos(config)
    logging.getLogger("run-demo").info("실행 완료: %s", ", ".join(executed))
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except Exception as exc:  # noqa: BLE001
        print(f"[error] {exc}", file=sys.stderr)
        raise SystemExit(1)
