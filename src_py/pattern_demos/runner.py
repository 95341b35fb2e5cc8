"""
목적:
- 다섯 가지 패턴 데모의 진입점을 이름으로 찾아 순서대로 실행한다.

설명:
- 각 데모는 서로 데이터를 주고받지 않는 독립 실행 단위다.
- 싱글톤 데모는 전역 상태를 바꾸므로 실행 전에 기본값으로 되돌린다.
- 설정 검증 실패는 `ConfigurationError`로 변환한다.

디자인 패턴:
- 레지스트리(Registry) + 드라이버(Driver).

참조:
- scripts/run-demo.py
- src_py/pattern_demos/config/models.py
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from pydantic import ValidationError

from pattern_demos import builder, decorator, factory_method, singleton, strategy
from pattern_demos.config.models import RunnerConfig
from pattern_demos.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEMOS: dict[str, Callable[[], None]] = {
    "singleton": singleton.main,
    "decorator": decorator.main,
    "builder": builder.main,
    "factory_method": factory_method.main,
    "strategy": strategy.main,
}


def build_runner_config(patterns: Sequence[str], log_level: str = "WARNING") -> RunnerConfig:
    """입력값을 검증해 실행기 설정을 생성한다."""
    try:
        return RunnerConfig(patterns=list(patterns), log_level=log_level)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def run_demos(config: RunnerConfig) -> list[str]:
    """설정된 데모를 순서대로 실행하고 실행한 이름 목록을 반환한다."""
    executed: list[str] = []
    for name in config.patterns:
        if name == "singleton":
            singleton.get_settings().reset()

        logger.info("데모 실행 시작: %s", name)
        print(f"\n========== {name} ==========")
        DEMOS[name]()
        executed.append(name)
    return executed
