"""
목적:
- 디자인 패턴 데모 패키지의 공개 진입점을 제공한다.

설명:
- 싱글톤, 데코레이터, 빌더, 팩토리 메서드, 전략 다섯 가지 데모는 서로 독립적이다.
- 설정/예외/실행기를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/pattern_demos/runner.py
"""

from .config.models import DEMO_NAMES, RunnerConfig, SettingsDefaults
from .exceptions import ConfigurationError, PatternDemoError, SandwichBuildError
from .runner import DEMOS, build_runner_config, run_demos
from .version import __version__

__all__ = [
    "__version__",
    "DEMOS",
    "DEMO_NAMES",
    "build_runner_config",
    "run_demos",
    "RunnerConfig",
    "SettingsDefaults",
    "PatternDemoError",
    "ConfigurationError",
    "SandwichBuildError",
]
