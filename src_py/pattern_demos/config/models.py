"""
목적:
- 패턴 데모의 설정 인터페이스를 정의한다.

설명:
- 싱글톤 설정의 기본값과 데모 실행기 옵션을 값 객체로 관리한다.
- 로그 레벨은 표준 logging 레벨 이름으로만 허용한다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- scripts/run-demo.py
- src_py/pattern_demos/runner.py
- src_py/pattern_demos/singleton/settings.py
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

DemoName = Literal["singleton", "decorator", "builder", "factory_method", "strategy"]
DEMO_NAMES: tuple[str, ...] = get_args(DemoName)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class SettingsDefaults(BaseModel):
    """사용자 설정 싱글톤의 초기값 모델."""

    model_config = ConfigDict(frozen=True)

    theme: str = Field(default="Light", min_length=1)
    language: str = Field(default="Korean", min_length=1)


class RunnerConfig(BaseModel):
    """데모 실행기 설정 모델."""

    patterns: list[DemoName] = Field(default_factory=lambda: list(DEMO_NAMES), min_length=1)
    log_level: str = Field(default="WARNING")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: object) -> str:
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"지원하지 않는 로그 레벨입니다: {value}")
        return level
