"""
목적:
- 패턴 데모 패키지의 예외 타입을 표준화한다.

설명:
- 설정 오류와 빌더 필수값 누락을 명시적으로 구분해
  호출자가 처리 방식을 선택할 수 있게 한다.
- 팩토리의 알 수 없는 키는 예외가 아니라 `None`으로 표현한다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/pattern_demos/builder/sandwich.py
- src_py/pattern_demos/runner.py
"""


class PatternDemoError(Exception):
    """패턴 데모 공통 베이스 예외."""


class ConfigurationError(PatternDemoError):
    """설정값이 유효하지 않을 때 발생한다."""


class SandwichBuildError(PatternDemoError):
    """필수 재료 없이 샌드위치를 완성하려 할 때 발생한다."""

    def __init__(self, missing_field: str, message: str) -> None:
        super().__init__(message)
        self.missing_field = missing_field
