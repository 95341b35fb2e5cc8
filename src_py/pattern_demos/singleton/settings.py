"""
목적:
- 하나의 클래스가 단 하나의 인스턴스만 갖도록 보장하고,
  그 인스턴스에 대한 전역 접근점을 제공한다.

설명:
- 별도의 인스턴스 생성 없이 `get_settings()`로 바로 접근한다.
- 자원의 낭비를 막고 데이터의 일관성을 유지하는 데 사용된다.
- 주로 '환경 설정', '데이터베이스 연결 관리', '로깅 객체', '하드웨어 자원 접근' 등에서 사용된다.
- 파이썬 모듈은 그 자체로 한 번만 로드되므로, 모듈 전역 변수에
  인스턴스를 지연 생성해 두면 프로세스 전체에서 같은 객체를 공유한다.

디자인 패턴:
- 싱글톤(Singleton).

참조:
- src_py/pattern_demos/config/models.py
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from pattern_demos.config.models import SettingsDefaults

logger = logging.getLogger(__name__)


class UserSettings(BaseModel):
    """프로세스 전역 사용자 설정 모델."""

    model_config = ConfigDict(validate_assignment=True)

    theme: str = Field(min_length=1)
    language: str = Field(min_length=1)

    def print_settings(self) -> None:
        """현재 설정값을 표준 출력에 쓴다."""
        print(f"Current theme: {self.theme}")
        print(f"Current language: {self.language}")

    def reset(self, defaults: SettingsDefaults | None = None) -> None:
        """같은 인스턴스를 유지한 채 기본값으로 되돌린다."""
        defaults = defaults or SettingsDefaults()
        self.theme = defaults.theme
        self.language = defaults.language
        logger.debug("사용자 설정 초기화: theme=%s, language=%s", self.theme, self.language)


_instance: UserSettings | None = None


def get_settings() -> UserSettings:
    """전역 설정 인스턴스를 반환한다. 첫 호출에서만 생성한다."""
    global _instance
    if _instance is None:
        defaults = SettingsDefaults()
        _instance = UserSettings(theme=defaults.theme, language=defaults.language)
        logger.debug("사용자 설정 인스턴스 생성")
    return _instance


def check_current_settings() -> None:
    print("check_current_settings 함수에서 확인한 설정:")
    get_settings().print_settings()


def main() -> None:
    print("--- 초기 설정값 ---")
    # 별도의 인스턴스 생성 없이 바로 접근
    get_settings().print_settings()

    print("\n--- 테마를 Dark로 변경 ---")
    get_settings().theme = "Dark"

    # 다른 곳에서 접근해도 같은 객체를 보고 있으므로 변경값이 유지된다
    check_current_settings()

    settings1 = get_settings()
    settings2 = get_settings()
    print(f"\n두 변수는 같은 객체인가? {settings1 is settings2}")


if __name__ == "__main__":
    main()
