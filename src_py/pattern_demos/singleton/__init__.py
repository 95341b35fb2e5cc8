"""
목적:
- 싱글톤 데모의 공개 심볼을 정의한다.

설명:
- 프로세스 전역 설정 객체와 그 접근 함수를 외부에 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/pattern_demos/singleton/settings.py
"""

from .settings import UserSettings, check_current_settings, get_settings, main

__all__ = ["UserSettings", "check_current_settings", "get_settings", "main"]
