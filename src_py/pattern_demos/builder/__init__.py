"""
목적:
- 빌더 데모의 공개 심볼을 정의한다.

설명:
- 샌드위치 제품, 빌더 인터페이스, 구체 빌더, 디렉터를 외부에 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/pattern_demos/builder/sandwich.py
"""

from .sandwich import SandwichArtist, SandwichBuilder, SubwayEmployee, SubwaySandwich, main

__all__ = [
    "SubwaySandwich",
    "SandwichBuilder",
    "SubwayEmployee",
    "SandwichArtist",
    "main",
]
