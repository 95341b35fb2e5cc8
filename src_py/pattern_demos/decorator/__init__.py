"""
목적:
- 데코레이터 데모의 공개 심볼을 정의한다.

설명:
- 커피 컴포넌트, 기본 음료, 토핑 데코레이터를 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/pattern_demos/decorator/beverage.py
"""

from .beverage import (
    Americano,
    Coffee,
    CoffeeDecorator,
    Latte,
    Milk,
    Shot,
    Syrup,
    WhippedCream,
    main,
)

__all__ = [
    "Coffee",
    "Americano",
    "Latte",
    "CoffeeDecorator",
    "Milk",
    "Syrup",
    "WhippedCream",
    "Shot",
    "main",
]
