"""
목적:
- 팩토리 메서드 데모의 공개 심볼을 정의한다.

설명:
- 커피 제품 인터페이스와 구체 제품, 팩토리를 외부에 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/pattern_demos/factory_method/coffee.py
"""

from .coffee import Americano, Coffee, CoffeeFactory, Latte, main

__all__ = ["Coffee", "Latte", "Americano", "CoffeeFactory", "main"]
