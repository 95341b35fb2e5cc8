"""
목적:
- 객체 생성 작업을 팩토리에 위임하고, 호출자는 제품의 구체 타입을 모른 채 사용하게 한다.

설명:
- 비유하자면 '커피 주문받는 바리스타'다. 손님(클라이언트)이 "라떼 주세요"라고 말하면
  바리스타(팩토리)가 라떼를 만드는 과정을 알아서 처리해 완성된 라떼(객체)를 건넨다.
- 생성할 객체의 종류가 많거나 계속 추가될 가능성이 있을 때,
  생성 코드를 비즈니스 로직과 분리해 결합도를 낮추고 싶을 때,
  어떤 객체를 만들지 런타임에 결정해야 할 때 사용한다.
- 메뉴에 없는 주문은 예외가 아니라 `None`으로 돌려주고, 처리 방법은 호출자가 정한다.
- 카푸치노가 추가되더라도 `Coffee`를 구현한 클래스 하나와 `_MENU` 항목 하나만 더하면 된다.
  팩토리를 사용하는 기존 코드는 수정하지 않는다(개방-폐쇄 원칙).

구성 요소:
- Product: 생성될 객체들의 공통 인터페이스 (`Coffee`)
- ConcreteProduct: 실제로 만들어지는 제품 (`Latte`, `Americano`)
- Creator / Factory Method: 어떤 제품을 만들지 결정해 반환 (`CoffeeFactory.create`)

디자인 패턴:
- 팩토리 메서드(Factory Method).

참조:
- src_py/pattern_demos/decorator/beverage.py
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Coffee(ABC):
    """팩토리가 만들어 내는 커피 제품 인터페이스."""

    name: str

    @abstractmethod
    def brewing(self) -> str:
        """제조 안내 문구를 출력하고 반환한다."""


class Latte(Coffee):
    name = "라떼"

    def brewing(self) -> str:
        message = f"{self.name}를 만듭니다. 우유를 듬뿍 넣어주세요!"
        print(message)
        return message


class Americano(Coffee):
    name = "아메리카노"

    def brewing(self) -> str:
        message = f"{self.name}를 만듭니다. 샷을 추가하고 뜨거운 물을 부어주세요."
        print(message)
        return message


class CoffeeFactory:
    """주문 문자열로 커피 제품을 생성하는 팩토리."""

    _MENU: dict[str, type[Coffee]] = {
        "LATTE": Latte,
        "AMERICANO": Americano,
    }

    def create(self, coffee_type: str) -> Coffee | None:
        """대소문자 구분 없이 주문을 해석해 새 제품을 반환한다. 메뉴에 없으면 None."""
        product_cls = self._MENU.get(coffee_type.upper())
        if product_cls is None:
            logger.debug("메뉴에 없는 주문: %s", coffee_type)
            return None
        logger.debug("커피 생성: %s -> %s", coffee_type, product_cls.__name__)
        return product_cls()


def main() -> None:
    factory = CoffeeFactory()

    # 손님은 Latte 클래스를 직접 알 필요 없이 팩토리에 요청만 한다
    my_coffee = factory.create("Latte")
    if my_coffee is not None:
        my_coffee.brewing()

    print("-----")

    your_coffee = factory.create("Americano")
    if your_coffee is not None:
        your_coffee.brewing()

    print("-----")

    unknown = factory.create("Mocha")
    if unknown is None:
        print("Mocha는 메뉴에 없습니다.")


if __name__ == "__main__":
    main()
