"""
목적:
- 기존 객체를 감싸서(Wrapping) 새로운 행동을 추가하는 패턴을 보여준다.

설명:
- 상속으로 기능을 확장하는 대신, 객체를 다른 객체로 감싸서
  원래 하던 일에 추가 작업을 덧붙인다.
- 쉬운 비유로는 '선물 포장'이다. 선물(원본 객체)을 포장지(데코레이터)로 감싸고,
  그 위에 리본(또 다른 데코레이터)을 묶는다. 포장지와 리본은 선물 자체를 바꾸지 않는다.
- 기능 조합마다 서브클래스를 만들면 클래스가 폭발한다(커피+우유, 커피+시럽, 커피+우유+시럽...).
- 개방-폐쇄 원칙: 기존 Component/ConcreteComponent를 수정하지 않고 새 토핑을 추가할 수 있다.
- 단일 책임 원칙: 핵심 기능(음료)과 부가 기능(토핑)의 역할이 분리된다.

구성 요소:
- Component: 장식될 객체와 장식하는 객체 모두의 공통 인터페이스 (`Coffee`)
- ConcreteComponent: 장식될 원본 객체 (`Americano`, `Latte`)
- Decorator: Component를 감싸는 추상 클래스, 내부에 Component 참조를 가진다 (`CoffeeDecorator`)
- ConcreteDecorator: 실제로 새로운 책임을 추가하는 클래스 (`Milk`, `Syrup`, `WhippedCream`, `Shot`)

디자인 패턴:
- 데코레이터(Decorator).

참조:
- src_py/pattern_demos/factory_method/coffee.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Coffee(ABC):
    """모든 커피와 토핑이 공유하는 인터페이스."""

    @abstractmethod
    def get_cost(self) -> int: ...

    @abstractmethod
    def get_description(self) -> str: ...


class Americano(Coffee):
    def get_cost(self) -> int:
        return 2000

    def get_description(self) -> str:
        return "Americano"


class Latte(Coffee):
    def get_cost(self) -> int:
        return 3000

    def get_description(self) -> str:
        return "Latte"


class CoffeeDecorator(Coffee):
    """감싼 커피에 모든 호출을 위임하는 데코레이터 베이스."""

    def __init__(self, coffee: Coffee) -> None:
        self._coffee = coffee

    @property
    def wrapped(self) -> Coffee:
        return self._coffee

    def get_cost(self) -> int:
        return self._coffee.get_cost()

    def get_description(self) -> str:
        return self._coffee.get_description()


class _Topping(CoffeeDecorator):
    # 하위 클래스는 추가 금액과 설명을 반드시 정의한다
    @property
    @abstractmethod
    def extra_cost(self) -> int: ...

    @property
    @abstractmethod
    def label(self) -> str: ...

    def get_cost(self) -> int:
        return self._coffee.get_cost() + self.extra_cost

    def get_description(self) -> str:
        return f"{self._coffee.get_description()}, {self.label}"


class Milk(_Topping):
    extra_cost = 500
    label = "Milk"


class Syrup(_Topping):
    extra_cost = 300
    label = "Syrup"


class WhippedCream(_Topping):
    extra_cost = 700
    label = "Whipped Cream"


class Shot(_Topping):
    extra_cost = 500
    label = "Shot"


def _print_order(coffee: Coffee) -> None:
    print(f"{coffee.get_description()} : {coffee.get_cost()}원")


def main() -> None:
    # 기본 아메리카노
    americano = Americano()
    _print_order(americano)

    # 라떼에 시럽 추가
    latte_with_syrup = Syrup(Latte())
    _print_order(latte_with_syrup)

    # 포장 위에 리본을 묶듯 여러 겹으로 감쌀 수 있다
    fancy_latte = WhippedCream(Syrup(Milk(Latte())))
    _print_order(fancy_latte)

    # 원본 객체는 그대로다
    print("\n--- 원본 음료는 변경되지 않는다 ---")
    _print_order(americano)
    _print_order(Shot(Shot(americano)))


if __name__ == "__main__":
    main()
