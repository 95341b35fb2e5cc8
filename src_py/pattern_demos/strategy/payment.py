"""
목적:
- 알고리즘(전략)을 각각의 클래스로 캡슐화하고, 실행 시점에 교체해서 사용하게 한다.

설명:
- 쉬운 비유로는 '게임 캐릭터의 무기 교체'다. 캐릭터(Context)는 '공격'만 명령하고,
  실제 공격 방식은 들고 있는 무기(Strategy)가 결정한다.
- 처리 방식이 여러 가지일 때 if/elif 분기로 작성하면 새 방식이 추가될 때마다
  컨텍스트 코드를 수정해야 한다. 전략 패턴은 '어떻게'를 독립 클래스로 분리해
  컨텍스트 변경 없이 새 전략을 추가할 수 있게 한다.
- 장바구니는 자신이 카드로 결제할지 현금으로 결제할지 신경 쓰지 않고,
  결제 시점에 전달받은 전략에게 위임할 뿐이다.
- 모든 전략의 `pay()`는 결과 문구를 반환하고, 출력은 장바구니가 담당한다.

구성 요소:
- Strategy: 모든 결제 수단의 공통 인터페이스 (`PaymentStrategy`)
- ConcreteStrategy: 카드/현금/포인트 결제 (`CreditCardPayment`, `CashPayment`, `PointPayment`)
- Context: 전략을 사용하는 장바구니 (`ShoppingCart`)

디자인 패턴:
- 전략(Strategy).

참조:
- src_py/pattern_demos/decorator/beverage.py
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class PaymentStrategy(ABC):
    """결제 수단 공통 인터페이스."""

    @abstractmethod
    def pay(self, amount: int) -> str:
        """amount원을 결제하고 결과 문구를 반환한다."""


class CreditCardPayment(PaymentStrategy):
    def __init__(self, name: str, card_number: str) -> None:
        self._name = name
        self._card_number = card_number

    def pay(self, amount: int) -> str:
        return "\n".join(
            [
                " --- 신용카드 결제 --- ",
                f"결제자: {self._name}",
                f"{amount}원을 신용카드({self._card_number})로 결제합니다.",
            ]
        )


class CashPayment(PaymentStrategy):
    def __init__(self, tendered: int) -> None:
        self._tendered = tendered

    def change_for(self, amount: int) -> int:
        """거스름돈을 계산한다. 받은 금액이 부족하면 음수가 된다."""
        return self._tendered - amount

    def pay(self, amount: int) -> str:
        change = self.change_for(amount)
        if change < 0:
            detail = f"{self._tendered}원을 받았습니다. {-change}원이 부족합니다."
        else:
            detail = f"{self._tendered}원을 받았습니다. 거스름돈 {change}원을 돌려줍니다."
        return "\n".join([" --- 현금 결제 --- ", detail])


class PointPayment(PaymentStrategy):
    def __init__(self, points: int) -> None:
        self._points = points

    def pay(self, amount: int) -> str:
        if amount > self._points:
            detail = (
                f" --- 포인트 {self._points}차감 합니다. "
                f"남은 금액 {amount - self._points}만큼 결제해주세요."
            )
        else:
            detail = (
                f" --- 포인트 {amount}차감 합니다. "
                f"남은 포인트는 {self._points - amount}입니다."
            )
        return "\n".join([" --- 포인트 결제 --- ", detail])


class ShoppingCart:
    """상품을 담고 총액을 계산하며, 결제는 전달받은 전략에 위임하는 컨텍스트."""

    def __init__(self) -> None:
        self._items: dict[str, int] = {}

    @property
    def items(self) -> dict[str, int]:
        return dict(self._items)

    def add_item(self, item: str, price: int) -> None:
        # 같은 상품을 다시 담으면 마지막 가격으로 덮어쓴다
        self._items[item] = price
        logger.debug("장바구니 변경: %s=%d", item, price)
        print(f"장바구니 아이템 추가: {item}({price}원)")

    def calculate_total(self) -> int:
        return sum(self._items.values())

    def checkout(self, payment_strategy: PaymentStrategy) -> str:
        total = self.calculate_total()
        print("------------------------")
        print(f"총 결제 금액: {total}원")

        result = payment_strategy.pay(total)
        logger.debug("결제 위임 완료: strategy=%s total=%d", type(payment_strategy).__name__, total)
        print(result)
        return result


def main() -> None:
    cart = ShoppingCart()
    cart.add_item("옷", 10000)
    cart.add_item("신발", 20000)
    cart.add_item("바지", 30000)

    # 결제 시점에 원하는 결제 수단을 골라 전달한다
    cart.checkout(CreditCardPayment("손님", "1234-5678-9012"))
    cart.checkout(CashPayment(100000))
    cart.checkout(PointPayment(100000))


if __name__ == "__main__":
    main()
