"""
목적:
- 전략 데모의 공개 심볼을 정의한다.

설명:
- 결제 전략 인터페이스, 구체 전략, 장바구니 컨텍스트를 외부에 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/pattern_demos/strategy/payment.py
"""

from .payment import (
    CashPayment,
    CreditCardPayment,
    PaymentStrategy,
    PointPayment,
    ShoppingCart,
    main,
)

__all__ = [
    "PaymentStrategy",
    "CreditCardPayment",
    "CashPayment",
    "PointPayment",
    "ShoppingCart",
    "main",
]
