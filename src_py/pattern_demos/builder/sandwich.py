"""
목적:
- 복잡한 객체를 생성하는 과정과 표현 방법을 분리해,
  동일한 생성 절차에서 다양한 표현의 객체를 만든다.

설명:
- 쉽게 말해 "옵션이 많은 제품을 주문 제작하는 과정"이다. 예) 써브웨이 샌드위치 주문
- 생성자 매개변수가 너무 많을 때(특히 대부분이 선택적일 때),
  생성 과정이 여러 단계로 나뉘어 순차적으로 진행되어야 할 때,
  생성할 객체가 불변 객체이기를 원할 때 사용한다.
- 필수 재료 검증은 각 단계가 아니라 마지막 `build()`에서 한 번에 수행한다.

구성 요소:
- Product: 빌더를 통해 최종적으로 만들어질 객체 (`SubwaySandwich`)
- Builder: 단계별 API를 정의하는 인터페이스. "빵 선택하기", "야채 추가하기",
  "소스 뿌리기", "완성하기" 같은 단계 목록 (`SandwichBuilder`)
- ConcreteBuilder: 실제로 재료를 올리고 결과물을 반환하는 "직원" (`SubwayEmployee`)
- Director: 정해진 순서대로 빌더를 호출하는 "숙련된 직원" (`SandwichArtist`, 선택 요소)

디자인 패턴:
- 빌더(Builder) + 디렉터(Director).

참조:
- src_py/pattern_demos/exceptions.py
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from pattern_demos.exceptions import SandwichBuildError

logger = logging.getLogger(__name__)


class SubwaySandwich(BaseModel):
    """완성된 샌드위치 불변 모델."""

    model_config = ConfigDict(frozen=True)

    bread: str = Field(min_length=1)
    cheese: str | None = Field(default=None)
    main_topping: str = Field(min_length=1)
    vegetables: tuple[str, ...] = Field(default=())
    sauces: tuple[str, ...] = Field(default=())

    def summary_lines(self) -> list[str]:
        """주문서 출력 줄 목록을 만든다. 비어 있는 항목은 생략한다."""
        lines = [
            "--- 주문하신 샌드위치가 나왔습니다 ---",
            f"빵: {self.bread}",
            f"메인 토핑: {self.main_topping}",
        ]
        if self.cheese is not None:
            lines.append(f"치즈: {self.cheese}")
        if self.vegetables:
            lines.append(f"야채: {', '.join(self.vegetables)}")
        if self.sauces:
            lines.append(f"소스: {', '.join(self.sauces)}")
        lines.append("------------------------------------")
        return lines

    def summary(self) -> None:
        for line in self.summary_lines():
            print(line)


class SandwichBuilder(ABC):
    """샌드위치 주문 절차를 정의한 인터페이스."""

    @abstractmethod
    def set_bread(self, bread: str) -> SandwichBuilder: ...

    @abstractmethod
    def set_main_topping(self, main_topping: str) -> SandwichBuilder: ...

    @abstractmethod
    def set_cheese(self, cheese: str) -> SandwichBuilder: ...

    @abstractmethod
    def add_vegetable(self, vegetable: str) -> SandwichBuilder: ...

    @abstractmethod
    def add_sauce(self, sauce: str) -> SandwichBuilder: ...

    @abstractmethod
    def build(self) -> SubwaySandwich: ...


class SubwayEmployee(SandwichBuilder):
    """주문 절차에 따라 재료를 올리는 써브웨이 직원."""

    def __init__(self) -> None:
        self._bread: str | None = None
        self._cheese: str | None = None
        self._main_topping: str | None = None
        self._vegetables: list[str] = []
        self._sauces: list[str] = []

    def set_bread(self, bread: str) -> SubwayEmployee:
        self._bread = bread
        logger.debug("빵 선택: %s", bread)
        return self

    def set_main_topping(self, main_topping: str) -> SubwayEmployee:
        self._main_topping = main_topping
        logger.debug("메인 토핑 선택: %s", main_topping)
        return self

    def set_cheese(self, cheese: str) -> SubwayEmployee:
        self._cheese = cheese
        logger.debug("치즈 선택: %s", cheese)
        return self

    def add_vegetable(self, vegetable: str) -> SubwayEmployee:
        self._vegetables.append(vegetable)
        logger.debug("야채 추가: %s", vegetable)
        return self

    def add_sauce(self, sauce: str) -> SubwayEmployee:
        self._sauces.append(sauce)
        logger.debug("소스 추가: %s", sauce)
        return self

    def build(self) -> SubwaySandwich:
        """현재까지 쌓인 재료로 샌드위치를 완성한다.

        빈 문자열은 선택하지 않은 것으로 본다.
        빌더 상태는 초기화하지 않는다. 반환된 샌드위치는 이후 빌더 호출의 영향을 받지 않는다.
        """
        if not self._bread:
            raise SandwichBuildError("bread", "빵(bread)은 필수입니다")
        if not self._main_topping:
            raise SandwichBuildError("main_topping", "메인 토핑(main_topping)은 필수입니다")

        return SubwaySandwich(
            bread=self._bread,
            cheese=self._cheese,
            main_topping=self._main_topping,
            vegetables=tuple(self._vegetables),
            sauces=tuple(self._sauces),
        )


class SandwichArtist:
    """정해진 레시피를 알고 빌더에게 지시하는 숙련된 직원."""

    def make_italian_bmt(self, builder: SandwichBuilder) -> SubwaySandwich:
        print("숙련된 직원이 비엠티를 만듭니다.")
        return (
            builder.set_bread("허니오트")
            .set_main_topping("페퍼로니, 살라미, 햄")
            .set_cheese("슈레드 치즈")
            .add_vegetable("양상추")
            .add_vegetable("토마토")
            .add_vegetable("피망")
            .add_sauce("스위트 어니언")
            .add_sauce("랜치")
            .build()
        )

    def make_egg_mayo(self, builder: SandwichBuilder) -> SubwaySandwich:
        print("숙련된 직원이 에그마요를 만듭니다.")
        return (
            builder.set_bread("플랫브레드")
            .set_main_topping("에그마요")
            .set_cheese("아메리칸 치즈")
            .add_vegetable("양상추")
            .add_vegetable("오이")
            .add_sauce("마요네즈")
            .build()
        )


def main() -> None:
    # 방법 1. 디렉터를 통해 정해진 레시피로 주문
    artist = SandwichArtist()
    italian_bmt = artist.make_italian_bmt(SubwayEmployee())
    italian_bmt.summary()

    # 방법 2. 손님이 빌더(직원)에게 직접 하나하나 주문
    print("\n===== 나만의 커스텀 샌드위치 주문 =====")
    custom_sandwich = (
        SubwayEmployee()
        .set_bread("파마산 오레가노")
        .set_main_topping("로티세리 치킨")
        .add_vegetable("할라피뇨")
        .add_vegetable("올리브")
        .add_sauce("소금")
        .add_sauce("후추")
        .build()
    )
    custom_sandwich.summary()


if __name__ == "__main__":
    main()
