import pytest

from pattern_demos.decorator import Americano, CoffeeDecorator, Latte, Milk, Shot, Syrup, WhippedCream, main
from pattern_demos.decorator.beverage import _Topping


def test_base_beverages() -> None:
    assert Americano().get_cost() == 2000
    assert Americano().get_description() == "Americano"
    assert Latte().get_cost() == 3000
    assert Latte().get_description() == "Latte"


def test_cost_is_independent_of_wrapping_order() -> None:
    a = WhippedCream(Syrup(Milk(Latte())))
    b = Milk(WhippedCream(Syrup(Latte())))

    assert a.get_cost() == b.get_cost() == 3000 + 700 + 300 + 500


def test_description_follows_wrapping_order() -> None:
    assert Syrup(Milk(Latte())).get_description() == "Latte, Milk, Syrup"
    assert Milk(Syrup(Latte())).get_description() == "Latte, Syrup, Milk"


def test_same_decorator_can_wrap_twice() -> None:
    double_shot = Shot(Shot(Americano()))

    assert double_shot.get_cost() == 3000
    assert double_shot.get_description() == "Americano, Shot, Shot"


def test_wrapped_object_is_shared_and_unchanged() -> None:
    latte = Latte()
    decorated = Milk(latte)

    assert decorated.wrapped is latte
    assert latte.get_cost() == 3000
    assert latte.get_description() == "Latte"


def test_plain_decorator_delegates() -> None:
    plain = CoffeeDecorator(Americano())

    assert plain.get_cost() == 2000
    assert plain.get_description() == "Americano"


def test_topping_without_cost_and_label_cannot_be_created() -> None:
    class Foam(_Topping):
        pass

    with pytest.raises(TypeError):
        Foam(Latte())


def test_main_narration(capsys) -> None:
    main()

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Americano : 2000원",
        "Latte, Syrup : 3300원",
        "Latte, Milk, Syrup, Whipped Cream : 4500원",
        "",
        "--- 원본 음료는 변경되지 않는다 ---",
        "Americano : 2000원",
        "Americano, Shot, Shot : 3000원",
    ]
