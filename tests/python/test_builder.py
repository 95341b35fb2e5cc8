import pytest
from pydantic import ValidationError

from pattern_demos.builder import SandwichArtist, SubwayEmployee, main
from pattern_demos.exceptions import SandwichBuildError


def test_build_requires_bread() -> None:
    builder = SubwayEmployee().set_main_topping("Turkey")

    with pytest.raises(SandwichBuildError, match="bread") as exc_info:
        builder.build()
    assert exc_info.value.missing_field == "bread"


def test_build_requires_main_topping() -> None:
    builder = SubwayEmployee().set_bread("Wheat")

    with pytest.raises(SandwichBuildError, match="main_topping") as exc_info:
        builder.build()
    assert exc_info.value.missing_field == "main_topping"


def test_build_keeps_duplicates_and_order() -> None:
    sandwich = (
        SubwayEmployee()
        .set_bread("Wheat")
        .set_main_topping("Turkey")
        .add_vegetable("Lettuce")
        .add_vegetable("Lettuce")
        .build()
    )

    assert sandwich.bread == "Wheat"
    assert sandwich.main_topping == "Turkey"
    assert sandwich.cheese is None
    assert list(sandwich.vegetables) == ["Lettuce", "Lettuce"]
    assert sandwich.sauces == ()


def test_scalar_setters_overwrite() -> None:
    sandwich = (
        SubwayEmployee()
        .set_bread("Wheat")
        .set_bread("Italian")
        .set_main_topping("Turkey")
        .build()
    )

    assert sandwich.bread == "Italian"


def test_snapshot_is_frozen_and_builder_keeps_state() -> None:
    builder = SubwayEmployee().set_bread("Wheat").set_main_topping("Turkey").add_sauce("Ranch")
    first = builder.build()

    builder.add_sauce("Mayo")
    second = builder.build()

    assert first.sauces == ("Ranch",)
    assert second.sauces == ("Ranch", "Mayo")
    with pytest.raises(ValidationError):
        first.bread = "Rye"


def test_director_italian_bmt_recipe(capsys) -> None:
    sandwich = SandwichArtist().make_italian_bmt(SubwayEmployee())

    assert capsys.readouterr().out == "숙련된 직원이 비엠티를 만듭니다.\n"
    assert sandwich.bread == "허니오트"
    assert sandwich.main_topping == "페퍼로니, 살라미, 햄"
    assert sandwich.cheese == "슈레드 치즈"
    assert sandwich.vegetables == ("양상추", "토마토", "피망")
    assert sandwich.sauces == ("스위트 어니언", "랜치")


def test_director_egg_mayo_recipe() -> None:
    sandwich = SandwichArtist().make_egg_mayo(SubwayEmployee())

    assert sandwich.bread == "플랫브레드"
    assert sandwich.cheese == "아메리칸 치즈"
    assert sandwich.vegetables == ("양상추", "오이")
    assert sandwich.sauces == ("마요네즈",)


def test_summary_omits_missing_parts() -> None:
    sandwich = SubwayEmployee().set_bread("Wheat").set_main_topping("Turkey").build()

    lines = sandwich.summary_lines()

    assert lines[1:3] == ["빵: Wheat", "메인 토핑: Turkey"]
    assert not any(line.startswith(("치즈", "야채", "소스")) for line in lines)


def test_main_narration(capsys) -> None:
    main()

    out = capsys.readouterr().out
    assert "야채: 양상추, 토마토, 피망" in out
    assert "===== 나만의 커스텀 샌드위치 주문 =====" in out
    assert "소스: 소금, 후추" in out


@pytest.mark.parametrize(
    ("bread", "main_topping", "missing_field"),
    [("", "Turkey", "bread"), ("Wheat", "", "main_topping")],
)
def test_empty_required_value_counts_as_missing(
    bread: str, main_topping: str, missing_field: str
) -> None:
    builder = SubwayEmployee().set_bread(bread).set_main_topping(main_topping)

    with pytest.raises(SandwichBuildError, match=missing_field) as exc_info:
        builder.build()
    assert exc_info.value.missing_field == missing_field
