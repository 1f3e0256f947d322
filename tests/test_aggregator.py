import pytest

from services import (
    add_amendment,
    calculate_dough,
    export_recipe,
    format_quantity,
    format_yeast_quantity,
    remove_amendment,
    update_amendment,
)


@pytest.fixture
def full_recipe(make_recipe, flour, liquid, amendment):
    recipe = make_recipe(
        name="Brioche-ish",
        flourWeight=500,
        desiredHydrationPercentage=70,
        saltPercentage=2,
        yeastPercentage=1.5,
        useDetailedFlourComposition=True,
        useEgg=True,
        eggCount=2,
        useCustomLiquidBlend=True,
        useSugar=True,
        sugarPercentage=5,
        useButter=True,
        butterPercentage=10,
        useOil=True,
        oilPercentage=3,
    )
    recipe.flour_composition = [flour("Bread Flour", 3), flour("Rye Flour", 1)]
    recipe.liquid_composition = [liquid("Milk", 50)]
    recipe.amendments = [amendment("Seeds", 30), amendment("", 10), amendment("Raisins", 0)]
    return recipe


def test_basic_recipe_totals(make_recipe):
    calc = calculate_dough(make_recipe(flourWeight=500, desiredHydrationPercentage=65,
                                       saltPercentage=2, yeastPercentage=1))
    assert calc.hydration.net_added_water == pytest.approx(325.0)
    assert calc.salt_weight == pytest.approx(10.0)
    assert calc.yeast_weight == pytest.approx(5.0)
    assert calc.total_dough_weight == pytest.approx(840.0)
    assert calc.overall_hydration == 65


def test_default_recipe_ingredient_list(make_recipe):
    calc = calculate_dough(make_recipe())
    assert [(line.name, line.quantity) for line in calc.ingredients] == [
        ("Flour (Total)", "400.0g"),
        ("Water", "260.0g"),
        ("Salt", "8.0g"),
        ("Yeast", "4.0g"),
    ]


def test_full_recipe_ingredient_order(full_recipe):
    calc = calculate_dough(full_recipe)
    assert [line.name for line in calc.ingredients] == [
        "Bread Flour",
        "Rye Flour",
        "Water",
        "Eggs (2, ~75.0g water)",
        "Milk",
        "Salt",
        "Yeast",
        "Sugar",
        "Butter",
        "Oil",
        "Seeds",
    ]
    assert [line.quantity for line in calc.ingredients] == [
        "375.0g", "125.0g", "225.0g", "100g", "50.0g", "10.0g",
        "7.50g", "25.0g", "50.0g", "15.0g", "30.0g",
    ]


def test_unnamed_amendment_still_counts_toward_total(full_recipe):
    calc = calculate_dough(full_recipe)
    assert calc.amendments_weight == pytest.approx(40.0)
    assert calc.total_dough_weight == pytest.approx(1022.5)


def test_displayed_hydration_echoes_target(make_recipe):
    recipe = make_recipe(flourWeight=300, desiredHydrationPercentage=12, useEgg=True, eggCount=1)
    calc = calculate_dough(recipe)

    assert calc.hydration.net_added_water == 0
    assert "Water" not in [line.name for line in calc.ingredients]
    assert calc.overall_hydration == 12
    assert calc.realized_hydration == pytest.approx(12.5)


def test_no_flour_reports_zero_hydration(make_recipe):
    calc = calculate_dough(make_recipe(flourWeight=0))
    assert calc.overall_hydration == 0
    assert calc.total_dough_weight == 0
    # Salt and yeast are always listed
    assert [line.name for line in calc.ingredients] == ["Salt", "Yeast"]


def test_disabled_additives_are_left_out(make_recipe):
    calc = calculate_dough(make_recipe(useSugar=False, useButter=True, butterPercentage=0))
    names = [line.name for line in calc.ingredients]
    assert "Sugar" not in names
    assert "Butter" not in names
    assert calc.sugar_weight == 0


def test_egg_weight_joins_total_without_water_line_when_eggs_cover_target(make_recipe):
    calc = calculate_dough(make_recipe(flourWeight=100, desiredHydrationPercentage=10,
                                       saltPercentage=0, yeastPercentage=0,
                                       useEgg=True, eggCount=1))
    assert calc.egg_weight == 50
    assert calc.total_dough_weight == pytest.approx(150.0)


@pytest.mark.parametrize(
    "grams,expected",
    ((4.0, "4.0g"), (4.5, "4.50g"), (0.25, "0.25g"), (7.125, "7.12g")),
)
def test_format_yeast_quantity(grams, expected):
    assert format_yeast_quantity(grams) == expected


def test_format_quantity():
    assert format_quantity(10) == "10.0g"
    assert format_quantity(99.96) == "100.0g"
    assert format_quantity(150, 0) == "150g"


def test_export_recipe(full_recipe):
    payload = export_recipe(full_recipe)
    assert payload["name"] == "Brioche-ish"
    assert payload["ingredients"][0] == {"name": "Bread Flour", "quantity": "375.0g"}
    assert payload["ingredients"][-1] == {"name": "Seeds", "quantity": "30.0g"}


def test_calculation_to_dict(full_recipe):
    data = calculate_dough(full_recipe).to_dict()
    assert data["netAddedWater"] == pytest.approx(225.0)
    assert data["eggWeight"] == 100
    assert data["flourBlend"][1]["name"] == "Rye Flour"
    assert data["ingredients"][2] == {"name": "Water", "quantity": "225.0g"}


def test_amendment_edits():
    amendments = add_amendment([], "  Walnuts ", "80")
    walnut = amendments[0]
    assert (walnut.name, walnut.weight) == ("Walnuts", 80.0)

    amendments = update_amendment(amendments, walnut.id, weight=-3)
    assert amendments[0].weight == 0
    assert amendments[0].name == "Walnuts"

    amendments = update_amendment(amendments, walnut.id, name="Pecans")
    assert amendments[0].name == "Pecans"

    assert remove_amendment(amendments, walnut.id) == []
