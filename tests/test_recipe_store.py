import logging

import pytest

from services import (
    InMemoryRecipeRepository,
    RecipeNotFoundError,
    RecipeStore,
    RecipeValidationError,
    unique_name,
)


@pytest.mark.parametrize(
    "name,existing,expected",
    (
        ("Loaf", [], "Loaf"),
        ("Loaf", ["Loaf"], "Loaf (2)"),
        ("Loaf", ["Loaf", "Loaf (2)", "Loaf (3)"], "Loaf (4)"),
        ("Loaf (2)", ["Loaf", "Loaf (2)"], "Loaf (3)"),
        ("Loaf (2)", ["Loaf (2)"], "Loaf (2) (2)"),
    ),
)
def test_unique_name(name, existing, expected):
    assert unique_name(name, existing) == expected


def test_save_then_load_round_trips(store, make_recipe):
    store.save(make_recipe(name="Rye", flourWeight=800, useEgg=True, eggCount=2))
    loaded = store.load("Rye")
    assert loaded.flour_weight == 800
    assert loaded.egg_count == 2
    assert loaded.updated_at == 1000


def test_save_is_an_upsert_that_keeps_position(store, make_recipe):
    store.save(make_recipe(name="A"))
    store.save(make_recipe(name="B"))
    store.save(make_recipe(name="A", flourWeight=900))

    assert store.names() == ["A", "B"]
    assert store.get("A").flour_weight == 900


def test_save_keeps_pinned_flag(store, make_recipe):
    store.save(make_recipe(name="A"))
    store.toggle_pin("A")
    store.save(make_recipe(name="A", pinned=False))
    assert store.get("A").pinned


@pytest.mark.parametrize("name", ("", "   ", None))
def test_save_rejects_blank_name(store, repository, make_recipe, name):
    recipe = make_recipe()
    recipe.name = name
    with pytest.raises(RecipeValidationError, match="Please enter a recipe name."):
        store.save(recipe)
    assert repository.list() == []


def test_reserved_name_is_rejected(store, make_recipe):
    with pytest.raises(RecipeValidationError):
        store.save(make_recipe(name="new"))


def test_save_trims_name(store, make_recipe):
    saved = store.save(make_recipe(name="  Country   Loaf "))
    assert saved.name == "Country Loaf"
    assert store.exists("Country Loaf")


def test_save_as_new_numbers_taken_names(store, make_recipe):
    recipe = make_recipe(name="Sourdough")
    names = [store.save_as_new(recipe).name for _ in range(3)]
    assert names == ["Sourdough", "Sourdough (2)", "Sourdough (3)"]
    assert len(set(store.names())) == 3


def test_save_as_new_is_never_pinned(store, make_recipe):
    saved = store.save_as_new(make_recipe(name="A", pinned=True))
    assert not saved.pinned


def test_load_missing_recipe(store):
    with pytest.raises(RecipeNotFoundError, match='Recipe "Ghost" was not found.'):
        store.load("Ghost")
    with pytest.raises(RecipeValidationError, match="Please select a recipe to load."):
        store.load("")


def test_load_back_fills_old_records(clock):
    repository = InMemoryRecipeRepository([{"name": "Old", "flourWeight": 600, "waterPercentage": 70}])
    recipe = RecipeStore(repository, clock=clock).load("Old")
    assert recipe.desired_hydration_percentage == 70
    assert recipe.salt_percentage == 2
    assert recipe.butter_percentage == 10


def test_load_clamps_enabled_egg_count_to_one(clock):
    repository = InMemoryRecipeRepository([{"name": "Eggy", "useEgg": True, "eggCount": 0}])
    assert RecipeStore(repository, clock=clock).load("Eggy").egg_count == 1


def test_load_returns_a_copy(store, make_recipe):
    store.save(make_recipe(name="A"))
    loaded = store.load("A")
    loaded.flour_weight = 1
    assert store.load("A").flour_weight == 400


def test_delete(store, make_recipe):
    store.save(make_recipe(name="A"))
    store.save(make_recipe(name="B"))

    deleted = store.delete("A")
    assert deleted.name == "A"
    assert store.names() == ["B"]

    with pytest.raises(RecipeNotFoundError):
        store.delete("A")
    with pytest.raises(RecipeValidationError, match="Please select a recipe to delete."):
        store.delete(" ")


def test_rename(store, make_recipe):
    store.save(make_recipe(name="A"))
    store.save(make_recipe(name="B"))

    renamed = store.rename("A", "C")
    assert renamed.name == "C"
    assert store.names() == ["C", "B"]
    assert renamed.updated_at > store.get("B").updated_at

    with pytest.raises(RecipeValidationError, match='A recipe named "B" already exists.'):
        store.rename("C", "B")
    assert store.rename("C", "C").name == "C"


def test_duplicate(store, make_recipe):
    store.save(make_recipe(name="A", flourWeight=750))
    store.toggle_pin("A")

    copy = store.duplicate("A")
    assert copy.name == "A (2)"
    assert copy.flour_weight == 750
    assert not copy.pinned
    assert store.duplicate("A (2)").name == "A (3)"


def test_tiles_seed_empty_store(store, repository):
    tiles = store.tiles()
    assert [r.name for r in tiles] == ["Basic Bread"]
    assert repository.list()[0]["name"] == "Basic Bread"


def test_tiles_order(store, make_recipe):
    for name in ("A", "B", "C", "D"):
        store.save(make_recipe(name=name))
    store.toggle_pin("B")
    store.save(make_recipe(name="A"))

    assert [r.name for r in store.tiles()] == ["B", "A", "D", "C"]


@pytest.mark.parametrize(
    "records",
    (
        {"name": "not a list"},
        ["not a record"],
        [{"flourWeight": 500}],
    ),
)
def test_unusable_store_falls_back_to_defaults(records, clock, caplog):
    store = RecipeStore(InMemoryRecipeRepository(records), clock=clock)
    with caplog.at_level(logging.WARNING):
        assert store.names() == ["Basic Bread"]
    assert "using defaults" in caplog.text


def test_corrupt_store_is_overwritten_by_next_save(clock, make_recipe):
    repository = InMemoryRecipeRepository(["garbage"])
    store = RecipeStore(repository, clock=clock)
    store.save(make_recipe(name="Fresh"))
    assert [r["name"] for r in repository.list()] == ["Basic Bread", "Fresh"]


def test_duplicate_stored_names_are_dropped(clock):
    repository = InMemoryRecipeRepository([
        {"name": "A", "flourWeight": 100},
        {"name": "A", "flourWeight": 200},
    ])
    store = RecipeStore(repository, clock=clock)
    assert store.names() == ["A"]
    assert store.get("A").flour_weight == 100


def test_load_detailed_blend_without_composition_gets_default_flours(clock):
    from services import calculate_dough

    repository = InMemoryRecipeRepository([
        {"name": "Blend", "flourWeight": 500, "useDetailedFlourComposition": True},
    ])
    recipe = RecipeStore(repository, clock=clock).load("Blend")
    assert [c.name for c in recipe.flour_composition][0] == "Bread Flour"
    assert sum(c.share_value for c in recipe.flour_composition) > 0

    calc = calculate_dough(recipe)
    assert calc.ingredients[0].name == "Bread Flour"
    assert calc.ingredients[0].quantity == "500.0g"


def test_save_as_new_from_numbered_copy(store, make_recipe):
    store.save(make_recipe(name="Loaf"))
    store.save(make_recipe(name="Loaf (2)"))
    assert store.save_as_new(make_recipe(name="Loaf (2)")).name == "Loaf (3)"
