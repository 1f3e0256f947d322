"""
Recipe Store Service

Naming, uniqueness and merge-on-load rules for saved recipes, applied
against an injected repository. Every mutation reads the whole
collection, computes the new one and writes it back in one call.
"""

import logging
import re
import time

from constants import DEFAULT_RECIPE, RESERVED_RECIPE_NAME
from models.recipe import Recipe
from utils.sanitizer import sanitize_recipe_name
from .errors import RecipeNotFoundError, RecipeStoreCorruptError, RecipeValidationError

logger = logging.getLogger(__name__)

_COPY_SUFFIX = re.compile(r'^(?P<stem>.+) \((?P<number>\d+)\)$')


def _now_ms():
    return int(time.time() * 1000)


def unique_name(name, existing_names):
    """
    Return ``name`` or, if it is taken, the first free ``"name (n)"`` with n >= 2.

    A name that already carries a copy suffix is numbered from its stem, so
    copying "Sourdough (2)" gives "Sourdough (3)" rather than "Sourdough (2) (2)".
    """
    taken = set(existing_names)
    if name not in taken:
        return name

    match = _COPY_SUFFIX.match(name)
    stem = match.group('stem') if match and match.group('stem') in taken else name

    number = 2
    while f"{stem} ({number})" in taken:
        number += 1
    return f"{stem} ({number})"


class RecipeStore:
    """Saved recipes, addressed by unique name."""

    def __init__(self, repository, *, defaults=None, clock=None):
        self.repository = repository
        self.defaults = DEFAULT_RECIPE if defaults is None else defaults
        self.clock = _now_ms if clock is None else clock

    def default_recipe(self):
        return Recipe.from_dict({}, self.defaults)

    # ============================================
    # READING
    # ============================================

    def _read(self):
        """
        Read the collection. A slot that cannot be understood is replaced,
        in memory, by the default recipe set.
        """
        try:
            records = self.repository.list()
        except RecipeStoreCorruptError as e:
            logger.warning('Recipe store unreadable, using defaults: %s', e)
            return [self.default_recipe()]

        if not isinstance(records, list):
            logger.warning('Recipe store holds %s instead of a list, using defaults',
                           type(records).__name__)
            return [self.default_recipe()]

        recipes = []
        seen = set()
        for record in records:
            if not isinstance(record, dict):
                logger.warning('Recipe store holds a non-record entry, using defaults')
                return [self.default_recipe()]
            recipe = Recipe.from_dict(record, self.defaults)
            if not record.get('name') or not recipe.name:
                logger.warning('Recipe store holds a record without a name, using defaults')
                return [self.default_recipe()]
            if recipe.name in seen:
                logger.warning('Dropping duplicate stored recipe "%s"', recipe.name)
                continue
            seen.add(recipe.name)
            recipes.append(recipe)
        return recipes

    def _write(self, recipes):
        self.repository.replace_all([r.to_dict() for r in recipes])

    def recipes(self):
        return self._read()

    def names(self):
        return [r.name for r in self._read()]

    def get(self, name):
        for recipe in self._read():
            if recipe.name == name:
                return recipe
        return None

    def exists(self, name):
        return self.get(name) is not None

    def tiles(self):
        """
        Recipes in list-view order: pinned first, then most recently
        updated, then stored order. An empty store is seeded with the
        default recipe.
        """
        recipes = self._read()
        if not recipes:
            recipes = [self.default_recipe()]
            self._write(recipes)
            logger.info('Seeded empty recipe store with "%s"', recipes[0].name)

        ordered = sorted(
            enumerate(recipes),
            key=lambda pair: (not pair[1].pinned, -(pair[1].updated_at or 0), pair[0]),
        )
        return [recipe for _, recipe in ordered]

    # ============================================
    # VALIDATION
    # ============================================

    def _validated_name(self, name, message='Please enter a recipe name.'):
        name = sanitize_recipe_name(name)
        if not name:
            raise RecipeValidationError(message)
        if name == RESERVED_RECIPE_NAME:
            raise RecipeValidationError(f'"{RESERVED_RECIPE_NAME}" is reserved, please pick another name.')
        return name

    @staticmethod
    def _selected(name, message):
        if name is None or not str(name).strip():
            raise RecipeValidationError(message)
        return str(name)

    @staticmethod
    def _index(recipes, name):
        for index, recipe in enumerate(recipes):
            if recipe.name == name:
                return index
        raise RecipeNotFoundError(name)

    # ============================================
    # MUTATIONS
    # ============================================

    def save(self, recipe):
        """
        Upsert by name: replace a recipe of the same name in place, or
        append a new one.

        Returns:
            The stored Recipe
        """
        name = self._validated_name(recipe.name)
        recipes = self._read()
        stored = recipe.copy(name=name, updated_at=self.clock())

        for index, existing in enumerate(recipes):
            if existing.name == name:
                stored.pinned = existing.pinned
                recipes[index] = stored
                self._write(recipes)
                logger.info('Updated recipe "%s"', name)
                return stored.copy()

        recipes.append(stored)
        self._write(recipes)
        logger.info('Saved new recipe "%s"', name)
        return stored.copy()

    def save_as_new(self, recipe):
        """Always add a new recipe, numbering the name if it is already taken."""
        name = self._validated_name(recipe.name)
        recipes = self._read()
        name = unique_name(name, [r.name for r in recipes])

        stored = recipe.copy(name=name, pinned=False, updated_at=self.clock())
        recipes.append(stored)
        self._write(recipes)
        logger.info('Saved recipe as new "%s"', name)
        return stored.copy()

    def load(self, name):
        """
        Editable copy of a stored recipe. Missing fields were back-filled
        from the defaults when the record was read; eggs that are switched
        on count at least one.
        """
        name = self._selected(name, 'Please select a recipe to load.')
        recipes = self._read()
        recipe = recipes[self._index(recipes, name)].copy()
        if recipe.use_egg and recipe.egg_count < 1:
            recipe.egg_count = 1
        return recipe

    def delete(self, name):
        name = self._selected(name, 'Please select a recipe to delete.')
        recipes = self._read()
        deleted = recipes.pop(self._index(recipes, name))
        self._write(recipes)
        logger.info('Deleted recipe "%s"', name)
        return deleted

    def rename(self, name, new_name):
        """Rename in place. The new name must not belong to any other recipe."""
        name = self._selected(name, 'Please select a recipe to rename.')
        new_name = self._validated_name(new_name)
        recipes = self._read()
        index = self._index(recipes, name)

        if new_name != name and any(r.name == new_name for r in recipes):
            raise RecipeValidationError(f'A recipe named "{new_name}" already exists.')

        recipes[index] = recipes[index].copy(name=new_name, updated_at=self.clock())
        self._write(recipes)
        logger.info('Renamed recipe "%s" to "%s"', name, new_name)
        return recipes[index].copy()

    def duplicate(self, name):
        """Store a copy of a saved recipe under the next free numbered name."""
        name = self._selected(name, 'Please select a recipe to duplicate.')
        recipes = self._read()
        source = recipes[self._index(recipes, name)]

        copy_name = unique_name(source.name, [r.name for r in recipes])
        duplicate = source.copy(name=copy_name, pinned=False, updated_at=self.clock())
        recipes.append(duplicate)
        self._write(recipes)
        logger.info('Duplicated recipe "%s" as "%s"', name, copy_name)
        return duplicate.copy()

    def toggle_pin(self, name):
        name = self._selected(name, 'Please select a recipe to pin.')
        recipes = self._read()
        index = self._index(recipes, name)
        recipes[index] = recipes[index].copy(pinned=not recipes[index].pinned)
        self._write(recipes)
        return recipes[index].copy()
