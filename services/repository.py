"""
Recipe Repositories

The recipe collection lives in one named slot and is only ever read or
replaced as a whole. A repository exposes exactly that:

    list()               -> list of stored recipe dicts
    replace_all(records) -> None
"""

import copy
import json
import logging

from constants import RECIPE_STORE_KEY
from models.settings import Settings
from .errors import RecipeStoreCorruptError

logger = logging.getLogger(__name__)


class InMemoryRecipeRepository:
    """Repository kept in a Python list. Used by tests and scripts."""

    def __init__(self, records=None):
        self._records = copy.deepcopy(records) if records is not None else []

    def list(self):
        return copy.deepcopy(self._records)

    def replace_all(self, records):
        self._records = copy.deepcopy(list(records))


class SettingsRecipeRepository:
    """Repository backed by one row of the settings table. Needs an app context."""

    def __init__(self, *, key=RECIPE_STORE_KEY):
        self.key = key

    def list(self):
        raw = Settings.get_value(self.key)
        if raw is None or raw == '':
            return []
        try:
            return json.loads(raw)
        except ValueError as e:
            raise RecipeStoreCorruptError(f'Slot "{self.key}" is not valid JSON: {e}') from e

    def replace_all(self, records):
        records = list(records)
        Settings.set_value(self.key, json.dumps(records))
        logger.debug('Wrote %d recipe(s) to slot "%s"', len(records), self.key)
