"""
Engine Errors

Failures the user is shown inline. Routes catch these and flash the
message; nothing in the engine is fatal.
"""


class DoughMasterError(Exception):
    """Base class for dough calculator errors."""
    pass


class RecipeValidationError(DoughMasterError):
    """Raised when a store or editor action is rejected. State is left untouched."""
    pass


class RecipeNotFoundError(RecipeValidationError):
    """Raised when an action names a recipe that is not stored."""

    def __init__(self, name):
        super().__init__(f'Recipe "{name}" was not found.')
        self.name = name


class RecipeStoreCorruptError(DoughMasterError):
    """Raised by a repository whose stored collection cannot be decoded."""
    pass
