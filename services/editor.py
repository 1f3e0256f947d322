"""
Editor Session Service

The recipe currently being edited (the draft) together with the store
actions that replace it: reset, load, save, save-as-new and delete.
"""

from .aggregator import calculate_dough


class DoughEditor:
    """Draft recipe plus the store it is saved to."""

    def __init__(self, store, draft=None):
        self.store = store
        self.draft = draft if draft is not None else store.default_recipe()

    def reset(self):
        """Discard the draft and start again from the default recipe."""
        self.draft = self.store.default_recipe()
        return self.draft

    def load(self, name):
        self.draft = self.store.load(name)
        return self.draft

    def save(self):
        saved = self.store.save(self.draft)
        self.draft = saved.copy()
        return saved

    def save_as_new(self):
        """Save a new copy; the draft takes the (possibly numbered) stored name."""
        saved = self.store.save_as_new(self.draft)
        self.draft = saved.copy()
        return saved

    def delete(self, name):
        """Delete a stored recipe; deleting the one being edited resets the draft."""
        deleted = self.store.delete(name)
        if deleted.name == self.draft.name:
            self.reset()
        return deleted

    def calculate(self):
        return calculate_dough(self.draft)
