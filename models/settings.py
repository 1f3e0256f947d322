"""
Settings Model

Key-value storage. The whole recipe collection lives in one row as a
JSON array; it is always read and replaced as a whole.
"""

from .base import db


class Settings(db.Model):
    """Key-value storage for application data slots."""
    __tablename__ = 'settings'

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(50), unique=True, nullable=False, index=True)
    value = db.Column(db.Text, nullable=True)

    @classmethod
    def get_value(cls, key, default=None):
        row = cls.query.filter_by(key=key).first()
        if row is None or row.value is None:
            return default
        return row.value

    @classmethod
    def set_value(cls, key, value):
        row = cls.query.filter_by(key=key).first()
        if row is None:
            row = cls(key=key)
            db.session.add(row)
        row.value = value
        db.session.commit()
        return row
