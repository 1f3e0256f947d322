"""
Database Base Module

Holds the Flask-SQLAlchemy instance backing the recipe slot. Kept apart
from app.py so models and the repository can import it without a cycle.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app in app.py
db = SQLAlchemy()
