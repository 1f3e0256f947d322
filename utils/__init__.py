# Input helpers for the dough calculator
from .numeric import safe_float, safe_int, clamp_field, clamp_count
from .sanitizer import (
    sanitize_name, sanitize_recipe_name, sanitize_component_name,
    sanitize_amendment_name
)
