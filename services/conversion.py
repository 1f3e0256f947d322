"""
Unit Conversion Service

Baker's-percentage arithmetic relative to the flour weight. Every
percentage-derived weight in the engine goes through these two functions.
"""


def weight_from_percentage(flour_weight, percentage):
    """
    Convert a baker's percentage to grams.

    Returns 0 when there is no flour, whatever the percentage.
    """
    if flour_weight <= 0:
        return 0.0
    return flour_weight * percentage / 100


def percentage_from_weight(flour_weight, weight):
    """Inverse of :func:`weight_from_percentage`, with the same zero-flour guard."""
    if flour_weight <= 0:
        return 0.0
    return weight / flour_weight * 100
