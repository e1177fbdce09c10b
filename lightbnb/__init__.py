"""
LightBnB data access layer.
Async queries over users, reservations, properties and property reviews.
"""

__version__ = "1.0.0"
