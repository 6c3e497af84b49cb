"""
Contact Book: a small contact directory served over a JSON REST API.
"""

__version__ = "0.1.0"
