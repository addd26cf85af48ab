"""A tile-based maze game: collect every item, then reach the exit.

Includes map loading and validation, game rules, a pygame renderer and
small text, buffer and output helpers.
"""

__version__ = "1.0.0"