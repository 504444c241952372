"""Stockroom: restaurant inventory control for materials and beverages."""

from stockroom.utils.constants import APP_VERSION

__version__ = APP_VERSION
