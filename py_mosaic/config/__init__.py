"""
Configuration for mosaic generation.
"""

from .config import Settings, settings
from .params import MosaicParams, format_fraction

__all__ = ['Settings', 'settings', 'MosaicParams', 'format_fraction']
