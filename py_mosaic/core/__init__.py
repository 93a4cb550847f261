"""
Core mosaic growth functionality.
"""

from .grid import EMPTY, Empty, Filled, PlacementGrid, PlacementRecord
from .random_source import RandomSource
from .geometry import AngularOrderingError, MosaicInvariantError, WalkInvariantError
from .generator import MosaicGenerator, MosaicRun, Phase, RunState

__all__ = ['EMPTY', 'Empty', 'Filled', 'PlacementGrid', 'PlacementRecord',
           'RandomSource', 'AngularOrderingError', 'MosaicInvariantError',
           'WalkInvariantError', 'MosaicGenerator', 'MosaicRun', 'Phase', 'RunState']
