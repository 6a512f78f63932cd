"""
Biomechanics Module - Golf swing measurements
"""

from .angles import Baseline, Measurements, capture_baseline, measure

__all__ = ['Baseline', 'Measurements', 'capture_baseline', 'measure']
