"""
Calculation algorithms for reference evapotranspiration.

Provides the FAO-56 radiation model, the ET0 estimators and the method selector.
"""

from .radiation import RadiationModel
from .formulas import ET0Formulas, PenmanMonteithComponents
from .selector import ET0MethodSelector, assess_data_quality

__all__ = [
    "RadiationModel",
    "ET0Formulas",
    "PenmanMonteithComponents",
    "ET0MethodSelector",
    "assess_data_quality",
]
