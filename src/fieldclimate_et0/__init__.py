"""
FieldClimate ET0 Proxy

This package proxies the FieldClimate weather-station API and estimates
reference evapotranspiration (ET0) from station readings, falling back from
Penman-Monteith FAO-56 to simpler methods as data becomes scarce.
"""

__version__ = "0.1.0"
__description__ = "FieldClimate proxy with ET0 estimation"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "FieldClimateET0App":
        from .main import FieldClimateET0App
        return FieldClimateET0App
    if name == "ActionHandler":
        from .services import ActionHandler
        return ActionHandler
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "FieldClimateET0App",
    "ActionHandler",
]
