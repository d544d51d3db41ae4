"""
ET0 result models.
"""

from dataclasses import dataclass, field
from typing import Dict, Any


@dataclass(frozen=True)
class ET0Result:
    """Reference evapotranspiration estimate for one day."""

    value: float  # mm/day, non-negative, rounded
    method: str
    quality: str  # alta | media | baixa | muito_baixa
    parameters: Dict[str, str] = field(default_factory=dict)
    note: str = ""
    source: str = "calculated"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "method": self.method,
            "quality": self.quality,
            "parameters": dict(self.parameters),
            "note": self.note,
            "source": self.source,
        }
