
from enum import Enum

from .threshold_band import ThresholdBand, MIN_PERCENT, MAX_PERCENT

class OperationMode(Enum):
    AUTOMATIC = "automatic"
    MANUAL = "manual"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.AUTOMATIC if value else cls.MANUAL
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown operation mode: {value!r}") from None

class ControllerConfig:
    """Band, operation mode and the host-wide advanced-controls gate.
    The gate is read on every tick; when it is off the controller acts as Manual
    and mode commands are ignored.
    """
    def __init__(self, band=None, mode=OperationMode.AUTOMATIC,
                 advanced_controls_enabled=True, debug=False):
        self.band = band if band is not None else ThresholdBand()
        self.mode = OperationMode.parse(mode)
        self.advanced_controls_enabled = bool(advanced_controls_enabled)
        self.debug = bool(debug)

    @property
    def automatic(self) -> bool:
        return self.mode is OperationMode.AUTOMATIC

    @classmethod
    def from_dict(cls, d, advanced_controls_enabled=True):
        """Restore persisted values: {'automatic': bool, 'thresholds': [low, high]}.
        Missing keys fall back to defaults; thresholds go through the band clamp.
        """
        d = d or {}
        low, high = d.get('thresholds', (MIN_PERCENT, MAX_PERCENT))
        return cls(band=ThresholdBand.from_pair((low, high)),
                   mode=OperationMode.parse(d.get('automatic', True)),
                   advanced_controls_enabled=advanced_controls_enabled,
                   debug=d.get('debug', False))

    def to_dict(self):
        # only the persisted fields; the gate belongs to the host
        return {
            'automatic': self.automatic,
            'thresholds': [self.band.low, self.band.high],
        }
