
from ..utils.charge import clamp, is_finite

MIN_PERCENT = 15.0
MAX_PERCENT = 85.0
# high must stay at least this far above low
MIN_GAP = 1.0

class ThresholdBand:
    """Hysteresis band (low, high) in percent.
    Both bounds live in [MIN_PERCENT, MAX_PERCENT] and high >= low + MIN_GAP after every edit.
    Editing one bound clamps it against the other; the other bound never moves.
    """
    def __init__(self, low=MIN_PERCENT, high=MAX_PERCENT):
        self._low = MIN_PERCENT
        self._high = MAX_PERCENT
        self.set_low(low)
        self.set_high(high)

    @classmethod
    def from_pair(cls, pair):
        low, high = pair
        return cls(low=low, high=high)

    @property
    def low(self) -> float:
        return self._low

    @property
    def high(self) -> float:
        return self._high

    def set_low(self, value: float) -> float:
        # non-finite edits are ignored; the current bound stays
        if not is_finite(value):
            return self._low
        v = clamp(value, MIN_PERCENT, MAX_PERCENT)
        self._low = clamp(v, MIN_PERCENT, self._high - MIN_GAP)
        return self._low

    def set_high(self, value: float) -> float:
        if not is_finite(value):
            return self._high
        v = clamp(value, MIN_PERCENT, MAX_PERCENT)
        self._high = clamp(v, self._low + MIN_GAP, MAX_PERCENT)
        return self._high

    def as_tuple(self):
        return (self._low, self._high)

    def __repr__(self):
        return f"ThresholdBand(low={self._low:.0f}, high={self._high:.0f})"
