
import numpy as np

def clamp(value, lo, hi):
    return float(np.clip(float(value), lo, hi))

def is_finite(value):
    return value is not None and bool(np.isfinite(float(value)))

def charge_percent(amount, max_amount):
    """Return amount/max_amount in percent, or None when it cannot be computed.
    None covers a missing reading, a non-finite reading and an empty buffer (max == 0).
    """
    if not (is_finite(amount) and is_finite(max_amount)):
        return None
    amount = float(amount)
    max_amount = float(max_amount)
    if max_amount == 0.0:
        return None
    return amount * 100.0 / max_amount

def format_percent(value):
    if value is None:
        return "--"
    return f"{value:.2f}%"
