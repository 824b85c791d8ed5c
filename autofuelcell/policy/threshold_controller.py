
from enum import Enum

from ..utils.charge import charge_percent, format_percent
from .controller_config import ControllerConfig, OperationMode

INFO = "Able to automatically toggle itself on and off as needed."

class Action(Enum):
    NOOP = "noop"
    START = "start"
    STOP = "stop"

class ThresholdController:
    """Dual-threshold (hysteresis) on/off controller for a generator feeding a charge buffer.
    - Charge at or below band.low with the generator stopped -> START.
    - Charge at or above band.high with the generator running -> STOP.
    - Anything else, Manual mode, a closed feature gate or a missing collaborator -> NOOP.
    Stateless across ticks apart from its config; the caller applies the returned Action.
    """
    TAG = "[AutoFuelCell]"

    def __init__(self, charge_source, generator, config=None, log_fn=print):
        self.charge_source = charge_source
        self.generator = generator
        self.config = config if config is not None else ControllerConfig()
        self.log = log_fn
        self.current_charge = None
        self.disabled = False

        # reported once here; tick() stays silent while disabled
        if self.charge_source is None:
            self.log(f"{self.TAG} Error: failed to obtain ElectricCharge resource")
            self.disabled = True
        if self.generator is None:
            self.log(f"{self.TAG} Error: failed to obtain generator")
            self.disabled = True

    @classmethod
    def initialize(cls, charge_source, generator, config=None, log_fn=print):
        """Never raises. Missing handles or an init failure give a disabled controller."""
        try:
            return cls(charge_source, generator, config=config, log_fn=log_fn)
        except Exception as e:
            ctrl = cls(None, None, log_fn=lambda msg: None)
            ctrl.log = log_fn
            ctrl._warn(f"init failed: {e!r}. Controller disabled.")
            return ctrl

    @property
    def band(self):
        return self.config.band

    @property
    def mode(self):
        return self.config.mode

    @property
    def charge_display(self):
        return format_percent(self.current_charge)

    def _trace(self, msg):
        if self.config.debug:
            self.log(f"{self.TAG} {msg}")

    def _warn(self, msg):
        # boundary logging: a broken log sink must not reach the host scheduler
        try:
            self.log(f"[WARN] {self.TAG} {msg}")
        except Exception:
            return False
        return True

    def tick(self):
        try:
            return self._decide()
        except Exception as e:
            self._warn(f"tick failed: {e!r}")
            return Action.NOOP

    def _decide(self):
        if self.disabled:
            return Action.NOOP

        charge = charge_percent(self.charge_source.current_amount(),
                                self.charge_source.max_amount())
        self.current_charge = charge
        if charge is None:
            return Action.NOOP
        self._trace(f"Current Charge = {charge:.2f}")

        cfg = self.config
        if not cfg.advanced_controls_enabled or cfg.mode is OperationMode.MANUAL:
            self._trace("Automatic Disabled")
            return Action.NOOP

        running = bool(self.generator.is_running())
        if charge <= cfg.band.low and not running:
            self.log(f"{self.TAG} Starting generator at {charge:.2f}% (low={cfg.band.low:.0f}%)")
            return Action.START
        if charge >= cfg.band.high and running:
            self.log(f"{self.TAG} Stopping generator at {charge:.2f}% (high={cfg.band.high:.0f}%)")
            return Action.STOP
        return Action.NOOP

    # band edits: the only entry points that mutate the thresholds
    def set_low_threshold(self, value: float) -> float:
        return self.config.band.set_low(value)

    def set_high_threshold(self, value: float) -> float:
        return self.config.band.set_high(value)

    # mode commands are ignored, not just ineffective, while the gate is closed
    def toggle_mode(self):
        if not self.config.advanced_controls_enabled:
            return self.config.mode
        if self.config.mode is OperationMode.AUTOMATIC:
            self.config.mode = OperationMode.MANUAL
        else:
            self.config.mode = OperationMode.AUTOMATIC
        return self.config.mode

    def set_mode(self, mode):
        if self.config.advanced_controls_enabled:
            self.config.mode = OperationMode.parse(mode)
        return self.config.mode

    def get_info(self):
        return INFO
