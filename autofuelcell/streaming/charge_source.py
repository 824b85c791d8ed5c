
import numpy as np

ELECTRIC_CHARGE = 'ElectricCharge'

class PartResource:
    """A buffered resource on a part. Exposes current_amount()/max_amount() readings."""
    def __init__(self, name=ELECTRIC_CHARGE, amount=0.0, max_amount=0.0):
        self.name = name
        self.amount = amount
        self.capacity = max_amount

    def current_amount(self):
        return self.amount

    def max_amount(self):
        return self.capacity

class SimulatedBuffer(PartResource):
    """ElectricCharge buffer for the simulation loop.
    Each step draws a noisy load and, while the generator runs, adds a fixed output.
    Amount is clamped to [0, max_amount].
    """
    def __init__(self, max_amount=200.0, initial_amount=100.0, load_per_tick=1.5,
                 load_jitter=0.5, output_per_tick=3.0, seed=42, log_fn=print):
        super().__init__(ELECTRIC_CHARGE, float(initial_amount), float(max_amount))
        self.load = float(load_per_tick)
        self.jitter = float(load_jitter)
        self.output = float(output_per_tick)
        self.log = log_fn
        self._rng = np.random.default_rng(seed)
        self.log(f"[SIM] Buffer {self.amount:.1f}/{self.capacity:.1f} load={self.load:.2f}/tick output={self.output:.2f}/tick")

    def step(self, generator_running: bool):
        draw = max(0.0, self.load + self._rng.normal(0, self.jitter))
        produced = self.output if generator_running else 0.0
        self.amount = float(np.clip(self.amount - draw + produced, 0.0, self.capacity))
        return self.amount
