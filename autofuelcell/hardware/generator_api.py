
from ..policy.threshold_controller import Action

class GeneratorAPI:
    """Run-state/command interface of a resource converter (e.g. a fuel cell).
    Start and stop requests are idempotent: starting a running generator or stopping
    a stopped one changes nothing and does not reach _apply_run_state.
    """
    def __init__(self, name='Generator', outputs=('ElectricCharge',)):
        self.name = name
        self.outputs = list(outputs)
        self.is_on = False

    def connect(self): pass
    def disconnect(self): pass

    def produces(self, resource_name: str) -> bool:
        wanted = resource_name.casefold()
        return any(str(out).casefold() == wanted for out in self.outputs)

    def is_running(self) -> bool:
        return self.is_on

    def request_start(self):
        if self.is_on:
            return
        self.is_on = True
        self._apply_run_state(True)

    def request_stop(self):
        if not self.is_on:
            return
        self.is_on = False
        self._apply_run_state(False)

    def _apply_run_state(self, running: bool):
        """Override in subclass to forward the command to the host."""
        pass

class MockGenerator(GeneratorAPI):
    def __init__(self, name='FuelCell', outputs=('ElectricCharge',), log_fn=print):
        super().__init__(name=name, outputs=outputs)
        self.log = log_fn
        self.starts = 0
        self.stops = 0

    def connect(self):
        self.log(f"[MockGen] {self.name} connected.")

    def disconnect(self):
        self.log(f"[MockGen] {self.name} disconnected.")

    def _apply_run_state(self, running: bool):
        if running:
            self.starts += 1
            self.log(f"[MockGen] {self.name} => running")
        else:
            self.stops += 1
            self.log(f"[MockGen] {self.name} => stopped")

def apply_action(action, generator):
    """Execute one tick's Action against a generator handle."""
    if action is Action.START:
        generator.request_start()
    elif action is Action.STOP:
        generator.request_stop()
