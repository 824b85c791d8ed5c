
from ..streaming.charge_source import ELECTRIC_CHARGE
from .generator_api import GeneratorAPI

class Part:
    """Host-side container: named resources plus a list of modules (generators and others)."""
    def __init__(self, name, resources=(), modules=()):
        self.name = name
        self.resources = {r.name: r for r in resources}
        self.modules = list(modules)

    def get_resource(self, name):
        return self.resources.get(name)

def resolve_charge_source(part, resource_name=ELECTRIC_CHARGE):
    if part is None:
        return None
    return part.get_resource(resource_name)

def resolve_generator(part, resource_name=ELECTRIC_CHARGE):
    """First generator module whose declared outputs include resource_name (case-insensitive)."""
    if part is None:
        return None
    for module in part.modules:
        if isinstance(module, GeneratorAPI) and module.produces(resource_name):
            return module
    return None
