from .memory import InMemoryInfrastructureAdapter

__all__ = ["InMemoryInfrastructureAdapter"]
