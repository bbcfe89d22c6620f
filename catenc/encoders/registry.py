"""
Encoder registry — factory for creating encoder instances from config.
"""

from catenc.core.interfaces import BaseEncoder


_REGISTRY: dict[str, type] = {}


def register(name: str):
    """Decorator to register an encoder class."""
    def wrapper(cls):
        _REGISTRY[name] = cls
        cls.scheme = name
        return cls
    return wrapper


def create_encoder(name: str, **kwargs) -> BaseEncoder:
    """Create an unfitted encoder instance by scheme name."""
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY.keys()))
        raise ValueError(f"Unknown encoder '{name}'. Available: {available}")
    return _REGISTRY[name](**kwargs)


def list_encoders() -> list[str]:
    return sorted(_REGISTRY.keys())
