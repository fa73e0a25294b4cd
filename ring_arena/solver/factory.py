"""
Strategy Factory Module - Registry of solving strategies by name.
"""

from typing import Dict, List, Type

from .base import SolverStrategy

DEFAULT_STRATEGY = "best"

_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """Class decorator that makes a strategy available under cls.name."""
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str) -> SolverStrategy:
    """
    Create a strategy instance by name.

    Raises:
        ValueError: If no strategy is registered under the name
    """
    try:
        strategy_cls = _STRATEGIES[name]
    except KeyError:
        available = ", ".join(_STRATEGIES)
        raise ValueError(f"Unknown strategy: {name}. Available: {available}") from None
    return strategy_cls()


def get_strategy_names() -> List[str]:
    """Registered strategy names, in registration order."""
    return list(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, str]]:
    """Name and description of every registered strategy."""
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """The exhaustive strategy, or the first one registered without it."""
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(_STRATEGIES), "")
