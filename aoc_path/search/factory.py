"""
Strategy Factory Module - Registry and factory for strategy instantiation.
"""

import logging
from typing import Any, Dict, List, Type

from .base import SearchStrategy
from ..settings import load_settings

logger = logging.getLogger(__name__)


# Global registry of strategies
_STRATEGIES: Dict[str, Type[SearchStrategy]] = {}

FALLBACK_STRATEGY = "astar"


def register_strategy(cls: Type[SearchStrategy]) -> Type[SearchStrategy]:
    """
    Decorator to register a strategy class.

    Usage:
        @register_strategy
        class MyStrategy(SearchStrategy):
            name = "my_strategy"
            ...

    Args:
        cls: Strategy class to register

    Returns:
        The same class (for decorator chaining)
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SearchStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name (e.g., "bfs", "astar")
        **kwargs: Additional arguments passed to strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name](**kwargs)


def create_default_strategy() -> SearchStrategy:
    """
    Create the strategy named in settings, honouring its log_metrics flag.
    """
    return create_strategy(
        get_default_strategy_name(),
        log_metrics=load_settings().log_metrics
    )


def get_strategy_names() -> List[str]:
    """List registered strategy names."""
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered strategies.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """
    Get the default strategy name.

    Returns:
        Strategy from settings if registered, else "astar" if available,
        else first registered
    """
    configured = load_settings().strategy_name
    if configured in _STRATEGIES:
        return configured
    if configured:
        logger.warning(f"Configured strategy '{configured}' not registered, ignoring")
    if FALLBACK_STRATEGY in _STRATEGIES:
        return FALLBACK_STRATEGY
    if _STRATEGIES:
        return next(iter(_STRATEGIES.keys()))
    return ""
