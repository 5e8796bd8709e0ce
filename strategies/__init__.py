"""Auto-discovery of Strategy subclasses in this package.

Every module here is imported and each concrete :class:`Strategy`
subclass is registered under its ``name``.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from pathlib import Path

from strategy import Strategy

_PKG_DIR = Path(__file__).resolve().parent


def _subclasses_in_module(mod) -> list[type[Strategy]]:
    found: list[type[Strategy]] = []
    for attr_name in dir(mod):
        obj = getattr(mod, attr_name)
        if (
            isinstance(obj, type)
            and issubclass(obj, Strategy)
            and obj is not Strategy
            and not inspect.isabstract(obj)
            and obj.__module__ == mod.__name__
        ):
            found.append(obj)
    return found


def discover_strategies() -> dict[str, type[Strategy]]:
    """Return ``{name: class}`` for every strategy in this package."""
    found: dict[str, type[Strategy]] = {}
    for info in sorted(pkgutil.iter_modules([str(_PKG_DIR)]), key=lambda i: i.name):
        mod = importlib.import_module(f"strategies.{info.name}")
        for cls in _subclasses_in_module(mod):
            name = cls.name
            if name in found:
                raise RuntimeError(
                    f"strategy name {name!r} used by both "
                    f"{found[name].__name__} and {cls.__name__}"
                )
            found[name] = cls
    return found


def get_strategy(name: str) -> type[Strategy]:
    strategies = discover_strategies()
    try:
        return strategies[name.lower()]
    except KeyError:
        raise ValueError(
            f"Strategy {name!r} not found. Available: {sorted(strategies)}"
        ) from None

