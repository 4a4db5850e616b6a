from dataclasses import dataclass, field
from typing import Callable, Dict, List

from deskperp.settings import Settings


@dataclass(frozen=True)
class Action:
    name: str
    handler: Callable
    description: str = ""
    similes: List[str] = field(default_factory=list)


_REGISTRY: Dict[str, Action] = {}


def register(name: str, similes: List[str] | None = None, description: str = ""):
    def deco(fn):
        _REGISTRY[name] = Action(
            name=name, handler=fn, description=description, similes=list(similes or [])
        )
        return fn

    return deco


def get(name: str) -> Action:
    key = name.upper()
    if key in _REGISTRY:
        return _REGISTRY[key]
    for action in _REGISTRY.values():
        if key in action.similes:
            return action
    raise KeyError(f"Action '{name}' not found. Registered: {list(_REGISTRY)}")


def available() -> list[str]:
    return sorted(_REGISTRY)


def validate(settings: Settings) -> bool:
    """Actions are offered only when a key and a network are configured."""
    return settings.is_configured
