from dataclasses import dataclass, field
from typing import List

from deskperp.actions import cancel, summary, trade  # noqa: F401  (registers actions)
from deskperp.actions.registry import Action, available, get


@dataclass(frozen=True)
class Plugin:
    name: str
    description: str
    actions: List[Action] = field(default_factory=list)


desk_exchange_plugin = Plugin(
    name="deskExchange",
    description="DESK Exchange plugin",
    actions=[get(n) for n in available()],
)
