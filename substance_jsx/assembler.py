"""Host builder protocol and component assembly.

The host builder is the rendering backend's jQuery-like construction API.
It is consumed here, never implemented: anything exposing `create()` whose
nodes expose `on()`, `ref()`, `val()` and `append()` will do.
"""

import logging
from typing import Any, Callable, Mapping, Protocol

from .models import ConstructionPlan

logger = logging.getLogger(__name__)


class HostNode(Protocol):
    """A node under construction, as returned by `HostBuilder.create`."""

    def on(self, event_name: str, handler: Callable[..., Any]) -> "HostNode": ...

    def ref(self, value: Any) -> "HostNode": ...

    def val(self, value: Any) -> "HostNode": ...

    def append(self, child: Any) -> "HostNode": ...


class HostBuilder(Protocol):
    """Factory for host nodes."""

    def create(self, element: Any, props: Mapping[str, Any]) -> HostNode: ...


def create_component(builder: HostBuilder, plan: ConstructionPlan) -> HostNode:
    """Build a node from a plan using the host builder.

    Calls are made in a fixed order: create, one `on()` per event, `ref()`,
    `val()`, then one `append()` per child. Errors raised by the builder
    propagate as-is and leave the partially built node behind.

    Args:
        builder: Host builder used to create the node
        plan: Cleaned props, events, special props and children

    Returns:
        The node returned by `builder.create`
    """
    component = builder.create(plan.element, plan.props)

    for event in plan.events:
        logger.debug("Binding %r to '%s'", event.original_key, event.event_name)
        component.on(event.event_name, event.handler)

    if "ref" in plan.special_props:
        component.ref(plan.special_props["ref"].value)

    if "val" in plan.special_props:
        component.val(plan.special_props["val"].value)

    for child in plan.children:
        component.append(child)

    return component


__all__ = ["HostNode", "HostBuilder", "create_component"]
