"""JSX runtime for builder-style UI backends.

Transpiled JSX calls `element(tag_or_component, props, *children)`; this
module turns each call into construction calls on a host builder:

    translate($$, "input", {"className": "field", "onInput": handle, "value": "x"})

becomes

    $$.create("input", {"class": "field"}).on("input", handle).val("x")

The builder is injected explicitly, either per call (`translate`), per
translator (`Translator(builder)`), or through the `$$` prop (`dom`).
"""

import logging
from typing import Any, Mapping, Optional

from .assembler import HostBuilder, HostNode, create_component
from .config import DEFAULT_CONFIG, TranslatorConfig
from .errors import MissingBuilderError
from .extract import (
    extract_event_handlers,
    extract_renamed_props,
    extract_special_props,
    merge_renamed_props,
    tidy_props,
)
from .models import ConstructionPlan

logger = logging.getLogger(__name__)


def is_composite(element: Any) -> bool:
    """Tag names are strings; anything else is a component reference."""
    return not isinstance(element, str)


class Translator:
    """Reusable JSX pragma bound to an optional builder and a config.

    A translator keeps no per-call state, so one instance can serve any
    number of trees and threads.
    """

    def __init__(self, builder: Optional[HostBuilder] = None, config: Optional[TranslatorConfig] = None):
        self.builder = builder
        self.config = config or DEFAULT_CONFIG

    def resolve_builder(self, element: Any, props: Mapping[str, Any]) -> HostBuilder:
        """Pick the injected builder, falling back to the `$$` prop."""
        if self.builder is not None:
            return self.builder

        builder = props.get(self.config.builder_key)
        if builder is None:
            raise MissingBuilderError(element, self.config.builder_key)
        return builder

    def plan(self, element: Any, props: Optional[Mapping[str, Any]] = None, *children: Any) -> ConstructionPlan:
        """Classify props and compute what the builder will be asked to do.

        All extractors see the original props; none of them sees another's
        output.
        """
        if props is None:
            props = {}

        composite = is_composite(element)

        events = extract_event_handlers(props, is_composite=composite)
        special_props = extract_special_props(props, is_component=composite)
        renamed_props = extract_renamed_props(props, self.config.rename_rules)

        omit = {self.config.builder_key}
        omit.update(event.original_key for event in events)
        omit.update(prop.original_prop_name for prop in renamed_props)
        omit.update(prop.original_prop_name for prop in special_props.values())

        clean_props = merge_renamed_props(tidy_props(props, omit), renamed_props)

        logger.debug(
            "Planned %r: %d event(s), special %s, renamed %s",
            element,
            len(events),
            sorted(special_props),
            [prop.original_prop_name for prop in renamed_props],
        )

        return ConstructionPlan(
            element=element,
            props=clean_props,
            events=tuple(events),
            special_props=special_props,
            children=children,
        )

    def __call__(self, element: Any, props: Optional[Mapping[str, Any]] = None, *children: Any) -> HostNode:
        """Translate one JSX element into host builder calls.

        Args:
            element: Tag name (str) or component reference
            props: Element props, None for no props
            *children: Child nodes or text, appended in order

        Returns:
            The node created by the host builder

        Raises:
            MissingBuilderError: If no builder was injected and props carry none
        """
        if props is None:
            props = {}

        builder = self.resolve_builder(element, props)
        plan = self.plan(element, props, *children)
        return create_component(builder, plan)


_prop_builder_translator = Translator()


def translate(builder: Optional[HostBuilder], element: Any, props: Optional[Mapping[str, Any]] = None, *children: Any) -> HostNode:
    """Translate one JSX element using an explicitly passed builder.

    A None builder falls back to `props["$$"]`.
    """
    if builder is None:
        return _prop_builder_translator(element, props, *children)
    return Translator(builder)(element, props, *children)


def dom(element: Any, props: Optional[Mapping[str, Any]] = None, *children: Any) -> HostNode:
    """JSX pragma for trees that pass the builder in `props["$$"]`."""
    return _prop_builder_translator(element, props, *children)


__all__ = ["Translator", "translate", "dom", "is_composite"]
