"""Prop classification for the translation pipeline.

Each extractor reads the same, unmodified props mapping and claims a
disjoint set of keys:

- event handlers (`onClick` -> `.on("click", ...)`)
- renamed attributes (`className` -> `class`)
- special builder calls (`ref` -> `.ref(...)`, `value` -> `.val(...)`)

Whatever is left, plus the renamed attributes, becomes the props the host
builder receives.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from .config import (
    DEFAULT_RENAME_RULES,
    EVENT_PREFIX_LENGTH,
    REF_PROP,
    VALUE_PROP,
    RenameRule,
    is_event_prop,
)
from .models import EventBinding, RenamedProp, SpecialProp

logger = logging.getLogger(__name__)


def extract_event_handlers(props: Mapping[str, Any], is_composite: bool = False) -> List[EventBinding]:
    """Collect props written in event syntax, in props order.

    The prop name needs the prefix "on" followed by an uppercase letter; the
    event name is the rest of the name lowercased, so `onClick` binds the
    `click` event and `onA` binds `a`.

    Composite components get their handlers as ordinary props, so nothing is
    extracted for them.

    Args:
        props: Original props of the element
        is_composite: True if the element is a component, not a tag name

    Returns:
        One EventBinding per event prop
    """
    if is_composite:
        return []

    return [
        EventBinding(
            event_name=prop_name[EVENT_PREFIX_LENGTH:].lower(),
            handler=prop_value,
            original_key=prop_name,
        )
        for prop_name, prop_value in props.items()
        if is_event_prop(prop_name)
    ]


def extract_renamed_props(
    props: Mapping[str, Any],
    rules: Sequence[RenameRule] = DEFAULT_RENAME_RULES,
) -> List[RenamedProp]:
    """Collect props that the host knows under another name.

    Presence is what counts: a falsy value is still renamed. Output follows
    the order of `rules`, not of `props`.
    """
    return [
        RenamedProp(
            name=rule.target_key,
            value=props[rule.source_key],
            original_prop_name=rule.source_key,
        )
        for rule in rules
        if rule.source_key in props
    ]


def extract_special_props(props: Mapping[str, Any], is_component: bool) -> Dict[str, SpecialProp]:
    """Collect props applied with dedicated builder calls.

    `ref` is always extracted. `value` is only extracted for tag elements;
    components receive it as a regular prop.

    Returns:
        Mapping with at most the slots "ref" and "val"
    """
    special_props = {}

    if REF_PROP in props:
        special_props["ref"] = SpecialProp(value=props[REF_PROP], original_prop_name=REF_PROP)

    if not is_component and VALUE_PROP in props:
        special_props["val"] = SpecialProp(value=props[VALUE_PROP], original_prop_name=VALUE_PROP)

    return special_props


def tidy_props(props: Mapping[str, Any], omit: Iterable[str]) -> Dict[str, Any]:
    """Return a copy of `props` without the names in `omit`.

    Names that are missing from `props`, or are not strings, are skipped.
    """
    clean_props = dict(props)

    for prop_name in omit:
        if not isinstance(prop_name, str):
            continue
        clean_props.pop(prop_name, None)

    return clean_props


def merge_renamed_props(props: Mapping[str, Any], renamed: Iterable[RenamedProp]) -> Dict[str, Any]:
    """Return a copy of `props` with renamed values under their new names.

    A renamed value replaces any prop already using the target name.
    """
    merged = dict(props)
    for prop in renamed:
        if prop.name in merged:
            logger.debug("'%s' overrides existing prop '%s'", prop.original_prop_name, prop.name)
        merged[prop.name] = prop.value
    return merged


__all__ = [
    "extract_event_handlers",
    "extract_renamed_props",
    "extract_special_props",
    "tidy_props",
    "merge_renamed_props",
]
