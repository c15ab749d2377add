"""Translator configuration and the static prop tables."""

from __future__ import annotations

import re
from typing import Tuple

from pydantic import BaseModel, model_validator

from .errors import RuleConflictError

# "on" followed by an uppercase letter, e.g. onClick -> click
EVENT_PROP_PATTERN = re.compile(r"^on[A-Z]")
EVENT_PREFIX_LENGTH = 2

BUILDER_KEY = "$$"
REF_PROP = "ref"
VALUE_PROP = "value"

SPECIAL_PROP_NAMES = frozenset({REF_PROP, VALUE_PROP})


def is_event_prop(name) -> bool:
    """Check whether a prop name uses the `onXxx` event syntax."""
    return isinstance(name, str) and EVENT_PROP_PATTERN.match(name) is not None


class RenameRule(BaseModel):
    """A prop that is passed to the host under a different attribute name."""

    source_key: str
    target_key: str

    model_config = {
        "frozen": True,
    }


DEFAULT_RENAME_RULES: Tuple[RenameRule, ...] = (
    RenameRule(source_key="className", target_key="class"),
    RenameRule(source_key="htmlFor", target_key="for"),
)


class TranslatorConfig(BaseModel):
    """Closed tables used by a translator for its whole lifetime.

    The rename table may be replaced or extended, but every key it names
    must stay clear of event props, special props and the builder key so
    that no prop is ever claimed by two categories.
    """

    builder_key: str = BUILDER_KEY
    rename_rules: Tuple[RenameRule, ...] = DEFAULT_RENAME_RULES

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="after")
    def check_disjoint_claims(self) -> "TranslatorConfig":
        if is_event_prop(self.builder_key) or self.builder_key in SPECIAL_PROP_NAMES:
            raise RuleConflictError(self.builder_key, "cannot be used as the builder key")

        reserved = SPECIAL_PROP_NAMES | {self.builder_key}
        sources = set()
        for rule in self.rename_rules:
            for key in (rule.source_key, rule.target_key):
                if is_event_prop(key):
                    raise RuleConflictError(key, "matches the event prop pattern")
                if key in reserved:
                    raise RuleConflictError(key, "is reserved")
            if rule.source_key in sources:
                raise RuleConflictError(rule.source_key, "is renamed more than once")
            sources.add(rule.source_key)

        for rule in self.rename_rules:
            if rule.target_key in sources:
                raise RuleConflictError(rule.target_key, "is both a rename target and a rename source")
        return self

    @property
    def rename_sources(self) -> Tuple[str, ...]:
        return tuple(rule.source_key for rule in self.rename_rules)

    def with_renames(self, *rules: RenameRule) -> "TranslatorConfig":
        """Return a new config with `rules` appended to the rename table."""
        return TranslatorConfig(
            builder_key=self.builder_key,
            rename_rules=self.rename_rules + tuple(rules),
        )


DEFAULT_CONFIG = TranslatorConfig()


__all__ = [
    "EVENT_PROP_PATTERN",
    "BUILDER_KEY",
    "REF_PROP",
    "VALUE_PROP",
    "RenameRule",
    "DEFAULT_RENAME_RULES",
    "TranslatorConfig",
    "DEFAULT_CONFIG",
    "is_event_prop",
]
