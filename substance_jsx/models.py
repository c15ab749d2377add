"""Records passed between the translation steps."""

from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field


class EventBinding(BaseModel):
    """An `onXxx` prop redirected to a builder `.on()` call.

    The handler is stored as given and never called during translation.
    """

    event_name: str
    handler: Any
    original_key: str

    model_config = {
        "arbitrary_types_allowed": True,
        "frozen": True,
    }


class RenamedProp(BaseModel):
    """A prop value that will be re-inserted under its attribute name."""

    name: str
    value: Any
    original_prop_name: str

    model_config = {
        "arbitrary_types_allowed": True,
        "frozen": True,
    }


class SpecialProp(BaseModel):
    """A prop applied through a dedicated builder call (`ref` or `val`)."""

    value: Any
    original_prop_name: str

    model_config = {
        "arbitrary_types_allowed": True,
        "frozen": True,
    }


class ConstructionPlan(BaseModel):
    """Everything the assembler needs to build one node."""

    element: Any
    props: Dict[Any, Any] = Field(default_factory=dict)
    events: Tuple[EventBinding, ...] = ()
    special_props: Dict[str, SpecialProp] = Field(default_factory=dict)
    children: Tuple[Any, ...] = ()

    model_config = {
        "arbitrary_types_allowed": True,
        "frozen": True,
    }

    @property
    def is_composite(self) -> bool:
        return not isinstance(self.element, str)


__all__ = ["EventBinding", "RenamedProp", "SpecialProp", "ConstructionPlan"]
