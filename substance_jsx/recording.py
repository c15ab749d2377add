"""In-memory host builder that records every construction call.

Useful for inspecting what a tree translates to without a rendering
backend, and as the builder behind the command-line tool.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple


@dataclass(frozen=True)
class ComponentRef:
    """Reference to a composite component by name."""

    name: str


@dataclass
class BuilderCall:
    """One call made on the builder or on one of its nodes."""

    method: str
    node_id: int
    args: Tuple[Any, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "node": self.node_id,
            "args": [_describe(arg) for arg in self.args],
        }


@dataclass(eq=False)
class RecordedNode:
    """Node produced by RecordingBuilder."""

    node_id: int
    element: Any
    props: Dict[str, Any]
    builder: "RecordingBuilder" = field(repr=False)
    handlers: List[Tuple[str, Any]] = field(default_factory=list)
    children: List[Any] = field(default_factory=list)
    ref_value: Any = None
    value: Any = None
    has_ref: bool = False
    has_value: bool = False

    @property
    def tag(self) -> str:
        if isinstance(self.element, str):
            return self.element
        if isinstance(self.element, ComponentRef):
            return self.element.name
        return getattr(self.element, "__name__", type(self.element).__name__)

    @property
    def event_names(self) -> List[str]:
        return [name for name, _ in self.handlers]

    def on(self, event_name: str, handler: Any) -> "RecordedNode":
        self.builder._record("on", self, event_name, handler)
        self.handlers.append((event_name, handler))
        return self

    def ref(self, value: Any) -> "RecordedNode":
        self.builder._record("ref", self, value)
        self.ref_value = value
        self.has_ref = True
        return self

    def val(self, value: Any) -> "RecordedNode":
        self.builder._record("val", self, value)
        self.value = value
        self.has_value = True
        return self

    def append(self, child: Any) -> "RecordedNode":
        self.builder._record("append", self, child)
        self.children.append(child)
        return self


class RecordingBuilder:
    """Host builder keeping created nodes and the ordered call log.

    Args:
        fail_on: Elements (tags or component refs) whose creation raises
            RuntimeError, for exercising error propagation
    """

    def __init__(self, fail_on: Optional[Set[Any]] = None):
        self.fail_on = fail_on or set()
        self.calls: List[BuilderCall] = []
        self.nodes: List[RecordedNode] = []

    def create(self, element: Any, props: Mapping[str, Any]) -> RecordedNode:
        if element in self.fail_on:
            raise RuntimeError(f"Cannot create element: {element!r}")

        node = RecordedNode(
            node_id=len(self.nodes),
            element=element,
            props=dict(props),
            builder=self,
        )
        self.nodes.append(node)
        self._record("create", node, element, dict(props))
        return node

    def _record(self, method: str, node: RecordedNode, *args: Any) -> None:
        self.calls.append(BuilderCall(method=method, node_id=node.node_id, args=args))

    def call_sequence(self, node: Optional[RecordedNode] = None) -> List[str]:
        """Method names in call order, optionally for a single node."""
        return [
            call.method
            for call in self.calls
            if node is None or call.node_id == node.node_id
        ]


def _describe(value: Any) -> Any:
    """JSON-friendly stand-in for a recorded argument."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, RecordedNode):
        return {"node": value.node_id}
    if isinstance(value, ComponentRef):
        return {"component": value.name}
    if isinstance(value, dict):
        return {str(key): _describe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_describe(item) for item in value]
    if callable(value):
        return f"<callable {getattr(value, '__name__', type(value).__name__)}>"
    return repr(value)


__all__ = ["ComponentRef", "BuilderCall", "RecordedNode", "RecordingBuilder"]
