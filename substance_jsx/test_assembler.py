"""Tests for component assembly."""

from unittest.mock import Mock, call

import pytest

from substance_jsx.assembler import create_component
from substance_jsx.models import ConstructionPlan, EventBinding, SpecialProp


def handler(event):
    pass


class TestCreateComponent:
    """Test the fixed order of builder calls."""

    def test_full_call_order(self):
        """create, on, ref, val, then append."""
        builder = Mock()
        plan = ConstructionPlan(
            element="input",
            props={"class": "field"},
            events=(
                EventBinding(event_name="input", handler=handler, original_key="onInput"),
                EventBinding(event_name="blur", handler=handler, original_key="onBlur"),
            ),
            special_props={
                "val": SpecialProp(value="text", original_prop_name="value"),
                "ref": SpecialProp(value="field", original_prop_name="ref"),
            },
            children=("a", "b"),
        )

        node = create_component(builder, plan)

        assert node is builder.create.return_value
        assert builder.mock_calls == [
            call.create("input", {"class": "field"}),
            call.create().on("input", handler),
            call.create().on("blur", handler),
            call.create().ref("field"),
            call.create().val("text"),
            call.create().append("a"),
            call.create().append("b"),
        ]

    def test_empty_plan(self):
        """An empty plan only creates the node."""
        builder = Mock()
        create_component(builder, ConstructionPlan(element="div"))
        assert builder.mock_calls == [call.create("div", {})]

    def test_falsy_special_values_applied(self):
        """A present slot is applied even with a falsy value."""
        builder = Mock()
        create_component(builder, ConstructionPlan(
            element="input",
            special_props={"val": SpecialProp(value="", original_prop_name="value")},
        ))
        builder.create.return_value.val.assert_called_once_with("")

    def test_builder_errors_propagate(self):
        """Errors from the host are not caught and stop assembly."""
        builder = Mock()
        builder.create.return_value.ref.side_effect = KeyError("ref")
        plan = ConstructionPlan(
            element="div",
            special_props={"ref": SpecialProp(value="r", original_prop_name="ref")},
            children=("child",),
        )

        with pytest.raises(KeyError):
            create_component(builder, plan)

        builder.create.return_value.append.assert_not_called()

    def test_created_node_returned_not_chain_result(self):
        """The node from create() is returned whatever on() returns."""
        builder = Mock()
        builder.create.return_value.on.return_value = "something else"
        plan = ConstructionPlan(
            element="a",
            events=(EventBinding(event_name="click", handler=handler, original_key="onClick"),),
        )
        assert create_component(builder, plan) is builder.create.return_value
