"""Tests for XML serialization of recorded trees."""

from substance_jsx import ComponentRef, RecordingBuilder, translate
from .xml import serialize_to_xml, _serialize_prop_value


def handler(event):
    pass


class TestXMLSerialization:
    """Test suite for XML serialization."""

    def setup_method(self):
        self.builder = RecordingBuilder()

    def el(self, element, props=None, *children):
        return translate(self.builder, element, props, *children)

    def test_serialize_none(self):
        assert serialize_to_xml(None) == ""

    def test_self_closing(self):
        """Element with no children becomes self-closing tag."""
        assert serialize_to_xml(self.el("br")) == "<br />"

    def test_renamed_attribute(self):
        """Renamed props show under their attribute name."""
        node = self.el("label", {"htmlFor": "name"}, "Name")
        assert serialize_to_xml(node) == '<label for="name">Name</label>'

    def test_events_and_value(self):
        """Bound events and val() value become attributes."""
        node = self.el("input", {"className": "field", "onInput": handler, "value": "x"})
        assert serialize_to_xml(node) == '<input class="field" value="x" events="input" />'

    def test_nested_elements(self):
        """Element children are indented."""
        item1 = self.el("li", {}, "One")
        item2 = self.el("li", {}, "Two")
        node = self.el("ul", {"id": "list"}, item1, item2)

        expected = '''<ul id="list">
  <li>One</li>
  <li>Two</li>
</ul>'''
        assert serialize_to_xml(node) == expected

    def test_component_tag(self):
        """Component refs serialize under their name, keeping value as a prop."""
        node = self.el(ComponentRef("DatePicker"), {"value": "2024-01-01", "onChange": handler})
        assert serialize_to_xml(node) == '<DatePicker value="2024-01-01" />'

    def test_escaping(self):
        """Attribute values and text are escaped."""
        node = self.el("p", {"title": 'a "b" & c'}, "<hi>")
        assert serialize_to_xml(node) == '<p title="a &quot;b&quot; &amp; c">&lt;hi&gt;</p>'

    def test_none_props_skipped(self):
        node = self.el("div", {"hidden": None, "id": "a"})
        assert serialize_to_xml(node) == '<div id="a" />'

    def test_invalid_attribute_names_dropped(self):
        """Prop names that are not XML names cannot inject attributes."""
        node = self.el("div", {'a" onload="x': "1", "data x": "2", "<b>": "3", 7: "4", "data-id": "5"})
        assert serialize_to_xml(node) == '<div data-id="5" />'

    def test_val_none_shown(self):
        """A val() call is rendered even when its value is None."""
        node = self.el("input", {"value": None})
        assert node.has_value
        assert serialize_to_xml(node) == '<input value="" />'

    def test_mixed_children_inline(self):
        """Text next to elements keeps everything on one line."""
        node = self.el("p", {}, "a ", self.el("b", {}, "bold"), " c")
        assert serialize_to_xml(node) == "<p>a <b>bold</b> c</p>"

    def test_prop_values(self):
        assert _serialize_prop_value(True) == "true"
        assert _serialize_prop_value(3) == "3"
        assert _serialize_prop_value({"a": 1}) == '{"a": 1}'
        assert _serialize_prop_value([1, 2]) == "[1, 2]"
