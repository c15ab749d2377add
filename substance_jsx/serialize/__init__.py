"""Serialization of recorded node trees."""

from .xml import serialize_to_xml

__all__ = ["serialize_to_xml"]
