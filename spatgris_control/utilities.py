"""Helpers for ordering XML elements by a numeric attribute."""

from __future__ import annotations

import re
from functools import cmp_to_key
from typing import Iterable
from xml.etree.ElementTree import Element

__all__ = ["XmlElementDataSorter"]

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _double_attribute(element: Element, name: str) -> float:
    """Read an attribute as a number; missing or non-numeric attributes count as 0."""
    text = element.get(name)
    if text is None:
        return 0.0
    match = _LEADING_NUMBER.match(text)
    return float(match.group(1)) if match else 0.0


class XmlElementDataSorter:
    """Compares XML elements by the numeric value of one attribute."""

    def __init__(self, attribute_to_sort_by: str, forwards: bool) -> None:
        self._attribute = attribute_to_sort_by
        self._direction = 1 if forwards else -1

    @property
    def attribute(self) -> str:
        return self._attribute

    @property
    def forwards(self) -> bool:
        return self._direction == 1

    def compare_elements(self, first: Element, second: Element) -> int:
        """Return -1, 0 or 1, reversed when sorting backwards."""
        a = _double_attribute(first, self._attribute)
        b = _double_attribute(second, self._attribute)
        result = -1 if a < b else (1 if a > b else 0)
        return self._direction * result

    def sort(self, elements: Iterable[Element]) -> list[Element]:
        """Return the elements in order; equal elements keep their relative order."""
        return sorted(elements, key=cmp_to_key(self.compare_elements))