#!/usr/bin/env python
"""
Element classes for building request bodies.  Each subclass carries
its tag in Clark notation, instances carry the attributes, text and
children of one element, and xmlelement() turns the tree into lxml
elements with the d: and c: prefixes from the namespace map.

Children are added with + or append()::

    Propfind() + [Prop() + [DisplayName()]]
"""
import sys
from collections.abc import Iterable
from typing import ClassVar
from typing import Dict
from typing import List
from typing import Optional
from typing import Union

from lxml import etree
from lxml.etree import _Element

from caldavclient.lib.namespace import nsmap
from caldavclient.lib.python_utilities import to_unicode

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self


class BaseElement:
    tag: ClassVar[Optional[str]] = None

    def __init__(
        self, name: Optional[str] = None, value: Union[str, bytes, None] = None
    ) -> None:
        self.children: List[BaseElement] = []
        self.attributes: Dict[str, str] = {}
        self.value: Optional[str] = to_unicode(value)
        if name is not None:
            self.attributes["name"] = name

    def __add__(self, other: Union["BaseElement", Iterable["BaseElement"]]) -> Self:
        return self.append(other)

    def __str__(self) -> str:
        return self.tostring(pretty_print=True).decode("utf-8")

    def __repr__(self) -> str:
        return "%s(%s)" % (self.__class__.__name__, self.tag)

    def append(self, element: Union["BaseElement", Iterable["BaseElement"]]) -> Self:
        if isinstance(element, BaseElement):
            self.children.append(element)
        else:
            self.children.extend(element)
        return self

    def xmlelement(self) -> _Element:
        if self.tag is None:
            raise ValueError("%s has no tag" % self.__class__.__name__)
        root = etree.Element(self.tag, self.attributes, nsmap=nsmap)
        root.text = self.value
        for child in self.children:
            ## lxml drops the namespace declarations the parent already has
            root.append(child.xmlelement())
        return root

    def tostring(self, pretty_print: bool = False) -> bytes:
        """The element as an UTF-8 encoded XML document"""
        return etree.tostring(
            self.xmlelement(),
            encoding="utf-8",
            xml_declaration=True,
            pretty_print=pretty_print,
        )


class NamedBaseElement(BaseElement):
    """An element that is meaningless without the name attribute"""

    def __init__(self, name: Optional[str] = None) -> None:
        super(NamedBaseElement, self).__init__(name=name)

    def xmlelement(self) -> _Element:
        if self.attributes.get("name") is None:
            raise ValueError("name attribute must be defined for %s" % self.tag)
        return super(NamedBaseElement, self).xmlelement()


class ValuedBaseElement(BaseElement):
    def __init__(self, value: Union[str, bytes, None] = None) -> None:
        super(ValuedBaseElement, self).__init__(value=value)


class GenericElement(BaseElement):
    """
    An element where the tag is given run-time rather than by the
    class, used for properties requested by name and for the leafs of
    a filter tree.  The tag should be in Clark notation.
    """

    def __init__(
        self,
        tag: str,
        attributes: Optional[Dict[str, str]] = None,
        value: Union[str, bytes, None] = None,
    ) -> None:
        super(GenericElement, self).__init__(value=value)
        self.tag = tag
        self.attributes.update(attributes or {})
