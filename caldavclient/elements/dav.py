#!/usr/bin/env python
from typing import ClassVar

from .base import BaseElement
from .base import ValuedBaseElement
from caldavclient.lib.namespace import ns


# Operations
class Propfind(BaseElement):
    tag: ClassVar[str] = ns("d", "propfind")


# Components / Data
class Prop(BaseElement):
    tag: ClassVar[str] = ns("d", "prop")


# Properties
class ResourceType(BaseElement):
    tag: ClassVar[str] = ns("d", "resourcetype")


class DisplayName(ValuedBaseElement):
    tag: ClassVar[str] = ns("d", "displayname")


class Href(BaseElement):
    tag: ClassVar[str] = ns("d", "href")


class Response(BaseElement):
    tag: ClassVar[str] = ns("d", "response")


class Status(BaseElement):
    tag: ClassVar[str] = ns("d", "status")


class PropStat(BaseElement):
    tag: ClassVar[str] = ns("d", "propstat")


class MultiStatus(BaseElement):
    tag: ClassVar[str] = ns("d", "multistatus")


class ResponseDescription(ValuedBaseElement):
    tag: ClassVar[str] = ns("d", "responsedescription")


class CurrentUserPrincipal(BaseElement):
    tag: ClassVar[str] = ns("d", "current-user-principal")
