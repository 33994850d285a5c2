"""
Sans-I/O WebDAV/CalDAV protocol layer.

Builds request bodies and parses response bodies as pure data
transformations, the DAVClient does the I/O.

- types: DAVMethod, DAVRequest, DAVResponse, ResourceType
- filters: filter tree nodes for REPORT requests
- xml_builders: pure functions to build XML request bodies
- xml_parsers: pure functions to parse XML response bodies
"""

from .types import (
    DAVMethod,
    DAVRequest,
    DAVResponse,
    ResourceType,
)
from .filters import (
    AttributeFilter,
    CompFilter,
    PropFilter,
    filters_from_mapping,
    text_match,
    time_range,
)
from .xml_builders import (
    build_request_body,
)
from .xml_parsers import (
    parse_multistatus,
    success_properties,
)

__all__ = [
    # Types
    "DAVMethod",
    "DAVRequest",
    "DAVResponse",
    "ResourceType",
    # Filters
    "AttributeFilter",
    "CompFilter",
    "PropFilter",
    "filters_from_mapping",
    "text_match",
    "time_range",
    # XML Builders
    "build_request_body",
    # XML Parsers
    "parse_multistatus",
    "success_properties",
]
