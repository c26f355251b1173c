"""
Network connection attributes for server spans.

A framework integration provides a :class:`NetServerAttributesGetter` (or, when it has
Python socket addresses at hand, an :class:`InetSocketAddressNetServerAttributesGetter`)
and registers the extractor built from it::

    extractor = NetServerAttributesExtractor.create(MyGetter())

    attributes = DictAttributesBuilder()
    extractor.on_start(attributes, None, request)
"""

from .getter import NetServerAttributesGetter
from .inet import InetSocketAddressNetServerAttributesGetter
from .server import NetServerAttributesExtractor


__all__ = [
    "InetSocketAddressNetServerAttributesGetter",
    "NetServerAttributesExtractor",
    "NetServerAttributesGetter",
]
