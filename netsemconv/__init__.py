from ._version import __version__
from ._version import version
from .instrumenter import AttributesBuilder
from .instrumenter import DictAttributesBuilder
from .instrumenter import SpanAttributesBuilder
from .instrumenter.net import InetSocketAddressNetServerAttributesGetter
from .instrumenter.net import NetServerAttributesExtractor
from .instrumenter.net import NetServerAttributesGetter


__all__ = [
    "AttributesBuilder",
    "DictAttributesBuilder",
    "InetSocketAddressNetServerAttributesGetter",
    "NetServerAttributesExtractor",
    "NetServerAttributesGetter",
    "SpanAttributesBuilder",
    "__version__",
    "version",
]
