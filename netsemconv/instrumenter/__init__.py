from .attributes import AttributesBuilder
from .attributes import DictAttributesBuilder
from .attributes import SpanAttributesBuilder
from .extractor import AttributesExtractor
from .extractor import internal_set


__all__ = [
    "AttributesBuilder",
    "AttributesExtractor",
    "DictAttributesBuilder",
    "SpanAttributesBuilder",
    "internal_set",
]
