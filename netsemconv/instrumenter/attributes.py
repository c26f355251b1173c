import abc
from types import MappingProxyType
from typing import TYPE_CHECKING
from typing import Dict
from typing import Mapping
from typing import Union


if TYPE_CHECKING:  # pragma: no cover
    from opentelemetry.trace import Span as OtelSpan


AttributeValue = Union[str, int]


class AttributesBuilder(abc.ABC):
    """Append-only destination for the attributes of a single span."""

    @abc.abstractmethod
    def set(self, key: str, value: AttributeValue) -> None:
        pass


class DictAttributesBuilder(AttributesBuilder):
    """Collects attributes in memory, for callers that create the span afterwards::

    attributes = DictAttributesBuilder()
    extractor.on_start(attributes, None, request)
    tracer.start_span("request", attributes=attributes.build())
    """

    def __init__(self) -> None:
        self._attributes: Dict[str, AttributeValue] = {}

    def set(self, key: str, value: AttributeValue) -> None:
        self._attributes[key] = value

    def build(self) -> Mapping[str, AttributeValue]:
        return MappingProxyType(dict(self._attributes))

    def __contains__(self, key):
        return key in self._attributes

    def __len__(self):
        return len(self._attributes)

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self._attributes)


class SpanAttributesBuilder(AttributesBuilder):
    """Writes attributes straight onto an OpenTelemetry span."""

    def __init__(self, span):
        # type: (OtelSpan) -> None
        self._span = span

    def set(self, key: str, value: AttributeValue) -> None:
        if not self._span.is_recording():
            return
        self._span.set_attribute(key, value)
