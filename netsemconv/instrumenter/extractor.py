import abc
from typing import TYPE_CHECKING
from typing import Generic
from typing import Optional  # noqa:F401
from typing import TypeVar


if TYPE_CHECKING:  # pragma: no cover
    from opentelemetry.context import Context

    from .attributes import AttributesBuilder
    from .attributes import AttributeValue


REQUEST = TypeVar("REQUEST")
RESPONSE = TypeVar("RESPONSE")


def internal_set(attributes, key, value):
    # type: (AttributesBuilder, str, Optional[AttributeValue]) -> None
    """Set ``key`` on ``attributes`` unless ``value`` is None."""
    if value is not None:
        attributes.set(key, value)


class AttributesExtractor(abc.ABC, Generic[REQUEST, RESPONSE]):
    """Extracts span attributes from a request when the span starts and from
    the response when it ends.
    """

    @abc.abstractmethod
    def on_start(self, attributes, parent_context, request):
        # type: (AttributesBuilder, Optional[Context], REQUEST) -> None
        pass

    @abc.abstractmethod
    def on_end(self, attributes, context, request, response, error):
        # type: (AttributesBuilder, Optional[Context], REQUEST, Optional[RESPONSE], Optional[BaseException]) -> None
        pass


__all__ = ["AttributesExtractor", "REQUEST", "RESPONSE", "internal_set"]
