import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from jsonview.core import encoding
from jsonview.core.errors import AttributesNotImplementedError
from jsonview.core.helpers.utils import as_utc
from jsonview.core.models.options import EncodeOptions
from jsonview.core.ports.encoder import Encoder

_logger = logging.getLogger("jsonview.serializer")


class Serializer:
    """
    Describes how to serialize one kind of domain object, by declaring the
    structure of the JSON document it turns into.

    Subclasses implement ``attributes()``; everything else is shared:

        class PersonSerializer(Serializer):
            def attributes(self):
                return {"name": self.object.name, "age": self.object.age}

        PersonSerializer(person).render()
        PersonSerializer.list(people).render(pretty=True)

    The encoder is either injected at construction or, when omitted, the
    process-wide default looked up each time ``render()`` runs.
    """

    MIME_TYPE = "application/json"

    def __init__(self, obj: Any, *, encoder: Encoder | None = None) -> None:
        self._object = obj
        self._encoder = encoding.as_encoder(encoder) if encoder is not None else None

    @property
    def object(self) -> Any:
        """The wrapped domain object, exactly as given."""
        return self._object

    @property
    def encoder(self) -> Encoder:
        """The injected encoder, or the current process-wide default."""
        if self._encoder is not None:
            return self._encoder
        return encoding.get_default_encoder()

    def attributes(self) -> Any:
        """
        Return the plain structure (usually a dict) to encode.

        Raises AttributesNotImplementedError unless overridden.
        """
        raise AttributesNotImplementedError(type(self))

    def render(self, options: EncodeOptions | None = None, **overrides) -> str:
        """
        Encode ``attributes()`` with the active encoder.

        Keyword overrides replace single fields of ``options``, e.g.
        ``render(pretty=True)``. Errors raised while computing the
        attributes or encoding them are not caught.
        """
        if overrides:
            options = (options or EncodeOptions()).merge(**overrides)

        data = self.attributes()
        encoder = self.encoder
        _logger.debug(f"Rendering {type(self).__name__} with {encoder!r}")

        return encoder.encode(data, options)

    def mime_type(self) -> str:
        return self.MIME_TYPE

    def last_modified(self) -> datetime | None:
        """When the wrapped object last changed, if known."""
        return None

    def cache_key(self) -> str | None:
        """A string that changes whenever the rendered output would."""
        return None

    @classmethod
    def list(cls, collection: Iterable[Any], *args, **kwargs) -> "ListSerializer":
        """
        Wrap an iterable of objects, each serialized with this class.

        Extra arguments are forwarded to every item's constructor, except
        ``encoder`` which is used by the list itself.
        """
        return ListSerializer(collection, *args, item_serializer=cls, **kwargs)


class ListSerializer(Serializer):
    """
    Serializes a sequence of objects by delegating each element to an item
    serializer. Prefer ``ItemSerializer.list(objects)`` over building this
    directly.
    """

    def __init__(
        self,
        collection: Iterable[Any],
        *args,
        item_serializer: type[Serializer],
        encoder: Encoder | None = None,
        **kwargs
    ) -> None:
        super().__init__(None, encoder=encoder)
        self._item_serializer = item_serializer
        self._items = tuple(
            item_serializer(obj, *args, **kwargs) for obj in collection
        )

    @property
    def item_serializer(self) -> type[Serializer]:
        return self._item_serializer

    @property
    def items(self) -> tuple[Serializer, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def attributes(self) -> list[Any]:
        return [item.attributes() for item in self._items]

    def last_modified(self) -> datetime | None:
        stamps = [
            as_utc(stamp) for stamp in (item.last_modified() for item in self._items)
            if stamp is not None
        ]
        return max(stamps) if stamps else None

    def cache_key(self) -> str | None:
        keys = [item.cache_key() for item in self._items]
        if not keys or any(key is None for key in keys):
            return None
        return "-".join(keys)
