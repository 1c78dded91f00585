"""JSON-pointer lookups over delta documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

_MISSING = object()


@runtime_checkable
class FieldSource(Protocol):
    """Anything that can answer "which string sits at this path?"."""

    def lookup(self, path: str) -> str | None: ...


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _sequence_index(token: str) -> int | None:
    """Return the array index for a token, or None if it is not a canonical one."""
    if not token.isdigit() or not token.isascii():
        return None
    if token.startswith("0") and len(token) != 1:
        return None
    return int(token)


def resolve_pointer(document: Any, pointer: str) -> Any:
    """Resolve an RFC 6901 pointer against nested mappings and sequences.

    Returns the addressed value, or ``None`` when any step is missing.
    Mapping keys are matched as strings, so ``/sectors/0/value`` resolves
    against both a list of sectors and an index-keyed object of sectors.
    """
    if pointer == "":
        return document
    if not pointer.startswith("/"):
        return None

    target: Any = document
    for raw_token in pointer[1:].split("/"):
        token = raw_token.replace("~1", "/").replace("~0", "~")
        if isinstance(target, Mapping):
            target = target.get(token, _MISSING)
        elif _is_sequence(target):
            index = _sequence_index(token)
            if index is None or index >= len(target):
                return None
            target = target[index]
        else:
            return None
        if target is _MISSING:
            return None
    return target


def _last_entry(container: Any) -> Any:
    # Only arrays have a "last" stint; index-keyed objects patch older ones
    if _is_sequence(container) and container:
        return container[-1]
    return None


class DocumentSource:
    """FieldSource over a parsed JSON delta, which may be missing entirely.

    A value counts as present only when it has the requested type: missing
    keys, ``null`` and values of another type all read as ``None``.
    """

    def __init__(self, document: Any = None) -> None:
        self._document = document

    def __repr__(self) -> str:
        return f"DocumentSource({self._document!r})"

    @property
    def document(self) -> Any:
        return self._document

    def lookup(self, path: str) -> str | None:
        value = resolve_pointer(self._document, path)
        return value if isinstance(value, str) else None

    def lookup_int(self, path: str) -> int | None:
        value = resolve_pointer(self._document, path)
        # bool is an int subclass but never a lap count
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    def last_item(self, path: str) -> DocumentSource | None:
        """Return a source over the last element of the list at ``path``."""
        entry = _last_entry(resolve_pointer(self._document, path))
        if entry is None:
            return None
        return DocumentSource(entry)


def as_source(update: Any) -> FieldSource:
    """Wrap a raw delta in a DocumentSource unless it already is a FieldSource."""
    if isinstance(update, FieldSource):
        return update
    return DocumentSource(update)


def as_document(update: Any) -> DocumentSource:
    """Wrap a raw delta in a DocumentSource.

    Other FieldSource implementations only answer string lookups, which is
    not enough for list and integer probes, so they are rejected.
    """
    if isinstance(update, DocumentSource):
        return update
    if isinstance(update, FieldSource):
        raise TypeError(
            f"expected a mapping, None or DocumentSource, got {type(update).__name__}"
        )
    return DocumentSource(update)
