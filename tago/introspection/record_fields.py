# ==============================================
# Record fields
# ==============================================
#
# PURPOSE:
#   Enumerate a record type's declared fields as (name, type, tags).
#
#   Two ways to attach tag text to a field:
#
#     @dataclass
#     class User:
#         name: str = tagged(gorm2="preload=true", default="")
#         email: Annotated[str, Tag(validate="required;email")] = ""
#
#   tagged() is dataclasses.field() with the tags placed in metadata.
#   When both sources set the same tag identifier, the field metadata wins.
#
# CLASSES / FUNCTIONS:
# --------------------
# - Tag                         → Marker for Annotated[...]
# - RecordField (dataclass)     → name, declared type, tags
# - tagged(**tags) -> Field     → dataclasses.field() with tag metadata
# - record_fields(record_type)  → list[RecordField] in declaration order
#
# ==============================================

import dataclasses
import logging
import sys
import types
import typing
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

# Keyword arguments of tagged() that go to dataclasses.field() instead of tags
_FIELD_KWARGS = ("default", "default_factory", "init", "repr", "hash", "compare", "kw_only")


class Tag:
    """Tag text attached through Annotated[T, Tag(name="...")]."""

    def __init__(self, **tags: str):
        self.tags: Dict[str, str] = dict(tags)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.tags.get(name, default)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self.tags == other.tags

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.tags.items())))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.tags.items())
        return f"Tag({args})"


@dataclass(frozen=True)
class RecordField:
    """
    One declared field of a record type.

    `type` is the resolved type hint, still wrapped (Optional, list,
    Annotated, ...). Use TypeWalker.unwrap() to reach the element type.
    """

    name: str
    type: Any
    tags: Mapping[str, Any] = field(default_factory=dict)

    def tag(self, tag_name: str) -> str:
        """
        Return the raw tag text for a tag identifier, or "" if absent.

        Non-string values are converted with str().
        """
        value = self.tags.get(tag_name)
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


def tagged(metadata: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Any:
    """
    Build a dataclasses.field() carrying tag text in its metadata.

    Example:
        preload: list[Order] = tagged(gorm2="preload=true", default_factory=list)

    Args:
        metadata: Extra metadata merged in first; use it for tag identifiers
                  that collide with field() arguments (e.g. "default")
        **kwargs: field() arguments (default, default_factory, init, repr,
                  hash, compare, kw_only); everything else is a tag

    Returns:
        A dataclasses.Field
    """
    field_kwargs = {name: kwargs.pop(name) for name in _FIELD_KWARGS if name in kwargs}

    merged: Dict[str, Any] = dict(metadata or {})
    merged.update(kwargs)
    return dataclasses.field(metadata=merged, **field_kwargs)


def record_fields(record_type: type) -> List[RecordField]:
    """
    List a dataclass's fields in declaration order (inherited fields first).

    Type hints are resolved with typing.get_type_hints so string
    annotations and self references work. A field whose hint cannot
    be resolved keeps its raw annotation; the other fields are unaffected.

    Args:
        record_type: A dataclass class

    Returns:
        A RecordField per declared field (ClassVar and InitVar excluded)

    Raises:
        TypeError: If record_type is not a dataclass
    """
    hints = _resolve_hints(record_type)

    result = []
    for dc_field in dataclasses.fields(record_type):
        declared = hints.get(dc_field.name, dc_field.type)

        tags: Dict[str, Any] = _annotated_tags(declared)
        tags.update(dc_field.metadata)

        result.append(RecordField(name=dc_field.name, type=declared, tags=tags))
    return result


def _resolve_hints(record_type: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(record_type, include_extras=True)
    except (NameError, TypeError) as e:
        logger.debug(
            "Could not resolve all type hints of %s (%s), resolving per field",
            record_type.__name__, e,
        )
    return _resolve_hints_per_field(record_type)


def _resolve_hints_per_field(record_type: type) -> Dict[str, Any]:
    """
    Resolve each annotation on its own so one bad hint (e.g. a name only
    imported under TYPE_CHECKING) does not hide the others.

    Namespaces follow typing.get_type_hints for classes: the defining
    module's globals take precedence over the class namespace.
    Annotations that still fail are kept as written.
    """
    hints: Dict[str, Any] = {}
    for base in reversed(record_type.__mro__):
        annotations = base.__dict__.get("__annotations__", {})
        if not annotations:
            continue

        module_ns = getattr(sys.modules.get(base.__module__), "__dict__", {})
        class_ns = dict(vars(base))

        for name, annotation in annotations.items():
            holder = types.SimpleNamespace(__annotations__={name: annotation})
            try:
                resolved = typing.get_type_hints(
                    holder, globalns=class_ns, localns=dict(module_ns), include_extras=True
                )
            except (NameError, TypeError, SyntaxError) as e:
                logger.debug(
                    "Keeping raw annotation of %s.%s: %s", base.__name__, name, e
                )
                hints[name] = annotation
                continue
            hints[name] = resolved[name]
    return hints


def _annotated_tags(hint: Any) -> Dict[str, Any]:
    """Collect Tag markers from Annotated[T, ...]. Later markers win."""
    tags: Dict[str, Any] = {}
    if typing.get_origin(hint) is typing.Annotated:
        for marker in typing.get_args(hint)[1:]:
            if isinstance(marker, Tag):
                tags.update(marker.tags)
    return tags
