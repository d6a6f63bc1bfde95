# ==============================================
# TypeWalker
# ==============================================
#
# PURPOSE:
#   Reach the record type hidden behind one level of indirection.
#
#   Supported shapes (one level of each):
#     T
#     Optional[T]          (also T | None)
#     list[T]              (also List, Sequence, MutableSequence, tuple[T, ...])
#     list[Optional[T]]
#     Optional[list[T]]
#     Optional[list[Optional[T]]]
#
#   Annotated[...] wrappers are stripped at every step.
#   Anything else comes back unchanged; callers check is_record().
#
# ==============================================

import collections.abc
import dataclasses
import types
from typing import Annotated, Any, Optional, Union, get_args, get_origin


class TypeWalker:
    SEQUENCE_ORIGINS = (
        list,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
    )

    @classmethod
    def unwrap(cls, tp: Any) -> Any:
        """
        Unwrap optional → collection → optional-inside-collection.

        Examples:
            unwrap(Address)                  → Address
            unwrap(Optional[Address])        → Address
            unwrap(list[Address])            → Address
            unwrap(List[Optional[Address]])  → Address
            unwrap(int)                      → int
        """
        tp = cls._unwrap_optional(cls.strip_annotated(tp))

        item = cls._sequence_item(tp)
        if item is not None:
            tp = cls._unwrap_optional(cls.strip_annotated(item))

        return cls.strip_annotated(tp)

    @classmethod
    def is_record(cls, tp: Any) -> bool:
        """True if tp is a dataclass class (not an instance)."""
        return isinstance(tp, type) and dataclasses.is_dataclass(tp)

    @classmethod
    def record_type_of(cls, model: Any) -> type:
        """
        Resolve whatever an extraction entry point was given to a record type.

        Accepts a dataclass class, a dataclass instance, or a type hint
        wrapping a dataclass (Optional[T], list[T], ...).

        Raises:
            TypeError: If model does not resolve to a dataclass type
        """
        if dataclasses.is_dataclass(model) and not isinstance(model, type):
            return type(model)

        record_type = cls.unwrap(model)
        if not cls.is_record(record_type):
            raise TypeError(
                f"Expected a dataclass type or instance, got {model!r}"
            )
        return record_type

    @staticmethod
    def strip_annotated(tp: Any) -> Any:
        while get_origin(tp) is Annotated:
            tp = get_args(tp)[0]
        return tp

    @classmethod
    def _unwrap_optional(cls, tp: Any) -> Any:
        if get_origin(tp) not in (Union, types.UnionType):
            return tp

        members = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(members) != 1:
            # A real union (int | str), not an optional
            return tp
        return cls.strip_annotated(members[0])

    @classmethod
    def _sequence_item(cls, tp: Any) -> Optional[Any]:
        origin = get_origin(tp)
        args = get_args(tp)
        if not args:
            return None

        if origin in cls.SEQUENCE_ORIGINS and len(args) == 1:
            return args[0]

        # tuple[T, ...] is a homogeneous sequence; tuple[A, B] is not
        if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
            return args[0]

        return None
