# ==============================================
# IndexBuilder
# ==============================================
#
# PURPOSE:
#   Build the InstructionIndex of a record type for one tag identifier.
#
# CLASS: IndexBuilder
# -------------------
#   Constructor:
#   ------------
#   - __init__(tag_name: str)
#       The tag identifier read on every field ("gorm2", "validate", ...).
#
#   Methods:
#   --------
#   - from_field(record_field) -> InstructionIndex
#       Parse the tag text of a single field.
#
#   - build(model) -> InstructionIndex
#       Top-level fields only. Names are the bare field names.
#
#   - build_nested(model, separator) -> InstructionIndex
#       Same, plus the fields of every nested record, named
#       parent + separator + child ("Field3.Subfield1").
#
# NESTED TRAVERSAL:
#   For each field, in declaration order:
#     1. Add the field's own instructions under prefix + name
#     2. If its unwrapped type is a record, recurse with
#        prefix + name + separator and append the (already prefixed)
#        result
#   A record type already on the current path (the record itself, or
#   an ancestor) is not descended into again.
#
# ==============================================

import logging
from typing import Any, Tuple

from tago.introspection import RecordField, TypeWalker, record_fields
from tago.model import InstructionIndex
from tago.parsing import TagParser

logger = logging.getLogger(__name__)


class IndexBuilder:
    """Extracts instructions for one tag identifier from record types."""

    def __init__(self, tag_name: str):
        self.tag_name = tag_name

    def from_field(self, record_field: RecordField) -> InstructionIndex:
        """
        Parse one field's tag text into a single-field index.

        Args:
            record_field: The field to read

        Returns:
            Instructions mapped to [record_field.name]; empty if untagged
        """
        return TagParser.parse(record_field.name, record_field.tag(self.tag_name))

    def build(self, model: Any) -> InstructionIndex:
        """
        Extract instructions from the top-level fields of a record.

        Args:
            model: Dataclass type, dataclass instance, or a hint wrapping one

        Returns:
            A fresh InstructionIndex

        Raises:
            TypeError: If model does not resolve to a dataclass type
        """
        record_type = TypeWalker.record_type_of(model)

        index = InstructionIndex()
        for record_field in record_fields(record_type):
            index._concat(self.from_field(record_field), "")

        logger.debug(
            "Built %d instruction(s) for %s (tag %r)",
            len(index), record_type.__name__, self.tag_name,
        )
        return index

    def build_nested(self, model: Any, separator: str = ".") -> InstructionIndex:
        """
        Extract instructions from a record and every record nested in it.

        Example:
            @dataclass
            class Nested:
                sub: str = tagged(gorm2="otherOption=value2", default="")

            @dataclass
            class Model:
                nested: Nested = tagged(gorm2="preload=true", default_factory=Nested)

            IndexBuilder("gorm2").build_nested(Model, ".")
            → {"preload=true": ("nested",), "otherOption=value2": ("nested.sub",)}

        Args:
            model: Dataclass type, dataclass instance, or a hint wrapping one
            separator: Inserted between a parent field name and its children

        Returns:
            A fresh InstructionIndex

        Raises:
            TypeError: If model does not resolve to a dataclass type
        """
        record_type = TypeWalker.record_type_of(model)
        return self._build_nested(record_type, "", separator, (record_type,))

    def _build_nested(
        self,
        record_type: type,
        prefix: str,
        separator: str,
        path: Tuple[type, ...],
    ) -> InstructionIndex:
        index = InstructionIndex()

        for record_field in record_fields(record_type):
            index._concat(self.from_field(record_field), prefix)

            nested_type = TypeWalker.unwrap(record_field.type)
            if not TypeWalker.is_record(nested_type):
                continue

            # path[-1] is record_type itself, so this also stops self references
            if nested_type in path:
                logger.debug(
                    "Not descending into %s%s: %s is already being traversed",
                    prefix, record_field.name, nested_type.__name__,
                )
                continue

            nested = self._build_nested(
                nested_type,
                prefix + record_field.name + separator,
                separator,
                path + (nested_type,),
            )
            # Names in nested already carry the full prefix
            index._concat(nested, "")

        return index
