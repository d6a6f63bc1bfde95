# ==============================================
# TagParser
# ==============================================
#
# GRAMMAR:
#   tag       := directive (";" directive)*
#   directive := key ["=" value]
#
#   - Whitespace around key and value is dropped
#   - Only the first "=" splits, so "expr=a=b" keeps value "a=b"
#   - Empty directives (";;", leading/trailing ";") are skipped
#
# Parsing never raises. Bad input yields fewer (or no) instructions.
#
# ==============================================

import logging
from typing import List, Optional

from tago.model import FieldName, Instruction, InstructionIndex

logger = logging.getLogger(__name__)


class TagParser:
    DIRECTIVE_SEPARATOR = ";"
    KEY_VALUE_SEPARATOR = "="

    @classmethod
    def parse(cls, field_name: str, raw: Optional[str]) -> InstructionIndex:
        """
        Parse one field's raw tag text into an index scoped to that field.

        Args:
            field_name: Declared name of the field
            raw: Tag text for the configured tag identifier ("" or None if absent)

        Returns:
            InstructionIndex mapping each directive to [field_name]
        """
        index = InstructionIndex()
        if not raw:
            return index

        name = FieldName(field_name)
        for instruction in cls.parse_instructions(raw):
            index._add(instruction, name)

        logger.debug("Parsed %d instruction(s) for field %r", len(index), field_name)
        return index

    @classmethod
    def parse_instructions(cls, raw: Optional[str]) -> List[Instruction]:
        """
        Return the normalized instructions of a tag, in directive order.

        Repeated directives are returned each time they appear.
        """
        if not raw:
            return []

        instructions = []
        for directive in raw.split(cls.DIRECTIVE_SEPARATOR):
            normalized = cls.normalize_directive(directive)
            if not normalized:
                continue
            instructions.append(Instruction(normalized))
        return instructions

    @classmethod
    def normalize_directive(cls, directive: str) -> str:
        """
        Trim key and value of a single directive.

        Examples:
            " preload = true " → "preload=true"
            "omitempty"        → "omitempty"
            "expr = a=b"       → "expr=a=b"
            "   "              → ""
        """
        parts = directive.split(cls.KEY_VALUE_SEPARATOR, 1)
        return cls.KEY_VALUE_SEPARATOR.join(part.strip() for part in parts)
