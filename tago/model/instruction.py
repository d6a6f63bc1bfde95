# ==============================================
# Instruction / FieldName
# ==============================================
#
# PURPOSE:
#   The two string value types every index is made of.
#
# CLASSES:
# --------
# - Instruction (str)
#     A normalized directive: "key" or "key=value".
#     Identity is the full string, so "preload" and "preload=true"
#     are different instructions.
#
#     Properties:
#     -----------
#     - key   -> str   Text before the first "=", trimmed
#     - value -> str   Text after the first "=", trimmed, or "true"
#
# - FieldName (str)
#     A field path from the traversal root, e.g. "Field3.Subfield1".
#
#     Methods:
#     --------
#     - add_prefix(prefix: str) -> FieldName
#         Plain concatenation. The separator must already be in prefix.
#
# ==============================================

from typing import Optional


class Instruction(str):
    """A single normalized key[=value] directive."""

    DEFAULT_VALUE = "true"

    @classmethod
    def from_parts(cls, key: str, value: Optional[str] = None) -> "Instruction":
        """
        Build an instruction from its parts, trimming both.

        Args:
            key: Directive key
            value: Directive value, or None for a bare flag

        Returns:
            "key" when value is None, otherwise "key=value"
        """
        key = key.strip()
        if value is None:
            return cls(key)
        return cls(f"{key}={value.strip()}")

    @property
    def key(self) -> str:
        return self.split("=", 1)[0].strip()

    @property
    def value(self) -> str:
        """
        Value of the instruction.

        A bare flag has no "=", and is read as "true" so that
        `preload` behaves like `preload=true` for callers that
        only look at key/value.
        """
        parts = self.split("=", 1)
        if len(parts) > 1:
            return parts[1].strip()
        return self.DEFAULT_VALUE

    def __repr__(self) -> str:
        return f"Instruction({str.__repr__(self)})"


class FieldName(str):
    """Path of a field, optionally prefixed by its enclosing fields."""

    def add_prefix(self, prefix: str) -> "FieldName":
        return FieldName(prefix + self)

    def __repr__(self) -> str:
        return f"FieldName({str.__repr__(self)})"
