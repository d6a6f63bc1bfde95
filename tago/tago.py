# ==============================================
# Tago facade
# ==============================================
#
# PURPOSE:
#   One object bound to one tag identifier, exposing every operation:
#
#     @dataclass
#     class MyModel:
#         field1: str = tagged(gorm2="preload=true;otherOption=value", default="")
#         field2: int = 0
#
#     t = Tago(name="gorm2")
#     tags = t.get(MyModel)
#     # {"preload=true": ("field1",), "otherOption=value": ("field1",)}
#
#     t.apply(tags, {"preload=true": lambda field: print("Preloading", field)})
#
# USES:
#   - model/         → Instruction, FieldName, InstructionIndex
#   - parsing/       → TagParser (via IndexBuilder)
#   - introspection/ → RecordField, TypeWalker (via IndexBuilder)
#   - extraction/    → IndexBuilder, apply, apply_one, has_instruction
#   - config.py      → defaults for from_config()
#
# ==============================================

from typing import Any, Mapping, Optional, Sequence

from tago.config import TagoConfig, get_config
from tago.extraction import Action, IndexBuilder, apply, apply_one, has_instruction
from tago.introspection import RecordField
from tago.model import FieldName, InstructionIndex


class Tago:
    """
    Reads the tag text of one tag identifier off record types.

    A Tago holds no state besides its configuration; every call builds
    a fresh index. Cache the result yourself if you dispatch against
    the same record type repeatedly.
    """

    def __init__(self, name: str, separator: str = "."):
        """
        Args:
            name: Tag identifier to read on every field ("gorm2", "validate", ...)
            separator: Default separator for get_nested()

        Raises:
            ValueError: If name is empty
        """
        if not name or not name.strip():
            raise ValueError("Tag name must be a non-empty string")

        self.name = name
        self.separator = separator
        self._builder = IndexBuilder(name)

    @classmethod
    def from_config(cls, config: Optional[TagoConfig] = None) -> "Tago":
        """Build a Tago from TagoConfig (environment / .env by default)."""
        config = config or get_config()
        return cls(name=config.tag_name, separator=config.separator)

    def __repr__(self) -> str:
        return f"Tago(name={self.name!r}, separator={self.separator!r})"

    # ======================================
    # Extraction
    # ======================================
    def get_from_field(self, record_field: RecordField) -> InstructionIndex:
        return self._builder.from_field(record_field)

    def get(self, model: Any) -> InstructionIndex:
        """
        Instructions of the top-level fields only.

        Args:
            model: Dataclass type, dataclass instance, or a hint wrapping one
        """
        return self._builder.build(model)

    def get_nested(self, model: Any, separator: Optional[str] = None) -> InstructionIndex:
        """
        Instructions of the record and of every record nested in it.

        Nested field names are prefixed with their parent field name and
        the separator ("address.city").

        Args:
            model: Dataclass type, dataclass instance, or a hint wrapping one
            separator: Overrides the instance separator for this call
        """
        if separator is None:
            separator = self.separator
        return self._builder.build_nested(model, separator)

    # ======================================
    # Dispatch
    # ======================================
    def apply(
        self,
        instructions: Mapping[str, Sequence[FieldName]],
        instruction_mapping: Mapping[str, Action],
    ) -> None:
        apply(instructions, instruction_mapping)

    def apply_one(
        self,
        instruction: str,
        instructions: Mapping[str, Sequence[FieldName]],
        action: Action,
    ) -> None:
        apply_one(instruction, instructions, action)

    def has(self, model: Any, instruction: str) -> bool:
        """True if a top-level field of model carries the instruction."""
        return has_instruction(self._builder, model, instruction)
