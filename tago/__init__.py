# ==============================================
# Tago: field tag instructions
# ==============================================
#
# Package Structure:
#
# tago/
# ├── model/          # Instruction, FieldName, InstructionIndex
# ├── parsing/        # Raw tag text → instructions
# ├── introspection/  # Record fields and type unwrapping
# ├── extraction/     # Index building, dispatch, membership
# ├── config.py       # Configuration management
# └── tago.py         # Tago facade
#
# ==============================================

from tago.model import FieldName, Instruction, InstructionIndex
from tago.introspection import RecordField, Tag, TypeWalker, record_fields, tagged
from tago.parsing import TagParser
from tago.extraction import IndexBuilder, apply, apply_one, has_instruction
from tago.tago import Tago

__version__ = "0.1.0"

__all__ = [
    "Tago",
    "Instruction",
    "FieldName",
    "InstructionIndex",
    "RecordField",
    "Tag",
    "TypeWalker",
    "record_fields",
    "tagged",
    "TagParser",
    "IndexBuilder",
    "apply",
    "apply_one",
    "has_instruction",
]
