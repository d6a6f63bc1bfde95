# ==============================================
# TOPIC 1: MODEL
# ==============================================
#
# Value types shared by every other package:
# the parsed directive, the field path it applies to, and the
# index mapping one to the other.
#
# Modules:
# --------
# - instruction.py → Instruction ("preload=true") and FieldName ("Address.City")
# - index.py       → InstructionIndex (Instruction → ordered FieldNames)
#
# ==============================================

from .instruction import Instruction, FieldName
from .index import InstructionIndex

__all__ = ["Instruction", "FieldName", "InstructionIndex"]
