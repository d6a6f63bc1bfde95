# ==============================================
# TOPIC 4: EXTRACTION & DISPATCH
# ==============================================
#
# Walk a record type, build its InstructionIndex, and run
# caller-supplied actions against it.
#
# Modules:
# --------
# - index_builder.py → IndexBuilder: flat and nested extraction
# - dispatcher.py    → apply() / apply_one(): run actions per field
# - query.py         → has_instruction(): membership check
#
# ==============================================

from .index_builder import IndexBuilder
from .dispatcher import Action, apply, apply_one
from .query import has_instruction

__all__ = ["IndexBuilder", "Action", "apply", "apply_one", "has_instruction"]
