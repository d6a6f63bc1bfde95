# ==============================================
# Membership query
# ==============================================
#
# - has_instruction(builder, model, instruction) -> bool
#     Whether a top-level field of model carries the instruction.
#
# ==============================================

from typing import Any

from .index_builder import IndexBuilder


def has_instruction(builder: IndexBuilder, model: Any, instruction: str) -> bool:
    """
    Check whether a record's top-level fields carry an instruction.

    The index is rebuilt on every call. For repeated checks, build it
    once and use `instruction in index` instead.
    """
    return instruction in builder.build(model)
