# ==============================================
# Dispatcher
# ==============================================
#
# PURPOSE:
#   Run caller code for every field carrying an instruction, without
#   the library knowing what any instruction means.
#
#   instructions = tago.get(Model)
#   apply(instructions, {
#       "preload=true": lambda field: query.preload(field),
#       "otherOption=value": lambda field: print("other option for", field),
#   })
#
# Actions run once per listed field, in list order. Exceptions raised
# by an action propagate to the caller and stop the dispatch.
#
# ==============================================

import logging
from typing import Any, Callable, Mapping, Sequence

from tago.model import FieldName

logger = logging.getLogger(__name__)

Action = Callable[[FieldName], Any]


def apply(
    instructions: Mapping[str, Sequence[FieldName]],
    mapping: Mapping[str, Action],
) -> None:
    """
    Run each mapped action for the fields recorded under its instruction.

    Instructions in the mapping but not in the index are skipped, as are
    instructions in the index with no action.

    Args:
        instructions: An InstructionIndex (or any mapping of the same shape)
        mapping: Instruction → action taking the field name
    """
    for instruction, action in mapping.items():
        apply_one(instruction, instructions, action)


def apply_one(
    instruction: str,
    instructions: Mapping[str, Sequence[FieldName]],
    action: Action,
) -> None:
    """
    Run one action for every field recorded under one instruction.

    Does nothing when the instruction is absent.
    """
    fields = instructions.get(instruction)
    if fields is None:
        return

    logger.debug("Dispatching %r to %d field(s)", str(instruction), len(fields))
    for field_name in fields:
        action(field_name)
