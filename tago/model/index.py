# ==============================================
# InstructionIndex
# ==============================================
#
# PURPOSE:
#   The result of an extraction: which fields carry which instruction.
#
#   {"preload=true": ("Field1", "Field3"), "otherOption=value": ("Field1",)}
#
# WHY THIS CLASS EXISTS:
#   Extraction folds many single-field results (and nested sub-results)
#   into one multi-map. Callers then keep the result around and run many
#   dispatches against it, so once it is handed out it must not change.
#   Mutation is limited to the private _add/_concat used while building.
#
# CLASS: InstructionIndex (Mapping)
# ---------------------------------
#   - index[instruction] -> tuple[FieldName, ...]
#       Field paths in encounter order. Duplicates are kept.
#
#   Methods:
#   --------
#   - fields(instruction) -> tuple[FieldName, ...]
#       Same as index[instruction] but () when absent.
#
#   - with_key(key: str) -> InstructionIndex
#       Sub-index of every instruction whose key matches
#       (e.g. all "preload=*").
#
#   - to_dict() -> dict[str, list[str]]
#   - from_dict(data) -> InstructionIndex  (classmethod)
#
# ==============================================

from collections.abc import Mapping
from typing import Dict, Iterator, List, Tuple

from .instruction import FieldName, Instruction


class InstructionIndex(Mapping):
    """
    Read-only mapping of Instruction to the ordered field paths carrying it.

    Iteration follows the order in which instructions were first seen,
    but only the order of the fields under one instruction is part of
    the contract.
    """

    def __init__(self) -> None:
        self._entries: Dict[Instruction, List[FieldName]] = {}

    # ======================================
    # Mapping protocol
    # ======================================
    def __getitem__(self, instruction: str) -> Tuple[FieldName, ...]:
        return tuple(self._entries[instruction])

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, instruction: object) -> bool:
        return instruction in self._entries

    def __eq__(self, other: object) -> bool:
        if isinstance(other, InstructionIndex):
            return self._entries == other._entries
        if isinstance(other, Mapping):
            return self.to_dict() == {
                str(k): [str(v) for v in values] for k, values in other.items()
            }
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        body = ", ".join(
            f"{str(k)!r}: {[str(v) for v in values]}"
            for k, values in self._entries.items()
        )
        return f"InstructionIndex({{{body}}})"

    # ======================================
    # Queries
    # ======================================
    def fields(self, instruction: str) -> Tuple[FieldName, ...]:
        """
        Return the field paths recorded under an instruction.

        Args:
            instruction: Instruction (or plain string) to look up

        Returns:
            The field paths in encounter order, or () when absent
        """
        return tuple(self._entries.get(instruction, ()))

    def with_key(self, key: str) -> "InstructionIndex":
        """
        Return a new index holding only the instructions with this key.

        Example:
            index.with_key("preload") → {"preload=true": (...), "preload=false": (...)}
        """
        key = key.strip()
        subset = InstructionIndex()
        for instruction, names in self._entries.items():
            if instruction.key == key:
                subset._entries[instruction] = list(names)
        return subset

    # ======================================
    # Construction (package-internal)
    # ======================================
    def _add(self, instruction: Instruction, field_name: FieldName) -> None:
        self._entries.setdefault(instruction, []).append(field_name)

    def _concat(self, other: "InstructionIndex", prefix: str = "") -> None:
        """
        Append every field of other into this index, prefixing each path.

        An instruction present in other but with no fields still creates
        an (empty) entry here.
        """
        for instruction, names in other._entries.items():
            target = self._entries.setdefault(instruction, [])
            for name in names:
                target.append(name.add_prefix(prefix))

    # ======================================
    # Serialization
    # ======================================
    def to_dict(self) -> Dict[str, List[str]]:
        """
        Convert the index to plain JSON-serializable types.

        Returns:
            {"preload=true": ["Field1", "Field3.Subfield1"], ...}
        """
        return {
            str(instruction): [str(name) for name in names]
            for instruction, names in self._entries.items()
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "InstructionIndex":
        """
        Rebuild an index from to_dict() output.

        Keys are taken as already-normalized instructions; they are not
        re-parsed.
        """
        index = cls()
        for instruction, names in data.items():
            index._entries[Instruction(instruction)] = [FieldName(n) for n in names]
        return index
