# ==============================================
# TOPIC 3: INTROSPECTION
# ==============================================
#
# Everything that reads Python types: which fields a record declares,
# what their (unwrapped) types are, and what tag text they carry.
#
# Record types are dataclasses. Tag text is stored in the dataclass
# field metadata, or in an Annotated[..., Tag(...)] marker.
#
# Modules:
# --------
# - type_walker.py   → TypeWalker: Optional[T] / list[T] / list[Optional[T]] → T
# - record_fields.py → RecordField, Tag, tagged(), record_fields()
#
# ==============================================

from .type_walker import TypeWalker
from .record_fields import RecordField, Tag, tagged, record_fields

__all__ = ["TypeWalker", "RecordField", "Tag", "tagged", "record_fields"]
