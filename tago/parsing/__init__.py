# ==============================================
# TOPIC 2: PARSING
# ==============================================
#
# Turns one field's raw tag text ("preload=true;otherOption=value")
# into a single-field InstructionIndex.
#
# Modules:
# --------
# - tag_parser.py → TagParser: split, normalize, index one field
#
# ==============================================

from .tag_parser import TagParser

__all__ = ["TagParser"]
