"""
dataclasses package
-------------------
Dataclass definitions for content units.

- RawRecord: Frontmatter and body as read from disk, not yet validated
- Document: Validated article handed to the rendering layer
"""
from quire.dataclasses.document import Document
from quire.dataclasses.raw_record import RawRecord

__all__ = ["Document", "RawRecord"]
