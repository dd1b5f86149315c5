"""Storage backends for daf-invite."""

from __future__ import annotations

from daf_invite.storage.base import StorageProtocol
from daf_invite.storage.memory import InMemoryStorage

__all__ = ["InMemoryStorage", "StorageProtocol"]
