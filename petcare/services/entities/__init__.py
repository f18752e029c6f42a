"""Generic entity lifecycle (find / create / update / soft delete)."""

from __future__ import annotations

from .contracts import EntityMapper, EntityValidator, NoopValidator
from .service import EntityLifecycleService

__all__ = ["EntityLifecycleService", "EntityMapper", "EntityValidator", "NoopValidator"]
