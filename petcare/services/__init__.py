"""Service layer: use cases running inside units of work.

Re-exports
----------
- :class:`BaseService`, :class:`ServiceContext`
- :class:`PaginationIn`, :class:`PageMeta`, :class:`PageOut`
"""

from __future__ import annotations

from ._shared.base import BaseService, ServiceContext
from ._shared.dto import PageMeta, PageOut, PaginationIn

__all__ = ["BaseService", "PageMeta", "PageOut", "PaginationIn", "ServiceContext"]
