"""Result assembler — the one response shape every list endpoint returns."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ecospace.engine.pagination import PaginationMeta


def assemble(rows: Iterable[Any], pagination: PaginationMeta) -> dict[str, Any]:
    return {"data": list(rows), "pagination": pagination.as_dict()}
