"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

FileStatus: TypeAlias = Literal["ok", "fail", "absent"]
