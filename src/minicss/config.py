from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MinicssConfig:
    encoding: str = "utf-8"
    log_level: str = "WARNING"
