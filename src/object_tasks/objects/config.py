from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SerializerConfig:
    separators: tuple[str, str] = (",", ":")  # compact, like JSON.stringify
    ensure_ascii: bool = False
    sort_keys: bool = False


DEFAULT_CONFIG = SerializerConfig()
