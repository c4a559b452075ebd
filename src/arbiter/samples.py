from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml


@dataclass(frozen=True)
class Sample:
    filename: str
    label: str


@dataclass(frozen=True)
class ArenaConfig:
    samples: list[Sample]

    # When set, samples are fetched over HTTP relative to this URL.
    # Otherwise they are read from samples_dir.
    base_url: Optional[str] = None
    samples_dir: Optional[Path] = None

    timeout_seconds: float = 20.0
    user_agent: str = "code-battle-arbiter/0.1"


def load_config(path: str | Path) -> ArenaConfig:
    path = Path(path)
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}

    raw_samples = data.get("samples")
    if not raw_samples:
        raise ValueError(f"{path}: no samples listed")

    samples: list[Sample] = []
    for s in raw_samples:
        filename = (s or {}).get("filename")
        if not filename:
            raise ValueError(f"{path}: sample without filename: {s!r}")
        samples.append(Sample(filename=filename, label=s.get("label") or filename))

    samples_dir = data.get("samples_dir")
    if samples_dir is not None:
        samples_dir = Path(samples_dir)
        if not samples_dir.is_absolute():
            samples_dir = path.parent / samples_dir

    return ArenaConfig(
        samples=samples,
        base_url=data.get("base_url"),
        samples_dir=samples_dir,
        timeout_seconds=float(data.get("timeout_seconds", 20.0)),
        user_agent=data.get("user_agent", "code-battle-arbiter/0.1"),
    )
