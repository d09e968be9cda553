#!/usr/bin/env python3
"""
batchresize.pipeline.job

Data model shared by the dispatcher and the workers:

  - ResizeConfig : immutable run settings, validated on construction
  - FileJob      : one input -> output resize task
  - JobOutcome   : result of running one FileJob
  - BatchSummary : every outcome of a run, in dispatch order

ResizeConfig is built once at startup and handed to every worker; nothing in
it is ever mutated, so workers read it without locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from batchresize.pipeline.errors import ConfigError, JobError

# Baseline JPEG quality (same default as most encoders).
DEFAULT_JPEG_QUALITY = 75
MAX_JPEG_QUALITY = 95


def _check_positive(name: str, value) -> None:
    # bool is an int subclass; True must not pass as width=1
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class ResizeConfig:
    input_dir: Path
    output_dir: Path
    width: int
    height: int
    workers: Optional[int] = None
    jpeg_quality: int = DEFAULT_JPEG_QUALITY
    fail_on_error: bool = False

    def __post_init__(self) -> None:
        if not str(self.input_dir):
            raise ConfigError("input directory must not be empty")
        if not str(self.output_dir):
            raise ConfigError("output directory must not be empty")

        _check_positive("width", self.width)
        _check_positive("height", self.height)
        if self.workers is not None:
            _check_positive("workers", self.workers)

        q = self.jpeg_quality
        if isinstance(q, bool) or not isinstance(q, int) or not 1 <= q <= MAX_JPEG_QUALITY:
            raise ConfigError(
                f"jpeg_quality must be an integer in 1..{MAX_JPEG_QUALITY}, got {q!r}"
            )

        object.__setattr__(self, "input_dir", Path(self.input_dir))
        object.__setattr__(self, "output_dir", Path(self.output_dir))


@dataclass(frozen=True)
class FileJob:
    input_path: Path
    output_path: Path
    width: int
    height: int

    @property
    def name(self) -> str:
        return Path(self.input_path).name


@dataclass(frozen=True)
class JobOutcome:
    job: FileJob
    error: Optional[JobError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchSummary:
    outcomes: List[JobOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def has_failures(self) -> bool:
        return self.failed > 0

    def failures(self) -> List[JobOutcome]:
        return [o for o in self.outcomes if not o.ok]
