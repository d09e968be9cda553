#!/usr/bin/env python3
"""
batchresize.pipeline.errors

Error types raised by the resize pipeline.

Two families:

  - Fatal errors (ConfigError, DirectoryError) stop the whole run before any
    job is dispatched.
  - Per-job errors (subclasses of JobError) are caught at the job boundary,
    reported for that file only, and never affect sibling jobs.
"""

from pathlib import Path
from typing import Optional


class BatchResizeError(Exception):
    """Base class for every error raised by batchresize."""


class ConfigError(BatchResizeError):
    """Missing or invalid run configuration (flags or config.yaml)."""


class DirectoryError(BatchResizeError):
    """Input directory unreadable or output directory cannot be created."""


class JobError(BatchResizeError):
    """A single file failed to resize."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ImageIOError(JobError):
    """Input could not be opened or output could not be created."""


class DecodeError(JobError):
    """Input content is not a decodable JPEG or PNG image."""


class EncodeError(JobError):
    """Output extension is unsupported or the encoder failed."""


class ResizeError(JobError):
    """Resampling failed, e.g. the target size does not fit in memory."""
