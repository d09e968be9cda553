#!/usr/bin/env python3
"""
batchresize.pipeline.dispatcher

Resize every image in a folder concurrently.

  input_dir/*.jpg|*.jpeg|*.png  ->  output_dir/<same name>

Only direct entries of input_dir are considered (no recursion). Each eligible
file becomes one FileJob; jobs run on a bounded thread pool and report one
status line each. The run returns only after every job has finished, with a
BatchSummary of all outcomes.

A failing file is reported and counted, it never stops the other files.
Only configuration and directory problems abort the run, and they do so
before any job starts.
"""

import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from batchresize.pipeline.errors import DirectoryError
from batchresize.pipeline.gate import CompletionGate
from batchresize.pipeline.job import (
    DEFAULT_JPEG_QUALITY,
    BatchSummary,
    FileJob,
    JobOutcome,
    ResizeConfig,
)
from batchresize.pipeline.transform import execute_job

IMAGE_EXTS = {".jpg", ".jpeg", ".png"}

_print_lock = threading.Lock()


def is_eligible(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in IMAGE_EXTS


def discover_jobs(config: ResizeConfig) -> List[FileJob]:
    """
    List input_dir and build one FileJob per eligible file, sorted by name.

    Raises DirectoryError if input_dir is missing or unreadable.
    """
    src_dir = config.input_dir
    try:
        entries = sorted(src_dir.iterdir())
    except OSError as e:
        raise DirectoryError(f"cannot read input directory {src_dir}: {e}") from e

    return [
        FileJob(
            input_path=p,
            output_path=config.output_dir / p.name,
            width=config.width,
            height=config.height,
        )
        for p in entries
        if is_eligible(p)
    ]


def _prepare_output(dst_dir: Path) -> None:
    try:
        dst_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryError(f"cannot create output directory {dst_dir}: {e}") from e


def _report(outcome: JobOutcome) -> None:
    with _print_lock:
        if outcome.ok:
            print(f"Successfully resized: {outcome.job.name}", flush=True)
        else:
            print(
                f"Error resizing image {outcome.job.name}: {outcome.error}",
                file=sys.stderr,
                flush=True,
            )


def run_batch(config: ResizeConfig) -> BatchSummary:
    """
    Resize every eligible image described by config.

    Returns a BatchSummary once all jobs are done.
    Raises DirectoryError before dispatching anything if the folders are unusable.
    """
    jobs = discover_jobs(config)
    _prepare_output(config.output_dir)

    print(f"[Resize] Processing {len(jobs)} images...")
    print(f"         Input folder : {config.input_dir}")
    print(f"         Output folder: {config.output_dir}")
    print(f"         Target size  : {config.width}x{config.height} px")
    print(f"         Workers      : {config.workers or 'auto'}")

    if not jobs:
        print(f"[Resize] No JPG/PNG images found in {config.input_dir}, nothing to do.")

    gate = CompletionGate(len(jobs))
    outcomes: List[Optional[JobOutcome]] = [None] * len(jobs)

    def work(index: int, job: FileJob) -> None:
        try:
            outcome = execute_job(job, config.jpeg_quality)
            outcomes[index] = outcome
            _report(outcome)
        finally:
            gate.done()

    with ThreadPoolExecutor(
        max_workers=config.workers, thread_name_prefix="resize"
    ) as pool:
        futures = [pool.submit(work, i, job) for i, job in enumerate(jobs)]
        gate.wait()

    # Anything other than a JobError is a bug: surface it
    for future in futures:
        future.result()

    summary = BatchSummary(outcomes=[o for o in outcomes if o is not None])
    print(
        f"[Resize] Completed: {summary.succeeded} succeeded, "
        f"{summary.failed} failed ({summary.total} images)."
    )
    return summary


def run(
    input_dir,
    output_dir,
    width: int,
    height: int,
    *,
    workers: Optional[int] = None,
    jpeg_quality: int = DEFAULT_JPEG_QUALITY,
) -> BatchSummary:
    """
    Resize all images in input_dir to width x height into output_dir.

    Invalid sizes raise ConfigError before any filesystem access.
    """
    config = ResizeConfig(
        input_dir=Path(input_dir),
        output_dir=Path(output_dir),
        width=width,
        height=height,
        workers=workers,
        jpeg_quality=jpeg_quality,
    )
    return run_batch(config)
