#!/usr/bin/env python3
"""
batchresize.pipeline.transform

Resize a single image file to an exact target size.

Steps for one file:

  1. Pick the encoder from the OUTPUT file extension (.png -> PNG,
     .jpg/.jpeg -> JPEG, anything else is rejected before touching disk).
  2. Open and decode the input. The format is detected from the file content,
     not its name, and only JPEG and PNG are accepted.
  3. Resize to exactly (width, height) with a Lanczos filter.
     The aspect ratio is NOT kept: images are stretched or squashed.
  4. Write the result with the chosen encoder.

Naming the output "photo.png" for a JPEG input therefore converts it to PNG.
"""

from enum import Enum
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from batchresize.pipeline.errors import (
    DecodeError,
    EncodeError,
    ImageIOError,
    JobError,
    ResizeError,
)
from batchresize.pipeline.job import DEFAULT_JPEG_QUALITY, FileJob, JobOutcome

INPUT_FORMATS = ["JPEG", "PNG"]


class OutputFormat(Enum):
    PNG = "PNG"
    JPEG = "JPEG"

    @classmethod
    def from_path(cls, path) -> "OutputFormat":
        suffix = Path(path).suffix.lower()
        if suffix == ".png":
            return cls.PNG
        if suffix in (".jpg", ".jpeg"):
            return cls.JPEG
        raise EncodeError(
            f"unsupported output extension {suffix or '(none)'!r}, "
            "expected .png, .jpg or .jpeg",
            path,
        )


def _decode(fh, path: Path) -> Image.Image:
    try:
        img = Image.open(fh, formats=INPUT_FORMATS)
        img.load()
    except UnidentifiedImageError as e:
        raise DecodeError(f"not a JPEG or PNG image: {e}", path) from e
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(f"corrupt image data: {e}", path) from e

    # Palette and 16-bit/float modes do not resample with Lanczos
    if img.mode in ("L", "LA", "RGB", "RGBA"):
        return img
    target = "RGBA" if img.mode == "P" or "transparency" in img.info else "RGB"
    try:
        return img.convert(target)
    except (OSError, ValueError) as e:
        raise DecodeError(f"cannot convert {img.mode} image: {e}", path) from e


def _encode(img: Image.Image, fh, fmt: OutputFormat, jpeg_quality: int) -> None:
    if fmt is OutputFormat.PNG:
        img.save(fh, format="PNG")
        return

    # JPEG has no alpha channel
    if img.mode not in ("RGB", "L"):
        img = img.convert("RGB")
    img.save(fh, format="JPEG", quality=jpeg_quality)


def resize_image(
    input_path,
    output_path,
    width: int,
    height: int,
    jpeg_quality: int = DEFAULT_JPEG_QUALITY,
) -> None:
    """
    Resize input_path to exactly width x height and write it to output_path.

    Raises:
      ImageIOError  input cannot be opened / output cannot be created
      DecodeError   input is not a valid JPEG or PNG
      ResizeError   resampling ran out of memory
      EncodeError   output extension unsupported or encoding failed
    """
    src = Path(input_path)
    dst = Path(output_path)

    fmt = OutputFormat.from_path(dst)

    try:
        fh = src.open("rb")
    except OSError as e:
        raise ImageIOError(f"cannot open input: {e}", src) from e

    with fh:
        with _decode(fh, src) as img:
            try:
                resized = img.resize((width, height), Image.LANCZOS)
            except MemoryError as e:
                raise ResizeError(f"not enough memory for {width}x{height}: {e}", src) from e

    try:
        out = dst.open("wb")
    except OSError as e:
        raise ImageIOError(f"cannot create output: {e}", dst) from e

    try:
        with out:
            _encode(resized, out, fmt, jpeg_quality)
    except (OSError, ValueError, KeyError) as e:
        dst.unlink(missing_ok=True)
        raise EncodeError(f"cannot encode {fmt.value}: {e}", dst) from e


def execute_job(job: FileJob, jpeg_quality: int = DEFAULT_JPEG_QUALITY) -> JobOutcome:
    """Run one job. Per-file errors end up in the outcome, never raised."""
    try:
        resize_image(job.input_path, job.output_path, job.width, job.height, jpeg_quality)
    except JobError as e:
        return JobOutcome(job=job, error=e)
    return JobOutcome(job=job)
