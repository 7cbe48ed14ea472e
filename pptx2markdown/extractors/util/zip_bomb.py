from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass

from pptx2markdown.exceptions import ExtractionZipBombError


@dataclass(frozen=True)
class ZipBombLimits:
    """
    Ceilings a presentation package must stay under before it is opened.

    A large deck is mostly already-compressed media, so its ratios stay low;
    the size ceilings only catch archives no real deck would produce.
    """

    max_entries: int = 20_000
    max_total_uncompressed_bytes: int = 4 * 1024 * 1024 * 1024  # 4 GiB
    max_single_uncompressed_bytes: int = 1 * 1024 * 1024 * 1024  # 1 GiB
    max_total_compression_ratio: float = 200.0
    max_entry_compression_ratio: float = 500.0


DEFAULT_ZIP_BOMB_LIMITS = ZipBombLimits()


def _reject(message: str, source: str | None) -> ExtractionZipBombError:
    return ExtractionZipBombError(message + (f" [{source}]" if source else ""))


def validate_zipfile(
    zf: zipfile.ZipFile,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
    source: str | None = None,
) -> None:
    """Raise ExtractionZipBombError if `zf` exceeds any of `limits`."""
    try:
        infos = [info for info in zf.infolist() if not info.is_dir()]
    except Exception as exc:
        raise ExtractionZipBombError(
            "Failed to inspect ZIP container", cause=exc
        ) from exc

    if len(infos) > limits.max_entries:
        raise _reject(
            f"ZIP container has too many entries ({len(infos)} > {limits.max_entries})",
            source,
        )

    total_uncompressed = 0
    total_compressed = 0
    for info in infos:
        if info.file_size > limits.max_single_uncompressed_bytes:
            raise _reject(
                f"ZIP entry {info.filename} too large ({info.file_size} bytes)",
                source,
            )
        if info.file_size > 0:
            if info.compress_size <= 0:
                raise _reject(
                    f"ZIP entry {info.filename} claims content but has no compressed data",
                    source,
                )
            ratio = info.file_size / info.compress_size
            if ratio > limits.max_entry_compression_ratio:
                raise _reject(
                    f"ZIP entry {info.filename} compression ratio too high ({ratio:.1f})",
                    source,
                )
        total_uncompressed += info.file_size
        total_compressed += info.compress_size

    if total_uncompressed > limits.max_total_uncompressed_bytes:
        raise _reject(
            f"ZIP total uncompressed size too large ({total_uncompressed} bytes)",
            source,
        )
    if total_uncompressed > 0 and total_compressed > 0:
        total_ratio = total_uncompressed / total_compressed
        if total_ratio > limits.max_total_compression_ratio:
            raise _reject(
                f"ZIP total compression ratio too high ({total_ratio:.1f})", source
            )


def validate_zip_bytesio(
    file_like: io.BytesIO,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
    source: str | None = None,
) -> None:
    """
    Validate a BytesIO ZIP container without keeping it open.

    Restores the original stream position.
    """
    original_pos = file_like.tell()
    try:
        file_like.seek(0)
        with zipfile.ZipFile(file_like, "r") as zf:
            validate_zipfile(zf, limits=limits, source=source)
    finally:
        file_like.seek(original_pos)
