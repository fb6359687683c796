"""Persist the payloads embedded in an NFT record.

A save writes up to three files under `<cwd>/<output_dir>/`:

- `egg<baseEggNumber>-<seed>-<millis>.svg`       decoded SVG image
- `egg<baseEggNumber>-<seed>-<millis>.json`      decoded JSON metadata
- `egg<baseEggNumber>-<seed>-<millis>-raw.json`  the whole record

The image and metadata files are only written when their payload carries
the expected data-URI prefix. The raw file is always written. Files written
before a failure are left in place.
"""
from pathlib import Path
from typing import Callable, Optional
import base64
import binascii
import json
import logging
import time

from .config import NFT_OUTPUT_DIR
from .models import JSON_DATA_URI_PREFIX, SVG_DATA_URI_PREFIX, NftRecord, SaveResult

LOG = logging.getLogger(__name__)


def _now_millis() -> int:
    return int(time.time() * 1000)


def _decode_data_uri(payload: Optional[str], prefix: str) -> Optional[bytes]:
    """Return the decoded body of `payload`, or None if it lacks `prefix` or won't decode."""
    if not payload or not payload.startswith(prefix):
        return None
    try:
        return base64.b64decode(payload[len(prefix):])
    except binascii.Error as ex:
        LOG.warning("Undecodable %s payload; skipping: %s", prefix.rstrip(","), ex)
        return None


def _write(path: Path, data: bytes) -> Path:
    path.write_bytes(data)
    LOG.info("Wrote %s (%d bytes)", path, len(data))
    return path


def _free_prefix(target_dir: Path, base: str, millis: int) -> str:
    # Same record saved twice within one millisecond: move to the next free one
    while True:
        prefix = f"{base}-{millis}"
        if not any(target_dir.glob(f"{prefix}.*")) and not (target_dir / f"{prefix}-raw.json").exists():
            return prefix
        millis += 1


def save_nft_files(record: NftRecord, output_dir: str = NFT_OUTPUT_DIR,
                   now: Callable[[], int] = _now_millis) -> SaveResult:
    """Decode and write the record's image, metadata and raw response.

    `output_dir` is always placed under the current working directory,
    even when given as an absolute path. `now` returns the capture
    timestamp in milliseconds.
    """
    data = record.data
    # Output stays under cwd even for absolute names
    requested = Path(output_dir)
    target_dir = Path.cwd() / requested.relative_to(requested.anchor)
    svg_path = json_path = None
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        prefix = _free_prefix(target_dir, f"egg{data.base_egg_number}-{data.seed}", now())

        svg = _decode_data_uri(data.image_base64, SVG_DATA_URI_PREFIX)
        if svg is not None:
            svg_path = _write(target_dir / f"{prefix}.svg", svg)
        else:
            LOG.debug("No SVG data URI in record %s; skipping image", prefix)

        meta = _decode_data_uri(data.json_base64, JSON_DATA_URI_PREFIX)
        if meta is not None:
            json_path = _write(target_dir / f"{prefix}.json", meta)
        else:
            LOG.debug("No JSON data URI in record %s; skipping metadata", prefix)

        raw = json.dumps(record.to_payload(), indent=2, ensure_ascii=False)
        raw_path = _write(target_dir / f"{prefix}-raw.json", raw.encode("utf-8"))
    except OSError as ex:
        LOG.error("Failed to save NFT files to %s: %s", target_dir, ex)
        return SaveResult(success=False, error=str(ex))

    return SaveResult(success=True, svg_path=svg_path, json_path=json_path, raw_path=raw_path)
