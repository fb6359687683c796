"""Plain-text rendering of NFT records for tool responses."""
from pathlib import Path
from typing import Iterable, Optional

from .models import NftAttribute, NftRecord, SaveResult

NO_COLOR_DATA = "No color data available"
PREVIEW_LENGTH = 100
SUMMARY_ATTRIBUTES = 3


def format_attributes(attributes: Iterable[NftAttribute]) -> str:
    return "\n".join(f"{attr.trait_type}: {attr.value}" for attr in attributes)


def find_attribute(attributes: Iterable[NftAttribute], trait_type: str) -> Optional[str]:
    """Return the first value for `trait_type` as text, or None if absent."""
    for attr in attributes:
        if attr.trait_type == trait_type:
            return str(attr.value)
    return None


def color_set_of(record: NftRecord) -> Optional[str]:
    return find_attribute(record.data.attributes, "ColorSet")


def display_color_palette(color_set: Optional[str]) -> str:
    """Render a ", "-separated list of color names as swatch lines."""
    if not color_set:
        return NO_COLOR_DATA
    return "\n".join(f"■ {color}" for color in color_set.split(", "))


def preview(payload: Optional[str], length: int = PREVIEW_LENGTH) -> str:
    return f"{(payload or '')[:length]}..."


def format_nft_data(record: NftRecord) -> str:
    data = record.data
    return "\n".join([
        f"Status: {record.status}",
        f"Seed: {data.seed}",
        f"Base Egg Number: {data.base_egg_number}",
        "\nAttributes:",
        format_attributes(data.attributes),
        "\nImage & JSON data available via specific commands",
    ])


def format_enhanced_view(record: NftRecord) -> str:
    data = record.data
    return "\n".join([
        "==== NFT Data ====",
        f"Status: {record.status}",
        f"Seed: {data.seed}",
        f"Base Egg Number: {data.base_egg_number}",
        "",
        "==== Attributes ====",
        format_attributes(data.attributes),
        "",
        "==== Color Palette ====",
        display_color_palette(color_set_of(record)),
        "",
        "==== Image ====",
        f"Base64 encoded image (preview): {preview(data.image_base64)}",
        "",
        "==== JSON Data ====",
        f"Base64 encoded JSON (preview): {preview(data.json_base64)}",
    ])


def format_nft_summary(record: NftRecord, index: int) -> str:
    """Short block used by get-random-nfts; `index` is 1-based."""
    data = record.data
    return "\n".join([
        f"==== NFT #{index} ====",
        f"Seed: {data.seed}",
        f"Base Egg Number: {data.base_egg_number}",
        "Main attributes:",
        format_attributes(data.attributes[:SUMMARY_ATTRIBUTES]),
        "",
    ])


def format_save_result(result: SaveResult, output_dir: str) -> str:
    if not result.success:
        return f"Error while saving files: {result.error}"

    def _line(label: str, path: Optional[Path]) -> str:
        return f"{label}: {path}" if path else f"{label}: not saved (no embedded payload)"

    return "\n".join([
        "NFT files saved successfully:",
        _line("SVG image", result.svg_path),
        _line("JSON metadata", result.json_path),
        _line("Raw data", result.raw_path),
        "",
        f"All files were saved to the '{output_dir}' directory.",
    ])
