from conftest import make_payload
from nft_viewer import formatting
from nft_viewer.models import NftAttribute, NftRecord, SaveResult


def test_format_attributes_one_line_per_attribute_in_order(record):
    text = formatting.format_attributes(record.data.attributes)
    lines = text.splitlines()
    assert len(lines) == len(record.data.attributes)
    assert lines == [
        "Background: Sky",
        "ColorSet: Red, Blue, Green",
        "Pattern: Stripes",
        "Rarity: 7",
    ]


def test_format_attributes_empty():
    assert formatting.format_attributes([]) == ""


def test_display_color_palette_bullets_in_order():
    text = formatting.display_color_palette("Red, Blue, Green")
    assert text.splitlines() == ["■ Red", "■ Blue", "■ Green"]


def test_display_color_palette_absent_returns_sentinel():
    assert formatting.display_color_palette(None) == formatting.NO_COLOR_DATA
    assert formatting.display_color_palette("") == formatting.NO_COLOR_DATA


def test_color_set_missing_falls_back_to_sentinel():
    rec = NftRecord.from_payload(make_payload(attributes=[{"trait_type": "Pattern", "value": "Dots"}]))
    assert formatting.color_set_of(rec) is None
    assert formatting.display_color_palette(formatting.color_set_of(rec)) == formatting.NO_COLOR_DATA


def test_find_attribute_stringifies_numbers():
    attrs = [NftAttribute(trait_type="Rarity", value=7)]
    assert formatting.find_attribute(attrs, "Rarity") == "7"
    assert formatting.find_attribute(attrs, "Missing") is None


def test_format_nft_data(record):
    text = formatting.format_nft_data(record)
    assert text.startswith("Status: success\nSeed: 1234\nBase Egg Number: 42\n")
    assert "\nAttributes:\nBackground: Sky\n" in text


def test_preview_truncates_to_100_chars():
    assert formatting.preview("x" * 250) == "x" * 100 + "..."
    assert formatting.preview(None) == "..."


def test_enhanced_view_has_all_sections(record):
    text = formatting.format_enhanced_view(record)
    for header in ("==== NFT Data ====", "==== Attributes ====", "==== Color Palette ====",
                   "==== Image ====", "==== JSON Data ===="):
        assert header in text
    assert "■ Blue" in text
    assert record.data.image_base64[:100] + "..." in text


def test_summary_lists_first_three_attributes(record):
    text = formatting.format_nft_summary(record, 2)
    assert text.startswith("==== NFT #2 ====")
    assert "Pattern: Stripes" in text
    assert "Rarity" not in text


def test_format_save_result_failure():
    text = formatting.format_save_result(SaveResult(success=False, error="disk full"), "out")
    assert text == "Error while saving files: disk full"


def test_format_save_result_marks_skipped_payloads(tmp_path):
    result = SaveResult(success=True, raw_path=tmp_path / "egg1-2-3-raw.json")
    text = formatting.format_save_result(result, "out")
    assert "SVG image: not saved" in text
    assert "JSON metadata: not saved" in text
    assert f"Raw data: {tmp_path / 'egg1-2-3-raw.json'}" in text
    assert "'out'" in text
