"""FastMCP integration: register MCP tools that expose the random NFT API.

Run in dev with:

    python -m nft_viewer.mcp_app

Tools:
- get-nft-data           -> status, seed, egg number and attributes
- get-nft-image          -> truncated preview of the SVG data URI
- get-nft-attributes     -> attribute listing
- get-color-palette      -> ColorSet attribute as swatch lines
- get-enhanced-nft-view  -> all of the above in one sectioned view
- save-nft-files         -> decode and write image/metadata/raw files
- get-random-nfts        -> summaries of 1-5 sequentially fetched records

Every tool fetches fresh data and answers with a single text block.
"""
from typing import Annotated, Optional
import argparse
import logging
import sys

from fastmcp import FastMCP
from pydantic import Field

from . import config, formatting, storage
from .api import NftApiClient
from .models import NftRecord

LOG = logging.getLogger(__name__)

FETCH_FAILED = "Could not retrieve NFT data."
READ_ONLY = {"readOnlyHint": True, "destructiveHint": False, "idempotentHint": False, "openWorldHint": True}

mcp = FastMCP("nft-viewer")
client = NftApiClient.from_settings(config.SETTINGS)


def _fetch() -> Optional[NftRecord]:
    record = client.fetch()
    if record is None:
        LOG.warning("NFT fetch from %s failed", client.url)
    return record


@mcp.tool(name="get-nft-data", description="Get basic NFT information", annotations=READ_ONLY)
def get_nft_data() -> str:
    record = _fetch()
    if record is None:
        return FETCH_FAILED
    return formatting.format_nft_data(record)


@mcp.tool(name="get-nft-image", description="Get NFT image data", annotations=READ_ONLY)
def get_nft_image() -> str:
    record = _fetch()
    if record is None:
        return "Could not retrieve NFT image data."
    return f"NFT image (base64):\n{formatting.preview(record.data.image_base64)}"


@mcp.tool(name="get-nft-attributes", description="Get detailed NFT attributes", annotations=READ_ONLY)
def get_nft_attributes() -> str:
    record = _fetch()
    if record is None:
        return "Could not retrieve NFT attributes."
    return f"NFT attributes:\n{formatting.format_attributes(record.data.attributes)}"


@mcp.tool(name="get-color-palette", description="Get NFT color palette", annotations=READ_ONLY)
def get_color_palette() -> str:
    record = _fetch()
    if record is None:
        return "Could not retrieve NFT color palette."
    palette = formatting.display_color_palette(formatting.color_set_of(record))
    return f"NFT color palette:\n{palette}"


@mcp.tool(name="get-enhanced-nft-view", description="Get enhanced NFT view with formatted display",
          annotations=READ_ONLY)
def get_enhanced_nft_view() -> str:
    record = _fetch()
    if record is None:
        return FETCH_FAILED
    return formatting.format_enhanced_view(record)


@mcp.tool(name="save-nft-files", description="Save NFT image and JSON data to files",
          annotations={"readOnlyHint": False, "destructiveHint": False, "idempotentHint": False,
                       "openWorldHint": True})
def save_nft_files(
    outputDir: Annotated[str, Field(description="Directory (relative to the server's working directory) to write into")] = config.NFT_OUTPUT_DIR,
) -> str:
    record = _fetch()
    if record is None:
        return FETCH_FAILED
    result = storage.save_nft_files(record, outputDir)
    return formatting.format_save_result(result, outputDir)


@mcp.tool(name="get-random-nfts", description="Get multiple random NFTs", annotations=READ_ONLY)
def get_random_nfts(
    count: Annotated[int, Field(ge=1, le=5, description="Number of NFTs to fetch (1-5)")] = 3,
) -> str:
    # Sequential on purpose; each fetch is an independent request
    records = []
    for _ in range(count):
        record = _fetch()
        if record is not None:
            records.append(record)

    if not records:
        return FETCH_FAILED

    summaries = "\n".join(formatting.format_nft_summary(r, i) for i, r in enumerate(records, start=1))
    return f"{len(records)} of {count} random NFTs:\n\n{summaries}"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="nft-viewer")
    parser.add_argument("--transport", choices=["stdio", "http", "sse"], default="stdio",
                        help="Transport to use: stdio (default), http (streamable HTTP), or sse")
    parser.add_argument("--host", default=None, help="Host to bind when using network transports")
    parser.add_argument("--port", type=int, default=None, help="Port to bind when using network transports")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level (default from LOG_LEVEL env)")
    ns = parser.parse_args(argv if argv is not None else sys.argv[1:])

    # stdout carries the protocol on stdio; diagnostics go to stderr
    logging.basicConfig(level=ns.log_level.upper(), stream=sys.stderr,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    transport = ns.transport
    try:
        if transport == "stdio":
            LOG.info("NFT viewer MCP server running on stdio")
            mcp.run()
            return

        host = ns.host or config.HOST
        port = ns.port or config.PORT
        LOG.info("NFT viewer MCP server running on %s://%s:%s", transport, host, port)
        mcp.run(transport=transport, host=host, port=port)
    except Exception:
        LOG.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
