"""Convenience CLI to fetch one random NFT and save its files (wraps nft_viewer.storage)."""
import argparse
import logging
import sys
from nft_viewer import api, config, formatting, storage


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--output-dir", default=config.NFT_OUTPUT_DIR)
    p.add_argument("--url", default=None, help="Override the API URL (base + subpath)")
    args = p.parse_args()
    logging.basicConfig(level=config.LOG_LEVEL, stream=sys.stderr)

    client = api.NftApiClient.from_settings()
    if args.url:
        client = api.NftApiClient(args.url, config.NFT_API_USER_AGENT, config.NFT_API_TIMEOUT)
    record = client.fetch()
    if record is None:
        sys.exit(1)
    result = storage.save_nft_files(record, args.output_dir)
    print(formatting.format_save_result(result, args.output_dir))
    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    main()
