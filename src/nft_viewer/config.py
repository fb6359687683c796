from dataclasses import dataclass
import os
from dotenv import load_dotenv

# Load .env (if present) so env-based configuration works in dev
load_dotenv()

# Upstream API (overrideable)
NFT_API_BASE_URL = os.getenv("NFT_API_BASE_URL", "https://api.origin-forge.com")
NFT_API_SUBPATH = os.getenv("NFT_API_SUBPATH", "/random")
NFT_API_USER_AGENT = os.getenv("NFT_API_USER_AGENT", "nft-viewer/1.0")
NFT_API_TIMEOUT = float(os.getenv("NFT_API_TIMEOUT", "30"))

# Where save-nft-files writes when no outputDir is given (relative to cwd)
NFT_OUTPUT_DIR = os.getenv("NFT_OUTPUT_DIR", "nft-output")

# HTTP / runtime
PORT = int(os.getenv("PORT", "3334"))
HOST = os.getenv("HOST", "127.0.0.1")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class Settings:
    base_url: str = NFT_API_BASE_URL
    subpath: str = NFT_API_SUBPATH
    user_agent: str = NFT_API_USER_AGENT
    timeout: float = NFT_API_TIMEOUT
    output_dir: str = NFT_OUTPUT_DIR

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.subpath.lstrip('/')}"


SETTINGS = Settings()
