import base64
import json
import pytest
from nft_viewer.models import NftRecord

SVG = "<svg xmlns='http://www.w3.org/2000/svg'><rect width='8' height='8'/></svg>"
META = {"name": "Egg #42", "description": "A random egg"}


def make_payload(seed=1234, egg=42, image=None, meta=None, attributes=None):
    if image is None:
        image = "data:image/svg+xml;base64," + base64.b64encode(SVG.encode()).decode()
    if meta is None:
        meta = "data:application/json;base64," + base64.b64encode(json.dumps(META).encode()).decode()
    if attributes is None:
        attributes = [
            {"trait_type": "Background", "value": "Sky"},
            {"trait_type": "ColorSet", "value": "Red, Blue, Green"},
            {"trait_type": "Pattern", "value": "Stripes"},
            {"trait_type": "Rarity", "value": 7},
        ]
    return {
        "status": "success",
        "data": {
            "seed": seed,
            "baseEggNumber": egg,
            "imageBase64": image,
            "attributes": attributes,
            "jsonBase64": meta,
        },
    }


class StubClient:
    """Stands in for NftApiClient; `results` is consumed one fetch at a time."""

    url = "https://example.invalid/random"

    def __init__(self, results):
        self.results = list(results)
        self.calls = 0

    def fetch(self):
        self.calls += 1
        return self.results.pop(0) if self.results else None


@pytest.fixture
def payload():
    return make_payload()


@pytest.fixture
def record(payload):
    return NftRecord.from_payload(payload)
