from __future__ import annotations
from typing import Dict, Literal

StemmerVariant = Literal["light", "extended", "aggressive"]

DEFAULT_VARIANT: StemmerVariant = "light"

# older front-ends sent the algorithm family names
VARIANT_ALIASES: Dict[str, StemmerVariant] = {
    "porter": "light",
    "snowball": "extended",
    "lancaster": "aggressive",
}
