"""Quote enumeration and presentation constants."""

from enum import Enum
from typing import Dict, Tuple


class QuoteName(str, Enum):
    BLUE = "blue"
    OFFICIAL = "oficial"
    MEP = "mep"


DEFAULT_QUOTE = QuoteName.OFFICIAL

QUOTE_LABELS: Dict[QuoteName, str] = {
    QuoteName.BLUE: "Dólar Blue",
    QuoteName.OFFICIAL: "Dólar Oficial",
    QuoteName.MEP: "Dólar MEP",
}

# Path segment on the remote quote service; MEP is published as "bolsa"
QUOTE_SLUGS: Dict[QuoteName, str] = {
    QuoteName.BLUE: "blue",
    QuoteName.OFFICIAL: "oficial",
    QuoteName.MEP: "bolsa",
}

# Selector order on the form
QUOTE_ORDER: Tuple[QuoteName, ...] = (
    QuoteName.OFFICIAL,
    QuoteName.BLUE,
    QuoteName.MEP,
)

SELL_PRICE_KEY = "venta"
