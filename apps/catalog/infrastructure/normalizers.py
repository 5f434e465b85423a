"""
Normalization of spreadsheet product rows.

The product sheet is edited by hand, so prices arrive as numbers or as text
such as ``"1,200"`` or ``"৳ ১২০০"`` and list columns as comma-separated text.
"""
import logging
import re
from typing import Any, Dict, List, Optional

from ..domain.entities.product import Product, PLACEHOLDER_IMAGE
from ..domain.exceptions import InvalidProductError
from ..domain.value_objects.money import Money

logger = logging.getLogger(__name__)

LATIN_DIGITS = str.maketrans('০১২৩৪৫৬৭৮৯', '0123456789')
IMAGE_COLUMNS = ('Main Image', 'Image1', 'Image2', 'Image3', 'Image4', 'Image5')


def normalize_price(value: Any) -> int:
    """Coerce a sheet price to whole taka. Unreadable values become 0."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, (int, float)):
        return max(int(round(value)), 0)
    text = str(value).translate(LATIN_DIGITS).replace(',', '')
    match = re.search(r'\d+(?:\.\d+)?', text)
    if match is None:
        return 0
    return int(round(float(match.group())))


def split_list(value: Any) -> List[str]:
    """Split a comma-separated cell into trimmed, non-empty strings."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        parts = value
    else:
        parts = str(value).split(',')
    return [str(part).strip() for part in parts if str(part).strip()]


def _text(row: Dict[str, Any], key: str) -> str:
    value = row.get(key)
    return str(value).strip() if value is not None else ""


def _in_stock(row: Dict[str, Any]) -> bool:
    stock = row.get('Stock')
    if stock in (None, ''):
        return True
    return normalize_price(stock) > 0


def normalize_row(row: Dict[str, Any]) -> Optional[Product]:
    """Build a Product from a sheet row, or None if the row is unusable."""
    product_id = _text(row, 'Product ID')
    if not product_id:
        logger.warning(f"Skipping product row without an id: {row.get('Name')!r}")
        return None

    images: List[str] = []
    for column in IMAGE_COLUMNS:
        url = _text(row, column)
        if url and url not in images:
            images.append(url)

    try:
        return Product(
            id=product_id,
            name=_text(row, 'Name'),
            description=_text(row, 'Description'),
            category=_text(row, 'Category'),
            price=Money(amount=normalize_price(row.get('Price (BDT)'))),
            image_url=images[0] if images else PLACEHOLDER_IMAGE,
            images=images,
            sizes=split_list(row.get('Size')),
            colors=split_list(row.get('Color')),
            age_range=_text(row, 'Age Range'),
            in_stock=_in_stock(row),
        )
    except InvalidProductError as e:
        logger.warning(f"Skipping invalid product row '{product_id}': {e.message}")
        return None
