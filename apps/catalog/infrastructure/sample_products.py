"""
Built-in sample products, the last catalog fallback.
"""
from typing import List

from ..domain.entities.product import Product
from .normalizers import normalize_row

SAMPLE_ROWS = [
    {
        'Product ID': 'TS001',
        'Name': 'Baby Cotton Romper',
        'Description': 'Soft cotton romper with snap buttons for newborns.',
        'Category': 'Clothing',
        'Price (BDT)': 650,
        'Main Image': 'assets/images/products/romper.jpg',
        'Size': '0-3M, 3-6M, 6-12M',
        'Color': 'White, Sky Blue',
        'Age Range': '0-12 months',
        'Stock': 25,
    },
    {
        'Product ID': 'TS002',
        'Name': 'Kids Sneakers',
        'Description': 'Lightweight sneakers with a velcro strap.',
        'Category': 'Shoes',
        'Price (BDT)': 1200,
        'Main Image': 'assets/images/products/sneakers.jpg',
        'Size': '22, 24, 26, 28',
        'Color': 'Red, Navy',
        'Age Range': '2-6 years',
        'Stock': 12,
    },
    {
        'Product ID': 'TS003',
        'Name': 'Wooden Stacking Toy',
        'Description': 'Colourful wooden rings that teach size and colour.',
        'Category': 'Toys',
        'Price (BDT)': 450,
        'Main Image': 'assets/images/products/stacking-toy.jpg',
        'Age Range': '1-3 years',
        'Stock': 30,
    },
    {
        'Product ID': 'TS004',
        'Name': 'Girls Party Frock',
        'Description': 'Layered party frock with a satin bow.',
        'Category': 'Clothing',
        'Price (BDT)': 1850,
        'Main Image': 'assets/images/products/frock.jpg',
        'Size': '2Y, 3Y, 4Y, 5Y',
        'Color': 'Pink, Peach',
        'Age Range': '2-5 years',
        'Stock': 8,
    },
    {
        'Product ID': 'TS005',
        'Name': 'Baby Feeding Set',
        'Description': 'BPA-free bowl, spoon and cup set.',
        'Category': 'Feeding',
        'Price (BDT)': 550,
        'Main Image': 'assets/images/products/feeding-set.jpg',
        'Color': 'Green, Yellow',
        'Age Range': '6 months+',
        'Stock': 40,
    },
    {
        'Product ID': 'TS006',
        'Name': 'School Backpack',
        'Description': 'Padded backpack with a cartoon print.',
        'Category': 'Accessories',
        'Price (BDT)': 950,
        'Main Image': 'assets/images/products/backpack.jpg',
        'Color': 'Blue, Purple',
        'Age Range': '3-8 years',
        'Stock': 15,
    },
]


def sample_products() -> List[Product]:
    """Return fresh Product instances for the sample rows."""
    return [product for product in map(normalize_row, SAMPLE_ROWS) if product is not None]
