"""
Data models for catalog products.

This module contains pure data classes with no business logic.
"""

from .product import Product, ProductBatch, Variant

__all__ = ['Variant', 'Product', 'ProductBatch']
