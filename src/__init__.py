"""
Shopify Variant Reorder Tool

Modules:
    models   - Data models (Product, Variant, ProductBatch)
    common   - Shared utilities (config loader, logging)
    shopify  - Admin API client, rate-limit retry, pagination
    reorder  - Sample/bolt variant swap and the catalog run
"""
