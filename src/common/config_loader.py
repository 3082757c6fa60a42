"""
Configuration Loader

Resolves store credentials from CLI arguments and environment variables.
A .env file in the working directory is loaded into the environment first.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from ..shopify.api_client import ShopifyAPIClient
from ..shopify.errors import ConfigError

DEFAULT_API_VERSION = ShopifyAPIClient.API_VERSION

STORE_ENV_VARS = ("SHOPIFY_STORE", "SHOPIFY_SHOP")
TOKEN_ENV_VAR = "SHOPIFY_ACCESS_TOKEN"
API_VERSION_ENV_VAR = "SHOPIFY_API_VERSION"


@dataclass(frozen=True)
class StoreConfig:
    """Credentials and API version for one store."""
    shop: str
    access_token: str
    api_version: str = DEFAULT_API_VERSION


def _first_env(*names: str) -> Optional[str]:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


def load_store_config(
    shop: Optional[str] = None,
    token: Optional[str] = None,
    api_version: Optional[str] = None,
    dotenv: bool = True,
) -> StoreConfig:
    """
    Build the store configuration.

    Explicit arguments win over environment variables.

    Args:
        shop: Shop name or domain (falls back to SHOPIFY_STORE / SHOPIFY_SHOP)
        token: Admin API access token (falls back to SHOPIFY_ACCESS_TOKEN)
        api_version: Admin API version (falls back to SHOPIFY_API_VERSION)
        dotenv: Load a .env file before reading the environment

    Returns:
        StoreConfig

    Raises:
        ConfigError: If shop or token can't be resolved
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    shop = shop or _first_env(*STORE_ENV_VARS)
    token = token or _first_env(TOKEN_ENV_VAR)
    api_version = api_version or _first_env(API_VERSION_ENV_VAR) or DEFAULT_API_VERSION

    if not shop:
        raise ConfigError("Store not configured. Pass --shop or set SHOPIFY_STORE")
    if not token:
        raise ConfigError(f"Access token not configured. Pass --token or set {TOKEN_ENV_VAR}")

    return StoreConfig(shop=shop, access_token=token, api_version=api_version)
