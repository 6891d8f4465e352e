"""API middleware."""

from shop_explorer.api.middleware.cors import CORSHeadersMiddleware

__all__ = ["CORSHeadersMiddleware"]
