"""Application cache – deterministic cache keys."""
from response_commons.application.cache.keys import CacheKey, generate_cache_key

__all__ = ["CacheKey", "generate_cache_key"]
