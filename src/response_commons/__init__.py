"""
response_commons – consistent HTTP API responses.

Import path convention::

    from response_commons.application.pagination import FilterOptions, parse_parameters
    from response_commons.application.cache import CacheKey
    from response_commons.application.responses import StandardErrorResponse
    from response_commons.adapters.fastapi import FastAPIExceptionMapper
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
