"""
Provider factory.

Builds the configured provider with its collaborators. This is the only
place that reads the global settings; providers themselves receive their
settings through the constructor.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from ..adapters.cache.memory_cache import InMemoryCacheBackend
from ..adapters.cache.redis_cache import RedisCacheBackend
from ..adapters.external.fleury_provider import FleuryScheduledTelemedicineProvider
from ..application.cache.read_through_cache import ReadThroughCache
from ..application.ports.cache.cache_backend import CacheBackend
from ..application.ports.providers import TelemedicineProvider
from ..application.ports.services.error_handler import ProviderErrorHandler
from ..testing.fake_provider import FakeScheduledTelemedicineProvider
from .config import CacheSettings, Settings, get_settings
from .exceptions import ConfigurationError
from .structured_logger import configure_logging

logger = logging.getLogger(__name__)


def create_cache_backend(settings: CacheSettings) -> Optional[CacheBackend]:
    """Cache backend selected by ``CACHE_BACKEND``; None disables caching."""
    if settings.backend == "none":
        return None
    if settings.backend == "redis":
        return RedisCacheBackend(url=settings.redis_url, prefix=settings.key_prefix)
    return InMemoryCacheBackend()


def create_provider(
    settings: Optional[Settings] = None,
    cache_backend: Optional[CacheBackend] = None,
    error_handler: Optional[ProviderErrorHandler] = None,
    session: Optional[requests.Session] = None,
) -> TelemedicineProvider:
    """
    Get the telemedicine provider configured for this environment.

    Args:
        settings: Settings to use instead of the global ones
        cache_backend: Backend to use instead of the configured one
        error_handler: Error translation policy for the real provider
        session: HTTP session for the real provider

    Returns:
        TelemedicineProvider: Fleury adapter or the in-memory fake

    Raises:
        ConfigurationError: if the Fleury settings are incomplete
    """
    if settings is None:
        settings = get_settings()
        configure_logging(settings.logging)

    if settings.provider == "fake":
        logger.info("Using in-memory fake telemedicine provider")
        return FakeScheduledTelemedicineProvider(timezone=settings.fleury.timezone)

    fleury = settings.fleury
    missing = [
        name
        for name, value in (
            ("FLEURY_BASE_URL", fleury.base_url),
            ("FLEURY_API_KEY", fleury.api_key),
            ("FLEURY_CLIENT_ID", fleury.client_id),
        )
        if not value
    ]
    if missing:
        raise ConfigurationError(
            f"Fleury provider is missing configuration: {', '.join(missing)}",
            {"missing": missing},
        )

    backend = cache_backend if cache_backend is not None else create_cache_backend(settings.cache)
    cache = ReadThroughCache(
        backend,
        default_ttl_seconds=settings.cache.ttl_seconds,
        enabled=backend is not None,
    )

    logger.info(
        f"Using Fleury telemedicine provider (cache: {settings.cache.backend if backend else 'none'})"
    )
    return FleuryScheduledTelemedicineProvider(
        fleury,
        error_handler=error_handler,
        cache=cache,
        session=session,
    )


__all__ = ["create_cache_backend", "create_provider"]
