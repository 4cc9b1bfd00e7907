"""
BandWatch Services

Service layer containing all business logic.
Each service has a defined interface (contract) and implementation.
"""

from bandwatch.services.base import (
    BaseService,
    ServiceError,
    ValidationError,
    TickerNotFoundError,
    ProviderError,
    RateLimitError,
)

__all__ = [
    "BaseService",
    "ServiceError",
    "ValidationError",
    "TickerNotFoundError",
    "ProviderError",
    "RateLimitError",
]
