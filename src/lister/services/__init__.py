from .listing_service import ListingService
from .rank_service import RankService, resolve_timestamp, timestamp_of


__all__ = [
    'ListingService',
    'RankService',
    'resolve_timestamp',
    'timestamp_of',
]
