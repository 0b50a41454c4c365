"""
Filter and sort engine for ride search results.

Pure functions over an already fetched candidate set. They do no I/O and
are cheap enough to re-run on every filter change.
"""

from typing import Callable, Iterable

from .models import FilterConfig, RideOffer, SortKey


def matches(offer: RideOffer, cfg: FilterConfig) -> bool:
    """Return True if an offer passes every filter in cfg."""
    low, high = cfg.price_range
    if not low <= offer.price_per_seat <= high:
        return False
    if cfg.female_only_required and not offer.female_only:
        return False
    return offer.available_seats >= cfg.min_seats


_SORT_KEYS: dict[SortKey, Callable[[RideOffer], object]] = {
    SortKey.PRICE: lambda offer: offer.price_per_seat,
    SortKey.DEPARTURE_TIME: lambda offer: offer.departure_time,
    SortKey.AVAILABLE_SEATS: lambda offer: -offer.available_seats,
}


def refine(candidates: Iterable[RideOffer], cfg: FilterConfig) -> list[RideOffer]:
    """
    Filter and order a candidate set.

    The sort is stable: offers with equal sort values keep their input
    order, so repeated calls with the same inputs give the same list.

    Args:
        candidates: Offers returned by the catalog
        cfg: Filter panel state

    Returns:
        New list of matching offers in cfg.sort_key order
    """
    kept = [offer for offer in candidates if matches(offer, cfg)]
    return sorted(kept, key=_SORT_KEYS[cfg.sort_key])
