"""
Search view state.

Holds what one open search screen shows: the last candidate set, the filter
panel and whether a fetch is in flight. Each search gets a generation
number; a response that arrives after a newer search was started, or after
the view was closed, is dropped instead of overwriting newer state.
"""

import logging
from typing import Any, Optional

from .filtering import refine
from .models import FilterConfig, RideOffer, SearchCriteria
from .service import RideService
from .exceptions import RideNotFoundError

logger = logging.getLogger(__name__)


class SearchView:
    """State behind a single search screen."""

    def __init__(self, rides: RideService, filters: Optional[FilterConfig] = None):
        self._rides = rides
        self._filters = filters or FilterConfig()
        self._criteria: Optional[SearchCriteria] = None
        self._candidates: list[RideOffer] = []
        self._generation = 0
        self._loading = False
        self._searched = False
        self._closed = False

    @property
    def filters(self) -> FilterConfig:
        return self._filters

    @property
    def criteria(self) -> Optional[SearchCriteria]:
        return self._criteria

    @property
    def candidates(self) -> list[RideOffer]:
        return list(self._candidates)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def searched(self) -> bool:
        return self._searched

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def results(self) -> list[RideOffer]:
        """Candidates narrowed and ordered by the current filters."""
        return refine(self._candidates, self._filters)

    def _is_current(self, generation: int) -> bool:
        return not self._closed and generation == self._generation

    async def search(self, criteria: SearchCriteria) -> Optional[list[RideOffer]]:
        """
        Run a search and apply its result if it is still wanted.

        Returns:
            The refined results, or None if the response was stale

        Raises:
            RuntimeError: If the view has been closed
            Any error of the current search (validation, network, timeout)
        """
        if self._closed:
            raise RuntimeError("Search view is closed")

        self._generation += 1
        generation = self._generation
        self._loading = True

        try:
            candidates = await self._rides.search(criteria)
        except Exception:
            if not self._is_current(generation):
                logger.debug("Dropping error from superseded search #%d", generation)
                return None
            self._loading = False
            raise

        if not self._is_current(generation):
            logger.debug("Dropping result of superseded search #%d", generation)
            return None

        self._criteria = criteria
        self._candidates = candidates
        self._loading = False
        self._searched = True
        return self.results

    def set_filters(self, filters: FilterConfig) -> list[RideOffer]:
        """Replace the filter panel state and return the new view."""
        self._filters = filters
        return self.results

    def update_filters(self, **changes: Any) -> list[RideOffer]:
        """
        Change individual filter fields.

        The merged config is validated like a freshly built one.
        """
        merged = {**self._filters.model_dump(), **changes}
        return self.set_filters(FilterConfig(**merged))

    def reset_filters(self) -> list[RideOffer]:
        """Restore the default filter panel."""
        return self.set_filters(FilterConfig())

    def find(self, ride_id: str) -> RideOffer:
        """
        Look up an offer from the last applied search.

        Raises:
            RideNotFoundError: If the offer is not among the candidates
        """
        for offer in self._candidates:
            if offer.id == ride_id:
                return offer
        raise RideNotFoundError(ride_id)

    def close(self) -> None:
        """Leave the screen. Responses still in flight will be dropped."""
        self._closed = True
        self._generation += 1
        self._loading = False
