from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from geosearch.app.ports.output import ILocationStore
from geosearch.domain.exceptions import MalformedDocumentError
from geosearch.domain.models import GeoBoundingBox, Location
from geosearch.domain.query import Clause, SpatialQueryBuilder, and_

from .location_codec import decode_location, encode_location

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GeoSearchService:
    """Application service (use case) for bounding-box location search.

    A box crossing the antimeridian is split in two; each part gets its own
    query and the results are concatenated in split order (western part
    first). Results are not de-duplicated. Any store failure aborts the whole
    search.
    """

    store: ILocationStore
    query_builder: SpatialQueryBuilder = field(default_factory=SpatialQueryBuilder)
    parallel_queries: bool = True

    def plan(
        self, box: GeoBoundingBox, *, extra: Clause | None = None
    ) -> list[dict[str, Any]]:
        """Return the query documents a search for ``box`` would issue."""

        boxes = box.split_by_antimeridian() if box.is_over_antimeridian() else [box]
        queries: list[dict[str, Any]] = []
        for part in boxes:
            clause: Clause = self.query_builder.build(part)
            if extra is not None:
                clause = and_(clause, extra)
            queries.append(clause.to_query())
        return queries

    def search(
        self, box: GeoBoundingBox, *, extra: Clause | None = None
    ) -> list[Location]:
        queries = self.plan(box, extra=extra)
        logger.debug("Searching %s with %d sub-queries", box, len(queries))

        if self.parallel_queries and len(queries) > 1:
            with ThreadPoolExecutor(max_workers=len(queries)) as pool:
                # map() yields in submission order and re-raises the first failure.
                per_box = list(pool.map(self._run, queries))
        else:
            per_box = [self._run(q) for q in queries]

        results = [location for part in per_box for location in part]
        logger.info(
            "Bounding box search returned %d locations from %d sub-queries",
            len(results),
            len(queries),
        )
        return results

    def add_locations(self, locations: Iterable[Location]) -> int:
        field_name = self.query_builder.field
        documents = [encode_location(loc, point_field=field_name) for loc in locations]
        if not documents:
            return 0
        return self.store.insert_many(documents)

    def _run(self, query: Mapping[str, Any]) -> list[Location]:
        return [self._decode(doc) for doc in self.store.find(query)]

    def _decode(self, document: Mapping[str, Any]) -> Location:
        try:
            return decode_location(document, point_field=self.query_builder.field)
        except MalformedDocumentError as exc:
            logger.warning("Skipping point of malformed document: %s", exc)
            return Location(point=None, description=exc.description)
