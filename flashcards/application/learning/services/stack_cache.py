"""
In-memory cache of the stack graph.

The cache is owned by the application container and injected into the
use cases. Its lifecycle is init -> any number of rebuild/read cycles ->
clear() at teardown. Every write use case calls rebuild() after its
statement succeeds; read use cases call ensure_ready() first.
"""

import asyncio
from collections.abc import Mapping
from contextlib import aclosing
from types import MappingProxyType

import structlog

from flashcards.application.learning.protocols.row_source import StackRowSourceProtocol
from flashcards.domain.common.value_objects import StackId
from flashcards.domain.learning.entities import Stack
from flashcards.domain.learning.services.stack_graph_builder import StackGraphBuilder

logger = structlog.get_logger(__name__)

_EMPTY_GRAPH: Mapping[StackId, Stack] = MappingProxyType({})


class StackCache:
    """
    Holds the last built stack graph.

    Rebuilds are serialized by a lock and build into a local mapping that
    is swapped in with a single assignment, so concurrent readers see
    either the previous snapshot or the new one, never a partial graph.
    A failed rebuild leaves the previous snapshot and the initialized
    flag untouched.
    """

    def __init__(
        self,
        row_source: StackRowSourceProtocol,
        graph_builder: StackGraphBuilder,
    ) -> None:
        """Initialize an empty, uninitialized cache."""
        self.row_source = row_source
        self.graph_builder = graph_builder
        self._graph: Mapping[StackId, Stack] = _EMPTY_GRAPH
        self._initialized = False
        self._generation = 0
        self._rebuild_lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        """Whether at least one rebuild has succeeded since init or clear()."""
        return self._initialized

    @property
    def generation(self) -> int:
        """Number of successful rebuilds."""
        return self._generation

    @property
    def graph(self) -> Mapping[StackId, Stack]:
        """Read-only view of the current snapshot."""
        return self._graph

    async def rebuild(self) -> None:
        """
        Re-run the join and replace the cached graph.

        Raises:
            StorageUnavailableError: If the store cannot be reached
            MalformedRowError: If a join row has no stack id
        """
        async with self._rebuild_lock:
            await self._rebuild_locked()

    async def ensure_ready(self) -> None:
        """Rebuild only if the cache has never been populated."""
        if self._initialized:
            return
        async with self._rebuild_lock:
            # Another reader may have populated it while we waited
            if self._initialized:
                return
            await self._rebuild_locked()

    def get(self, stack_id: StackId) -> Stack | None:
        """Return the cached stack, or None."""
        return self._graph.get(stack_id)

    def find(self, stack_id: int) -> Stack | None:
        """Return the cached stack for a raw id. Negative ids never match."""
        if stack_id < 0:
            return None
        return self.get(StackId(stack_id))

    def list_all(self) -> list[Stack]:
        """Return all cached stacks in first-seen order."""
        return list(self._graph.values())

    def clear(self) -> None:
        """Drop the snapshot. The next read repopulates it."""
        self._graph = _EMPTY_GRAPH
        self._initialized = False
        logger.debug("stack_cache_cleared")

    async def _rebuild_locked(self) -> None:
        try:
            async with aclosing(self.row_source.stream()) as rows:
                graph = await self.graph_builder.build_async(rows)
        except Exception:
            logger.error(
                "stack_cache_rebuild_failed",
                generation=self._generation,
                exc_info=True,
            )
            raise

        self._graph = MappingProxyType(graph)
        self._initialized = True
        self._generation += 1
        logger.info("stack_cache_rebuilt", stacks=len(graph), generation=self._generation)
