"""Generic CRUD clients that every resource of every API module builds on."""

from collections.abc import AsyncIterator, Callable, Iterable, Sequence
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from served_sdk._internal.query import QueryPair, build_query_string, page_size_for
from served_sdk._internal.transport import HttpTransport
from served_sdk.exceptions import ServedAPIError, ServedContentTypeError
from served_sdk.models.common import BulkResponse, ListResponse, Page, QueryParams

EntityT = TypeVar("EntityT")
DetailT = TypeVar("DetailT")
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)
QueryT = TypeVar("QueryT", bound=QueryParams)

ExtraQueryParams = Callable[[Any], Iterable[QueryPair]]
EntityMapper = Callable[[list[Any]], list[Any]]


def _identity(items: list[Any]) -> list[Any]:
    return items


class _ResourceClient(Generic[EntityT, DetailT, QueryT]):
    """Read operations shared by the read-write and read-only clients."""

    def __init__(
        self,
        transport: HttpTransport,
        base_path: str,
        *,
        detail_type: type[DetailT],
        query_type: type[QueryT] = QueryParams,  # type: ignore[assignment]
        extra_query_params: ExtraQueryParams | None = None,
        map_entities: EntityMapper | None = None,
    ) -> None:
        """Initialize the resource client.

        Args:
            transport: Shared transport of the owning ServedClient.
            base_path: Resource path relative to the API base URL.
            detail_type: Model returned by ``get`` and contained in list envelopes.
            query_type: Query model instantiated when ``query`` is omitted.
            extra_query_params: Yields resource filters as ``(key, value)`` pairs.
            map_entities: Converts fetched details to list entities.
        """
        self._transport = transport
        self._base_path = base_path.rstrip("/")
        self._detail_type = detail_type
        self._query_type = query_type
        self._extra_query_params = extra_query_params
        self._map_entities = map_entities or _identity

    @property
    def base_path(self) -> str:
        return self._base_path

    def _item_path(self, id: int | str) -> str:
        return f"{self._base_path}/{id}"

    def _list_path(self, query: QueryT | None) -> str:
        if query is None:
            query = self._query_type()
        extras = self._extra_query_params(query) if self._extra_query_params else None
        return self._base_path + build_query_string(query, extras)

    async def get_page(self, query: QueryT | None = None) -> Page[EntityT]:
        """Fetch one page of the resource together with its pagination metadata."""
        envelope = await self._transport.get(
            self._list_path(query), ListResponse[self._detail_type]
        )
        if envelope is None:
            return Page()
        if envelope.data is None:
            return Page(meta=envelope.meta)
        return Page(items=self._map_entities(envelope.data), meta=envelope.meta)

    async def get_all(self, query: QueryT | None = None) -> list[EntityT]:
        """List the resource.

        Args:
            query: Pagination, search and resource filters. Defaults to the
                first page at the server default size.

        Returns:
            The mapped entities, or an empty list if the server sent no data.
        """
        page = await self.get_page(query)
        return page.items

    async def iter_all(self, query: QueryT | None = None) -> AsyncIterator[EntityT]:
        """Iterate over every entity, fetching pages until the server reports no more."""
        query = (query if query is not None else self._query_type()).model_copy()
        take = page_size_for(query)
        skip = query.skip if query.skip and query.skip > 0 else 0
        while True:
            query = query.model_copy(update={"take": take, "skip": skip})
            page = await self.get_page(query)
            for item in page.items:
                yield item
            if not page.items or not page.has_more:
                return
            skip += take

    async def get(self, id: int | str) -> DetailT:
        return await self._transport.get(self._item_path(id), self._detail_type)

    async def get_range(self, ids: Sequence[int | str]) -> list[DetailT]:
        """Fetch each id in turn, skipping ids the API refuses (404, 403, ...).

        Server errors and non-JSON responses (a silent logout) still raise.
        """
        results: list[DetailT] = []
        for id in ids:
            try:
                item = await self.get(id)
            except ServedContentTypeError:
                raise
            except ServedAPIError as e:
                if e.is_server_error:
                    raise
                continue
            if item is not None:
                results.append(item)
        return results


class ReadOnlyCrudClient(_ResourceClient[EntityT, EntityT, QueryT]):
    """List/get client for resources the API does not let callers modify."""

    def __init__(
        self,
        transport: HttpTransport,
        base_path: str,
        *,
        entity_type: type[EntityT],
        query_type: type[QueryT] = QueryParams,  # type: ignore[assignment]
        extra_query_params: ExtraQueryParams | None = None,
    ) -> None:
        super().__init__(
            transport,
            base_path,
            detail_type=entity_type,
            query_type=query_type,
            extra_query_params=extra_query_params,
        )


class CrudClient(
    _ResourceClient[EntityT, DetailT, QueryT],
    Generic[EntityT, DetailT, CreateT, UpdateT, QueryT],
):
    """Full create/read/update/delete client over ``base_path``.

    List calls return ``EntityT`` (usually a summary view produced by
    ``map_entities``); single-item calls return ``DetailT``.
    """

    async def create(self, request: CreateT) -> DetailT:
        return await self._transport.post(self._base_path, request, self._detail_type)

    async def update(self, id: int | str, request: UpdateT) -> DetailT:
        return await self._transport.put(self._item_path(id), request, self._detail_type)

    async def delete(self, id: int | str) -> None:
        await self._transport.delete(self._item_path(id))


class BulkCrudClient(CrudClient[EntityT, DetailT, CreateT, UpdateT, QueryT]):
    """CRUD client with ``{base_path}/bulk`` batch operations.

    Per-item failures are returned in :class:`BulkResponse`; only request
    level failures raise.
    """

    @property
    def _bulk_path(self) -> str:
        return f"{self._base_path}/bulk"

    def _bulk_response_type(self) -> Any:
        return BulkResponse[self._detail_type]

    async def create_bulk(self, request: BaseModel) -> BulkResponse[DetailT]:
        return await self._transport.post(self._bulk_path, request, self._bulk_response_type())

    async def update_bulk(self, request: BaseModel) -> BulkResponse[DetailT]:
        return await self._transport.put(self._bulk_path, request, self._bulk_response_type())

    async def delete_bulk(self, request: BaseModel) -> BulkResponse[DetailT]:
        return await self._transport.delete_with_body(
            self._bulk_path, request, self._bulk_response_type()
        )
