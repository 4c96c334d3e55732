"""Base classes for API module facades and their resources."""

from typing import Any

from served_sdk._internal.transport import HttpTransport
from served_sdk.models.common import ListResponse

DEFAULT_API_VERSION = "v1"


class ApiModule:
    """Groups the resources of one platform module behind a single attribute.

    Module resources live at ``api/{version}/{module}/{resource}``; older
    resources are still served from ``api/{resource}``.

    Attributes:
        module_name: Path segment of the module (``finance``, ``devops``...).
        version: API version segment.
    """

    module_name: str = ""
    version: str = DEFAULT_API_VERSION

    def __init__(self, transport: HttpTransport) -> None:
        """Initialize the module.

        Args:
            transport: The shared transport of the owning client.
        """
        self._transport = transport

    def resource_path(self, resource: str) -> str:
        return f"api/{self.version}/{self.module_name}/{resource}"

    @staticmethod
    def legacy_path(resource: str) -> str:
        return f"api/{resource}"


class ApiResource:
    """A resource of an :class:`ApiModule` with hand-written endpoints.

    Used for resources whose list calls take plain arguments instead of a
    query model, or whose endpoints do not follow the CRUD layout.
    """

    resource_name: str = ""

    def __init__(self, transport: HttpTransport, module: ApiModule) -> None:
        self._transport = transport
        self._module = module
        self._base_path = module.resource_path(self.resource_name)

    @property
    def base_path(self) -> str:
        return self._base_path

    async def _get_list(self, path: str, item_type: Any) -> list[Any]:
        envelope = await self._transport.get(path, ListResponse[item_type])
        if envelope is None or envelope.data is None:
            return []
        return envelope.data

    async def _post_list(self, path: str, body: Any, item_type: Any) -> list[Any]:
        envelope = await self._transport.post(path, body, ListResponse[item_type])
        if envelope is None or envelope.data is None:
            return []
        return envelope.data
