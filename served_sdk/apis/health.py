"""Health module: API build and liveness information."""

from served_sdk._internal.module import ApiModule
from served_sdk.models.system import ApiHealthInfo


class HealthApi(ApiModule):
    module_name = "system"

    async def get_api_health(self) -> ApiHealthInfo | None:
        """Fetch the API's health document.

        Returns:
            The health info, or None if the API could not be reached or
            answered with an error.
        """
        try:
            return await self._transport.get(self.legacy_path("system/health"), ApiHealthInfo)
        except Exception as e:
            self._transport.log_debug(f"API health check failed: {e}")
            return None
