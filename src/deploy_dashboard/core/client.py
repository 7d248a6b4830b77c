from typing import Any

import httpx
from loguru import logger

from deploy_dashboard.core.config import settings


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


class MetricsClient:
    """Async HTTP client for the metrics service.

    One call, one request: no retry adapter, no backoff. The timeout is
    whatever ``METRICS_TIMEOUT`` says, and unset means wait indefinitely.

    Args:
        base_url (str): Root URL of the metrics service.
        path (str): Path of the metrics endpoint.
        timeout (float | None): Seconds to wait for a response, or None.
        transport (httpx.AsyncBaseTransport | None): Custom transport, mainly for tests.
    """

    def __init__(
        self,
        base_url: str | None = None,
        path: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.METRICS_BASE_URL
        self.path = path or settings.METRICS_PATH
        self.timeout = timeout if timeout is not None else settings.METRICS_TIMEOUT
        self.client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=transport)

    async def fetch_metrics(self) -> Any:
        """Fetches the metrics endpoint and decodes its body as JSON.

        The status code is not checked: whatever the service answers is
        parsed, and a non-2xx status is only logged.

        Returns:
            Any: The decoded JSON payload.

        Raises:
            httpx.HTTPError: On transport failures and timeouts.
            ValueError: If the body is not valid JSON.
        """
        logger.debug(f"Fetching metrics from {self.base_url}{self.path}")
        response = await self.client.get(self.path)
        if not response.is_success:
            logger.warning(f"Metrics endpoint answered {response.status_code}: {self.base_url}{self.path}")
        return response.json(parse_constant=_reject_constant)

    async def close(self):
        await self.client.aclose()
