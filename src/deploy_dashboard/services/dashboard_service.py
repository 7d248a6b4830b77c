import asyncio
import html
import json
from typing import Any

import httpx
from loguru import logger

from deploy_dashboard.core.client import MetricsClient
from deploy_dashboard.core.config import settings
from deploy_dashboard.schemas.dashboard import DashboardState, Empty, Loaded


def format_payload(payload: Any) -> str:
    """Pretty-prints a payload with two-space indentation.

    Lone surrogates cannot be encoded as UTF-8 and are kept as \\uXXXX escapes.
    """
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def render_dashboard(state: DashboardState, title: str | None = None) -> str:
    """Renders the dashboard markup for a given state.

    Only a Loaded state produces a ``<pre>`` block. Quotes are left
    unescaped so the payload reads exactly as it was formatted.

    Args:
        state (DashboardState): Current view state.
        title (str | None): Heading override, defaults to ``DASHBOARD_TITLE``.

    Returns:
        str: HTML fragment.
    """
    heading = html.escape(title or settings.DASHBOARD_TITLE)
    if isinstance(state, Loaded):
        block = f"\n  <pre>{html.escape(format_payload(state.payload), quote=False)}</pre>"
    elif isinstance(state, Empty):
        block = ""
    else:
        raise TypeError(f"Unknown dashboard state: {state!r}")
    return f"<div>\n  <h1>{heading}</h1>{block}\n</div>"


class DashboardView:
    """Displays the latest metrics snapshot.

    Mounting schedules a single fetch on the running event loop and returns
    immediately; the state moves from Empty to Loaded once the payload
    arrives. Failed fetches leave the view Empty and are only logged.

    Args:
        client (MetricsClient): Client for the metrics service.
    """

    def __init__(self, client: MetricsClient):
        self.client = client
        self.state: DashboardState = Empty()
        self.fetch_task: asyncio.Task | None = None

    @property
    def mounted(self) -> bool:
        return self.fetch_task is not None

    def mount(self) -> asyncio.Task:
        """Starts the one fetch of this mount.

        Returns:
            asyncio.Task: The pending fetch. Mounting twice returns the same task.
        """
        if self.fetch_task is not None:
            logger.debug("Dashboard already mounted, not fetching again")
            return self.fetch_task
        self.fetch_task = asyncio.create_task(self._load())
        return self.fetch_task

    async def _load(self):
        try:
            payload = await self.client.fetch_metrics()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Metrics fetch failed, dashboard stays empty: {e!r}")
            return

        if payload is None:
            logger.debug("Metrics endpoint returned null, nothing to display")
            return

        self.state = Loaded(payload=payload)
        logger.info("Metrics snapshot loaded")

    async def unmount(self):
        """Cancels a pending fetch and discards the current payload."""
        if self.fetch_task is not None and not self.fetch_task.done():
            logger.debug("Unmounting with fetch still pending, cancelling it")
            self.fetch_task.cancel()
            try:
                await asyncio.wait_for(self.fetch_task, timeout=2.0)
            except (asyncio.CancelledError, asyncio.TimeoutError):
                pass
        self.fetch_task = None
        self.state = Empty()

    def render(self) -> str:
        return render_dashboard(self.state)
