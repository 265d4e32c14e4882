"""
Fire-and-Forget Alert Dispatcher

Hands finished alerts to an AlertSink without making the caller wait.

Key patterns:
- dispatch() schedules a background task and returns immediately
- Each alert is persisted independently; a failing alert is logged and skipped
- Sink failures never propagate to the caller
- Pending tasks are tracked so shutdown can drain them
"""

import asyncio
from typing import Sequence

from loguru import logger

from src.chain_alerts.alerts.sink import AlertSink
from src.chain_alerts.models.alert import Alert


class AlertDispatcher:
    """
    Dispatch alerts to a sink in the background.

    Attributes:
        sink: Destination for alerts
        persisted_count: Alerts written successfully
        failed_count: Alerts the sink rejected

    Example:
        ```python
        dispatcher = AlertDispatcher(sink)
        dispatcher.dispatch(alerts)  # returns immediately
        ...
        await dispatcher.drain()     # on shutdown
        ```
    """

    def __init__(self, sink: AlertSink):
        """
        Initialize dispatcher.

        Args:
            sink: Any object implementing the AlertSink protocol
        """
        self.sink = sink
        self.persisted_count = 0
        self.failed_count = 0
        self._pending: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """Number of dispatch tasks still running."""
        return len(self._pending)

    def dispatch(self, alerts: Sequence[Alert]) -> asyncio.Task:
        """
        Schedule persistence of a batch of alerts.

        Must be called from a running event loop.

        Args:
            alerts: Alerts to persist (in order)

        Returns:
            The background task (callers are not required to await it)
        """
        task = asyncio.get_running_loop().create_task(self._persist_all(list(alerts)))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _persist_all(self, alerts: list[Alert]) -> None:
        for alert in alerts:
            try:
                await self.sink.persist(alert)
                self.persisted_count += 1
                logger.debug(f"Persisted alert {alert.alert_id[:13]}... ({alert.type.value})")
            except Exception as e:
                self.failed_count += 1
                logger.warning(f"Failed to save alert {alert.alert_id[:13]}... to sink: {e}")

    async def drain(self) -> None:
        """Wait for every pending dispatch task to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending))
