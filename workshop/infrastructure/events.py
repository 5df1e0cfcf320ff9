"""
Logging Event Publisher

IEventPublisher implementation that writes service order events to the
logger named after the configured event channel. Deployments that need a
message broker plug in their own publisher behind the same interface.
"""

import logging

from workshop.application.config import EventConfig
from workshop.application.interfaces.events import (
    IEventPublisher,
    OrderCreatedEvent,
    OrderStatusUpdatedEvent,
)

logger = logging.getLogger(__name__)


class LoggingEventPublisher(IEventPublisher):
    """Publishes events as structured log records on the event channel."""

    def __init__(self, config: EventConfig | None = None) -> None:
        self.config = config or EventConfig()
        self.channel_logger = logging.getLogger(f"events.{self.config.channel}")

    async def publish_order_created(self, event: OrderCreatedEvent) -> None:
        self._publish(event.to_dict())

    async def publish_order_status_updated(self, event: OrderStatusUpdatedEvent) -> None:
        self._publish(event.to_dict())

    def _publish(self, payload: dict[str, object]) -> None:
        if not self.config.enabled:
            logger.debug(f"Event publication disabled, dropping {payload['event']}")
            return

        self.channel_logger.info(
            f"{payload['event']} {payload['order_id']}",
            extra={"event_payload": payload, "channel": self.config.channel},
        )
