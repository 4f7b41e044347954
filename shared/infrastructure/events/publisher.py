"""
After-commit domain event publisher.
"""
import dataclasses
import logging
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, Iterable
from uuid import UUID

from django.db import transaction

from shared.domain import BaseEntity, DomainEvent, ValueObject

logger = logging.getLogger(__name__)

Dispatcher = Callable[[str, Dict[str, Any]], Any]


def _to_primitive(value: Any) -> Any:
    if isinstance(value, ValueObject):
        values = dataclasses.fields(value)
        if len(values) == 1:
            return _to_primitive(getattr(value, values[0].name))
        return {f.name: _to_primitive(getattr(value, f.name)) for f in values}
    if isinstance(value, BaseEntity):
        return {
            f.name: _to_primitive(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if not f.name.startswith('_')
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_to_primitive(item) for item in value]
    return value


def event_to_payload(event: DomainEvent) -> Dict[str, Any]:
    """Serialize an event into a JSON-compatible dict."""
    data = {
        'event_id': str(event.event_id),
        'event_type': event.event_type,
        'occurred_at': event.occurred_at.isoformat(),
    }
    for f in dataclasses.fields(event):
        if f.name not in data:
            data[f.name] = _to_primitive(getattr(event, f.name))
    return data


class DomainEventPublisher:
    """
    Hands released events to a dispatcher once the current transaction commits.

    Outside a transaction the dispatch happens immediately. ``robust=True``
    keeps a failing dispatch from affecting the committed work or the other
    hooks.
    """

    def __init__(self, dispatcher: Dispatcher):
        self.dispatcher = dispatcher

    def publish(self, events: Iterable[DomainEvent]) -> None:
        for event in events:
            payload = event_to_payload(event)
            logger.debug("Scheduling %s: event_id=%s", event.event_type, payload['event_id'])
            transaction.on_commit(self._dispatch_callback(event.event_type, payload), robust=True)

    def _dispatch_callback(self, event_type: str, payload: Dict[str, Any]) -> Callable[[], None]:
        def dispatch():
            logger.info("Dispatching %s: event_id=%s", event_type, payload['event_id'])
            self.dispatcher(event_type, payload)
        return dispatch
