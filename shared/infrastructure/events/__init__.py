# Domain event delivery
from .publisher import DomainEventPublisher, event_to_payload

__all__ = ['DomainEventPublisher', 'event_to_payload']
