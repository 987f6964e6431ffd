"""Domain layer - events and protocols (ports).

The domain layer has NO dependencies on any framework or infrastructure.

Structure:
- events/: DomainEvent base class
- protocols/: Ports consumed by the dispatcher (resolver, handler,
  response, event publisher, logger)
"""
