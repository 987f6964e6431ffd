"""Application layer - commands, responses, handlers and dispatching.

Depends on the domain layer (protocols, events) and core (errors) only.
"""
