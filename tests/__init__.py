"""Test suite for command_dispatcher.

- unit/: Unit tests with mocked collaborators
- integration/: Real in-memory adapters wired together
"""
