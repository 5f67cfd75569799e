"""Interfaces/abstractions of the Core.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- The Core depends on the abstraction of the bundler, never on node tooling.
"""
