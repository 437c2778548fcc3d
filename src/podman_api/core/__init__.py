"""Pure core of the client (no HTTP, no CLI).

Why:
- Everything here is deterministic and testable without a daemon.
- Adapters depend on the core; the core never imports adapters.
"""
