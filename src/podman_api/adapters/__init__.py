"""Adapters: the parts of the client that perform I/O."""
