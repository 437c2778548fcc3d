"""Core interfaces.

Why:
- Protocol contracts implemented by concrete adapters.
- Lets the core depend on abstractions and lets tests swap the transport.
"""
