"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Canvas offsets, message types, property keys, colour scales
- exceptions: Custom exception hierarchy
- ingress: Message deserialisation at the transport boundary
"""
