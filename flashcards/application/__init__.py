"""
Application layer.

Use cases orchestrating repositories and the stack cache.
"""
