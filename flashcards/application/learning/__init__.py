"""
Learning bounded context - Application layer.

Write use cases run one storage statement and then rebuild the stack
cache; read use cases populate the cache lazily and project it into views.
"""
