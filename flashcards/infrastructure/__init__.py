"""
Infrastructure layer.

Implementations of the ports defined in the application layer:
SQLAlchemy repositories, the join row source and ORM mappers.

This layer depends on domain and application layers,
but they do not depend on it.
"""
