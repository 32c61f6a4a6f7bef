from .entity_mappers import FlashcardMapper, StackMapper, StudySessionMapper
from .join_row_mapper import JoinRowMapper

__all__ = [
    "FlashcardMapper",
    "JoinRowMapper",
    "StackMapper",
    "StudySessionMapper",
]
