"""
Database Module
===============
Database connection and repository implementations.
"""
from ae_lingo.database.connection import Database, get_database
from ae_lingo.database.repositories import (
    StorageRepository,
    get_storage_repository
)

__all__ = [
    'Database',
    'get_database',
    'StorageRepository',
    'get_storage_repository'
]
