"""
Database package for the flightdesk system.

This package provides SQLAlchemy models, repositories and database
configuration.
"""

from .models import (
    Base,
    Airport,
    Aircraft,
    Flight,
    create_all_tables,
    drop_all_tables
)

from .config import (
    DatabaseConfig,
    get_database_config,
    reset_database_config,
    initialize_database,
    get_db_session,
    get_db_session_context
)

from .repositories import (
    SqlAlchemyAirportRepository,
    SqlAlchemyAircraftRepository,
    SqlAlchemyFlightRepository,
)

__all__ = [
    # Models
    'Base',
    'Airport',
    'Aircraft',
    'Flight',
    'create_all_tables',
    'drop_all_tables',

    # Configuration
    'DatabaseConfig',
    'get_database_config',
    'reset_database_config',
    'initialize_database',
    'get_db_session',
    'get_db_session_context',

    # Repositories
    'SqlAlchemyAirportRepository',
    'SqlAlchemyAircraftRepository',
    'SqlAlchemyFlightRepository',
]
