"""Schema management for SQL-backed providers.

The memory provider keeps no schema, so only sqlite and postgresql
providers are touched.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

_SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    return [p for p in domain.providers.values() if p.conn_info["provider"] in _SQL_PROVIDERS]


def setup_db(domain: Domain) -> None:
    """Create the Review and ReviewVote tables."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            # A repository's DAO registers its aggregate's table on first access
            for record in domain.registry.aggregates.values():
                if record.cls.meta_.provider == provider.name:
                    domain.repository_for(record.cls)._dao  # noqa: B018

            provider._metadata.create_all(create_engine(provider.conn_info["database_uri"]))


def drop_db(domain: Domain) -> None:
    with domain.domain_context():
        for provider in _sql_providers(domain):
            provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
