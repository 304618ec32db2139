from protean.domain import Domain
from sqlalchemy import create_engine


def _register_tables(domain: Domain, provider) -> None:
    """Touch every repository's DAO so its table is registered with SQLAlchemy metadata."""
    # noqa: B018 is used to suppress the warning about the bare _dao attribute access
    for _, aggregate_record in domain.registry.aggregates.items():
        if aggregate_record.cls.meta_.provider == provider.name:
            domain.repository_for(aggregate_record.cls)._dao  # noqa: B018

    for _, entity_record in domain.registry.entities.items():
        if entity_record.cls.meta_.provider == provider.name:
            domain.repository_for(entity_record.cls)._dao  # noqa: B018

    for _, projection_record in domain.registry.projections.items():
        if projection_record.cls.meta_.provider == provider.name:
            domain.repository_for(projection_record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> list[str]:
    """Create review tables on every SQL provider. Returns the providers touched."""
    touched = []
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in ("sqlite", "postgresql"):
                engine = create_engine(provider.conn_info["database_uri"])
                _register_tables(domain, provider)
                provider._metadata.create_all(engine)
                touched.append(provider.name)
    return touched


def drop_db(domain: Domain) -> list[str]:
    """Drop review tables on every SQL provider. Returns the providers touched."""
    touched = []
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in ("sqlite", "postgresql"):
                engine = create_engine(provider.conn_info["database_uri"])
                provider._metadata.drop_all(engine)
                touched.append(provider.name)
    return touched


def uses_memory_store(domain: Domain) -> bool:
    """True when the default database lives in process memory."""
    with domain.domain_context():
        for name, provider in domain.providers.items():
            if name == "default":
                return provider.conn_info["provider"] == "memory"
    return False
