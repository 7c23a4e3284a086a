"""Session handling for row imports.

``startup`` binds this module to one engine. Every ``SqlAlchemyImportUnitOfWork``
created afterwards opens its own session on that engine for the duration of a
``with`` block.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from simas_import.adapters.sqlalchemy.mappings import create_all_tables
from simas_import.adapters.sqlalchemy.repositories import (
    SqlAlchemyAuditLogRepository,
    SqlAlchemyReferenceRepository,
    SqlAlchemyVacancyRepository,
)
from simas_import.config import get_database_config
from simas_import.domain.ports.unit_of_work import ImportRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """The database binding is missing, already present, or a session is not open."""


@dataclass(slots=True)
class _Binding:
    engine: Engine | None = None
    sessions: sessionmaker[Session] | None = None

    def bind(self, engine: Engine) -> None:
        self.engine = engine
        self.sessions = sessionmaker(bind=engine, expire_on_commit=False)

    def clear(self) -> Engine | None:
        engine = self.engine
        self.engine = None
        self.sessions = None
        return engine

    def session_factory(self) -> sessionmaker[Session]:
        if self.sessions is None:
            raise StartupError("Database not started; call startup() before opening a unit of work")
        return self.sessions


_binding = _Binding()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> Engine:
    """Bind to ``engine`` (or a new one for ``database_uri``) and create missing tables.

    Without an explicit engine or URI the location comes from ``get_database_config``.
    Binding again requires ``force=True``; the previous engine is left to its owner.
    """

    if _binding.engine is not None and not force:
        raise StartupError("Database already started; pass force=True to rebind")
    if engine is None:
        engine = create_engine(database_uri or get_database_config().uri, future=True)
    create_all_tables(engine)
    _binding.bind(engine)
    log.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
    return engine


def configured_engine() -> Engine | None:
    return _binding.engine


def is_started() -> bool:
    return _binding.engine is not None


def shutdown() -> None:
    """Dispose the bound engine, if any, and forget it."""

    engine = _binding.clear()
    if engine is not None:
        engine.dispose()


class SqlAlchemyImportUnitOfWork:
    """One session, with the import repositories bound to it, per ``with`` block.

    Nothing is committed implicitly: leaving the block without ``commit()`` discards
    the writes, and leaving it because of an exception rolls them back.
    """

    def __init__(self) -> None:
        self._sessions = _binding.session_factory()
        self._session: Session | None = None
        self._repositories: ImportRepositories | None = None

    def __enter__(self) -> SqlAlchemyImportUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work is already open")
        session = self._sessions()
        self._session = session
        self._repositories = ImportRepositories(
            vacancies=SqlAlchemyVacancyRepository(session),
            audit_log=SqlAlchemyAuditLogRepository(session),
            references=SqlAlchemyReferenceRepository(session),
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        try:
            if exc_type is not None:
                session.rollback()
        finally:
            session.close()
            self._session = None
            self._repositories = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work is not open; use it in a with block")
        return self._session

    @property
    def repositories(self) -> ImportRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work is not open; use it in a with block")
        return self._repositories

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


if TYPE_CHECKING:
    from simas_import.domain.ports.unit_of_work import ImportUnitOfWork

    _uow_check: ImportUnitOfWork = SqlAlchemyImportUnitOfWork()
