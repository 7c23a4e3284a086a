from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from simas_import.adapters.fuzzy_matcher import RapidFuzzMatcher
from simas_import.adapters.sqlalchemy import create_all_tables
from simas_import.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyImportUnitOfWork,
    shutdown,
    startup,
)
from tests.helpers.references import REFERENCE_ENTITIES

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def reference_matcher() -> RapidFuzzMatcher:
    return RapidFuzzMatcher(REFERENCE_ENTITIES)


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyImportUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyImportUnitOfWork:
        return SqlAlchemyImportUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()


@pytest.fixture
def seeded_unit_of_work(
    sqlite_unit_of_work: Callable[[], SqlAlchemyImportUnitOfWork],
) -> Callable[[], SqlAlchemyImportUnitOfWork]:
    with sqlite_unit_of_work() as uow:
        for entity in REFERENCE_ENTITIES:
            uow.repositories.references.add(entity)
        uow.commit()
    return sqlite_unit_of_work
