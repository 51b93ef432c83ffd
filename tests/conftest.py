import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from roster.core.db import build_engine, get_db
from roster.main import app
from roster.models import Base, School, SchoolClass, Teacher
from roster.services.seed import seed_sample_roster


@pytest.fixture
def engine():
    # Fresh in-memory database per test
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def seeded(session_factory):
    db = session_factory()
    try:
        seed_sample_roster(db)
    finally:
        db.close()
    return session_factory


@pytest.fixture
def db(seeded):
    session = seeded()
    yield session
    session.close()


@pytest.fixture
def client(seeded):
    def override_get_db():
        session = seeded()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_chain(seeded):
    """Insert a school -> teacher -> class chain and commit."""
    def _add(*, school_id: int, teacher_id: int, class_id: int):
        session = seeded()
        try:
            session.add(School(id=school_id, name=f"School {school_id}", city="Springfield", state="Oregon"))
            session.add(Teacher(id=teacher_id, name=f"Teacher {teacher_id}", school_id=school_id))
            session.add(SchoolClass(id=class_id, name=f"Class {class_id}", teacher_id=teacher_id))
            session.commit()
        finally:
            session.close()
    return _add
