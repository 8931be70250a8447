from datetime import datetime, timezone
from functools import partial

import pytest
from sqlalchemy import Boolean, Column, DateTime, Integer, String, create_engine
from sqlalchemy.orm import Session, declarative_base

Base = declarative_base()

TOTAL_USERS = 45


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String, nullable=False)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(
        DateTime,
        default=partial(datetime.now, timezone.utc),
        nullable=False,
    )


@pytest.fixture
def session():
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        # every third user is inactive
        session.add_all(
            User(id=i, email=f"user{i:02d}@example.com", active=i % 3 != 0)
            for i in range(1, TOTAL_USERS + 1)
        )
        session.commit()
        yield session
    engine.dispose()
