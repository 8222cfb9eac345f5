import uuid

import pytest
from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from url_slugs import SlugOptions, SlugRepository, slug_column, slug_unique_constraint

ARTICLE_SLUGS = SlugOptions(source_field="name")
WIDGET_SLUGS = SlugOptions(source_field="name", max_length=20, sparse=True)
PAGE_SLUGS = SlugOptions(source_field="title", exclude={"contact", "about"})
SECTION_SLUGS = SlugOptions(source_field="title", scope_fields=("book_id",))

Base = declarative_base()


class Article(Base):
    __tablename__ = "articles"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=True)
    body = Column(String(1000), nullable=True)
    slug = slug_column(ARTICLE_SLUGS)


class Widget(Base):
    __tablename__ = "widgets"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=True)
    slug = slug_column(WIDGET_SLUGS)


class Page(Base):
    __tablename__ = "pages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    slug = slug_column(PAGE_SLUGS)


class Section(Base):
    __tablename__ = "sections"
    __table_args__ = (
        slug_unique_constraint(SECTION_SLUGS, name="uq_sections_book_slug"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    book_id = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    slug = slug_column(SECTION_SLUGS)


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False})
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def articles(db):
    return SlugRepository(db, Article, ARTICLE_SLUGS)


@pytest.fixture
def widgets(db):
    return SlugRepository(db, Widget, WIDGET_SLUGS)


@pytest.fixture
def pages(db):
    return SlugRepository(db, Page, PAGE_SLUGS)


@pytest.fixture
def sections(db):
    return SlugRepository(db, Section, SECTION_SLUGS)
