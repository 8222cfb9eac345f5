"""Tests for the SQLAlchemy slug store."""

import uuid

import pytest
from sqlalchemy import Column, String
from sqlalchemy.orm import declarative_base

from conftest import ARTICLE_SLUGS, Article
from url_slugs import SlugQueryError, SQLAlchemySlugStore

UncreatedBase = declarative_base()


class Ghost(UncreatedBase):
    __tablename__ = "ghosts"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255))
    slug = Column(String(255))


@pytest.fixture
def store(db):
    db.add_all([
        Article(name='cool stuff', slug='cool-stuff'),
        Article(name='cool stuff', slug='cool-stuff-2'),
        Article(name='100% cool', slug='100%_cool'),
        Article(name='other', slug='other'),
    ])
    db.commit()
    return SQLAlchemySlugStore(db, Article, ARTICLE_SLUGS)


class TestSQLAlchemySlugStore:
    def test_slug_exists(self, store):
        assert store.slug_exists({}, 'cool-stuff') is True
        assert store.slug_exists({}, 'cool') is False

    def test_taken_slugs_by_prefix(self, store):
        assert store.taken_slugs({}, 'cool-stuff') == {'cool-stuff', 'cool-stuff-2'}
        assert store.taken_slugs({}, 'nothing') == set()

    def test_numbered_family_lookup(self, store, db):
        db.add(Article(name='cool stuffing', slug='cool-stuffing'))
        db.commit()
        assert store.taken_slugs({}, 'cool-stuff-') == {'cool-stuff-2'}

    def test_prefix_wildcards_escaped(self, store):
        assert store.taken_slugs({}, '100%') == {'100%_cool'}
        assert store.taken_slugs({}, '1_0') == set()

    def test_scope_filters(self, store):
        assert store.taken_slugs({'name': 'other'}, '') == {'other'}
        assert store.slug_exists({'name': 'other'}, 'cool-stuff') is False

    def test_pending_row_not_flushed_by_lookup(self, store, db):
        db.add(Article(name='pending'))
        assert store.slug_exists({}, 'pending') is False
        db.rollback()

    def test_find_by_slug(self, store):
        assert store.find_by_slug('cool-stuff-2').slug == 'cool-stuff-2'
        assert store.find_by_slug('missing') is None


class TestQueryErrors:
    def test_lookup_error_wrapped(self, db):
        store = SQLAlchemySlugStore(db, Ghost, ARTICLE_SLUGS)
        with pytest.raises(SlugQueryError) as exc_info:
            store.taken_slugs({}, 'boo')
        assert exc_info.value.__cause__ is not None
        db.rollback()

    def test_exists_error_wrapped(self, db):
        store = SQLAlchemySlugStore(db, Ghost, ARTICLE_SLUGS)
        with pytest.raises(SlugQueryError):
            store.slug_exists({}, 'boo')
        db.rollback()

    def test_find_error_wrapped(self, db):
        store = SQLAlchemySlugStore(db, Ghost, ARTICLE_SLUGS)
        with pytest.raises(SlugQueryError):
            store.find_by_slug('boo')
        db.rollback()
