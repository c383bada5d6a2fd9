"""Persistence gateway: every SQL statement the API issues lives here.

A ``Store`` is built once per application around the Flask-SQLAlchemy handle
and handed to the blueprints that need it. Each write commits on its own;
callers that chain several writes (a film and then its actor links) get no
atomicity across them.
"""

import enum
import logging
from functools import wraps

from sqlalchemy import delete, func, insert, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from film_api.models.actor import Actor
from film_api.models.film import Film
from film_api.models.film_actor import FilmActor
from film_api.models.user import User

logger = logging.getLogger(__name__)


class SortBy(str, enum.Enum):
    NAME = "name"
    RATING = "rating"
    RELEASE_DATE = "release_date"


class SortOrder(str, enum.Enum):
    ASC = "ASC"
    DESC = "DESC"


class FailureKind(enum.Enum):
    CONSTRAINT = "constraint"
    STORE = "store"


class StoreError(Exception):
    """A statement failed; ``kind`` says whether the store rejected the data."""

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind


def translate_errors(method):
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError as err:
            self.session.rollback()
            kind = FailureKind.CONSTRAINT if isinstance(err, IntegrityError) else FailureKind.STORE
            raise StoreError(kind, f"{method.__name__} failed: {err}") from err
    return wrapper


class Store:

    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    def _insert(self, record):
        self.session.add(record)
        self.session.commit()
        return record.id

    def _execute(self, statement):
        result = self.session.execute(statement)
        self.session.commit()
        return result.rowcount

    # actors

    @translate_errors
    def add_actor(self, fields):
        return self._insert(Actor(**fields))

    @translate_errors
    def update_actor(self, actor_id, changes):
        if not changes:
            return 0
        return self._execute(update(Actor).where(Actor.id == actor_id).values(**changes))

    @translate_errors
    def get_actor(self, actor_id):
        """Return the actor, or an ``Actor`` with id 0 and no fields set."""
        actor = self.session.get(Actor, actor_id)
        return actor if actor is not None else Actor(id=0)

    @translate_errors
    def list_actors(self):
        return self.session.execute(select(Actor)).scalars().all()

    @translate_errors
    def delete_actor(self, actor_id):
        return self._execute(delete(Actor).where(Actor.id == actor_id))

    # films

    @translate_errors
    def add_film(self, fields):
        return self._insert(Film(**fields))

    @translate_errors
    def update_film(self, film_id, changes):
        if not changes:
            return 0
        return self._execute(update(Film).where(Film.id == film_id).values(**changes))

    @translate_errors
    def get_film(self, film_id):
        """Return the film, or a ``Film`` with id 0 and no fields set."""
        film = self.session.get(Film, film_id)
        return film if film is not None else Film(id=0)

    @translate_errors
    def list_films(self, sort_by=SortBy.RATING, sort_order=SortOrder.DESC):
        # both values go through the enums so only known columns reach ORDER BY
        column = getattr(Film, SortBy(sort_by).value)
        if SortOrder(sort_order) is SortOrder.DESC:
            column = column.desc()
        return self.session.execute(select(Film).order_by(column)).scalars().all()

    @translate_errors
    def delete_film(self, film_id):
        return self._execute(delete(Film).where(Film.id == film_id))

    # links

    @translate_errors
    def add_film_actor(self, actor_id, film_id):
        self._execute(insert(FilmActor).values(film_id=film_id, actor_id=actor_id))

    @translate_errors
    def delete_film_actor(self, film_id, actor_id):
        return self._execute(
            delete(FilmActor).where(FilmActor.film_id == film_id, FilmActor.actor_id == actor_id)
        )

    @translate_errors
    def get_actor_films(self, actor_id):
        statement = (
            select(Film)
            .join(FilmActor, Film.id == FilmActor.film_id)
            .where(FilmActor.actor_id == actor_id)
        )
        return self.session.execute(statement).scalars().all()

    @translate_errors
    def get_film_actors(self, film_id):
        statement = (
            select(Actor)
            .join(FilmActor, Actor.id == FilmActor.actor_id)
            .where(FilmActor.film_id == film_id)
        )
        return self.session.execute(statement).scalars().all()

    @translate_errors
    def search_films(self, fragment):
        """Films whose name or any credited actor's first name contains ``fragment``.

        Matching ignores case and treats ``%`` and ``_`` literally. Films with
        no actors can still match by name.
        """
        needle = fragment.lower()
        statement = (
            select(Film)
            .outerjoin(FilmActor, Film.id == FilmActor.film_id)
            .outerjoin(Actor, FilmActor.actor_id == Actor.id)
            .where(or_(
                func.lower(Film.name).contains(needle, autoescape=True),
                func.lower(Actor.first_name).contains(needle, autoescape=True),
            ))
            .distinct()
            .order_by(Film.id)
        )
        return self.session.execute(statement).scalars().all()

    # users

    @translate_errors
    def add_user(self, name, password_hash, role):
        user_id = self._insert(User(name=name, password=password_hash, role=role))
        logger.info("user %s created with role %s", name, role)
        return user_id

    @translate_errors
    def get_user(self, name):
        return self.session.execute(select(User).where(User.name == name)).scalar_one_or_none()
