from marshmallow import EXCLUDE, fields, validate

from film_api.models.film import Film
from film_api.schemas import ma
from film_api.schemas.fields import CustomDate
from film_api.validators import MAX_ID

NAME_ERROR = "the length of the film name must be at least 1 and no more than 150 characters"
DESCRIPTION_ERROR = "film's description len should not exceed 1500 symbols"
RATING_ERROR = "film's rating should be from 0 to 10"


class FilmSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Film
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    # every field is optional, even on creation
    name = fields.String(
        allow_none=True,
        validate=validate.Length(min=1, max=150, error=NAME_ERROR),
        error_messages={"invalid": NAME_ERROR},
    )
    description = fields.String(
        allow_none=True,
        validate=validate.Length(max=1500, error=DESCRIPTION_ERROR),
        error_messages={"invalid": DESCRIPTION_ERROR},
    )
    release_date = CustomDate(allow_none=True)
    rating = fields.Integer(
        strict=True,
        allow_none=True,
        validate=validate.Range(min=0, max=10, error=RATING_ERROR),
        error_messages={"invalid": RATING_ERROR},
    )


def _actor_ids():
    return fields.List(
        fields.Integer(
            strict=True,
            validate=validate.Range(min=1, max=MAX_ID, error="invalid actor id"),
            error_messages={"invalid": "actor ids should be integers"},
        ),
        load_default=list,
        error_messages={"invalid": "actor ids should be a list of integers"},
    )


class FilmPostSchema(ma.Schema):
    """Body of ``POST /film/``: the film itself plus the actors to credit."""

    class Meta:
        unknown = EXCLUDE

    film = fields.Nested(
        FilmSchema,
        load_default=dict,
        error_messages={"null": "film should be an object", "type": "film should be an object"},
    )
    actors_ids = _actor_ids()


class FilmPutSchema(FilmPostSchema):
    remove_actors_ids = _actor_ids()


film_schema = FilmSchema()
films_schema = FilmSchema(many=True)
film_post_schema = FilmPostSchema()
film_put_schema = FilmPutSchema()
