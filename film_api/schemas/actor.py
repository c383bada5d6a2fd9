from marshmallow import EXCLUDE, fields, validate

from film_api.models.actor import SEXES, Actor
from film_api.schemas import ma
from film_api.schemas.fields import CustomDate


def _name(label):
    message = f"{label} length should be at least 1 and no more than 20 characters"
    return fields.String(
        required=True,
        validate=validate.Length(min=1, max=20, error=message),
        error_messages={"required": message, "null": message, "invalid": message},
    )


class ActorSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Actor
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    first_name = _name("first name")
    last_name = _name("last name")
    sex = fields.String(
        required=True,
        validate=validate.OneOf(SEXES, error="sex should be 'm' or 'f'"),
        error_messages={
            "required": "sex should be 'm' or 'f'",
            "null": "sex should be 'm' or 'f'",
            "invalid": "sex should be 'm' or 'f'",
        },
    )
    birthdate = CustomDate(allow_none=True)

# instantiate
actor_schema = ActorSchema()
actors_schema = ActorSchema(many=True)
