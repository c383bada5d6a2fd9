from marshmallow import EXCLUDE, fields, validate

from film_api.schemas import ma


def _credential(label):
    message = f"{label} length should be at least 1 and no more than 100 characters"
    return fields.String(
        required=True,
        validate=validate.Length(min=1, max=100, error=message),
        error_messages={
            "required": f"{label} was not provided",
            "null": f"{label} was not provided",
            "invalid": f"{label} was not provided",
        },
    )


class SignUpSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = _credential("name")
    password = _credential("password")


sign_up_schema = SignUpSchema()
