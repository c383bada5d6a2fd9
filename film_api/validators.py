from flask import abort, request
from marshmallow import ValidationError

# ids are stored in 32-bit INTEGER columns
MAX_ID = 2**31 - 1


def first_error(messages):
    """Pull the first human-readable message out of marshmallow's nested errors."""
    if isinstance(messages, dict):
        return first_error(next(iter(messages.values())))
    if isinstance(messages, list):
        return first_error(messages[0])
    return str(messages)


def read_json_body():
    # the content type is not checked, clients often omit it
    body = request.get_json(force=True, silent=True)
    if body is None:
        abort(400, "cannot get request body")
    return body


def load(schema, body):
    """Validate ``body`` against ``schema`` and return only the fields it carried.

    Aborts with 400 and a plain-text reason when validation fails.
    """
    try:
        return schema.load(body)
    except ValidationError as err:
        abort(400, first_error(err.messages))


def parse_id(raw):
    # plain ascii digits only, so "-1", "+1" and "1_0" are all rejected
    if not (raw.isascii() and raw.isdigit()) or not 1 <= int(raw) <= MAX_ID:
        abort(400, "invalid id")
    return int(raw)
