from marshmallow import fields

DATE_FORMAT = "%d.%m.%Y"


class CustomDate(fields.Date):
    """Calendar date exchanged as ``DD.MM.YYYY`` text; unset dates dump as null."""

    default_error_messages = {
        "invalid": "date should be in DD.MM.YYYY format",
        "format": "date should be in DD.MM.YYYY format",
    }

    def __init__(self, **kwargs):
        super().__init__(format=DATE_FORMAT, **kwargs)
