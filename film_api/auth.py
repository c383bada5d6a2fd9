import logging

from flask import request

from film_api import security
from film_api.responses import text_response
from film_api.store import StoreError

logger = logging.getLogger(__name__)

READ_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})
CHALLENGE = {"WWW-Authenticate": 'Basic realm="films"'}


def unauthorized(message="unauthorized"):
    return text_response(message, 401, headers=CHALLENGE)


def basic_auth_guard(store):
    """Build a ``before_request`` hook that admits callers with valid basic credentials.

    Reads are open to every user; anything else needs the admin role.
    Unknown users and failed lookups get the same 401 as a wrong password.
    """
    def guard():
        credentials = request.authorization
        if credentials is None or credentials.type != "basic" or credentials.username is None:
            return unauthorized("auth data was not provided")

        try:
            user = store.get_user(credentials.username)
        except StoreError as err:
            logger.error("%s %s: cannot get user from db: %s", request.method, request.path, err)
            return unauthorized()
        if user is None:
            logger.warning("%s %s: unknown user %r", request.method, request.path, credentials.username)
            return unauthorized()

        if not security.verify_password(credentials.password or "", user.password):
            return unauthorized()

        if request.method not in READ_METHODS and not user.is_admin:
            return text_response("forbidden", 403)
        return None

    return guard
