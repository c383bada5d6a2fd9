import logging

from flask import Blueprint, abort, request

from film_api import security
from film_api.models.user import USER_ROLE
from film_api.responses import text_response
from film_api.schemas.user import sign_up_schema
from film_api.validators import load, read_json_body

logger = logging.getLogger(__name__)


def make_users_router(store):
    # sign-up is the bootstrap path, so no auth guard here
    users_router = Blueprint('users', __name__, url_prefix='/sign-up')

    @users_router.post("/")
    def sign_up():
        credentials = load(sign_up_schema, read_json_body())
        try:
            password_hash = security.get_password_hash(credentials["password"])
        except (TypeError, ValueError) as err:
            logger.error("%s %s: cannot generate hash for pass: %s", request.method, request.path, err)
            abort(500, "internal server error")
        store.add_user(credentials["name"], password_hash, USER_ROLE)
        return text_response("user signed up")

    return users_router
