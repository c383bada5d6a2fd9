from flask import Blueprint, abort, request

from film_api.auth import basic_auth_guard
from film_api.schemas.film import films_schema


def make_search_router(store):
    search_router = Blueprint('search', __name__, url_prefix='/search')
    search_router.before_request(basic_auth_guard(store))

    @search_router.get("/")
    def search_films():
        fragments = request.args.getlist("search_by")
        if len(fragments) != 1:
            abort(400, "invalid query param")
        return {"films": films_schema.dump(store.search_films(fragments[0]))}

    return search_router
