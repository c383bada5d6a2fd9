import logging

from flask import Blueprint, abort, request

from film_api.auth import basic_auth_guard
from film_api.responses import text_response
from film_api.schemas.actor import actors_schema
from film_api.schemas.film import film_post_schema, film_put_schema, film_schema
from film_api.store import FailureKind, SortBy, SortOrder, StoreError
from film_api.validators import load, parse_id, read_json_body

logger = logging.getLogger(__name__)


def single_query_value(name):
    values = request.args.getlist(name)
    return values[0] if len(values) == 1 else None


def parse_sorting():
    """Read ``sort_by``/``sort_order``; anything unrecognized falls back to rating, DESC."""
    sort_by = single_query_value("sort_by")
    sort_order = single_query_value("sort_order")
    if sort_by not in {s.value for s in SortBy}:
        sort_by = SortBy.RATING
    if sort_order not in {s.value for s in SortOrder}:
        sort_order = SortOrder.DESC
    return SortBy(sort_by), SortOrder(sort_order)


def make_films_router(store):
    # Blueprint gets inserted into flask app
    films_router = Blueprint('films', __name__, url_prefix='/film')
    films_router.before_request(basic_auth_guard(store))

    def film_with_actors(film_id, film):
        return {
            "film": film_schema.dump(film),
            "actors": actors_schema.dump(store.get_film_actors(film_id)),
        }

    @films_router.get("/")
    def read_all_films():
        sort_by, sort_order = parse_sorting()
        films = store.list_films(sort_by, sort_order)
        return [film_with_actors(f.id, f) for f in films]

    @films_router.get("/<film_id>", strict_slashes=False)
    def read_film(film_id):
        film_id = parse_id(film_id)
        return film_with_actors(film_id, store.get_film(film_id))

    @films_router.post("/")
    def create_film():
        body = load(film_post_schema, read_json_body())
        film_id = store.add_film(body["film"])
        logger.info("film %s added", film_id)

        # the film row is already committed; a failed link stops here
        for actor_id in body["actors_ids"]:
            try:
                store.add_film_actor(actor_id, film_id)
            except StoreError as err:
                if err.kind is not FailureKind.CONSTRAINT:
                    raise
                logger.error("%s %s: cannot add FilmActor: %s", request.method, request.path, err)
                abort(400, f"cannot add actor with id {actor_id}")

        return text_response("film added")

    @films_router.put("/<film_id>", strict_slashes=False)
    def update_film(film_id):
        film_id = parse_id(film_id)
        body = load(film_put_schema, read_json_body())
        store.update_film(film_id, body["film"])

        # links are best effort: log failures and carry on
        for actor_id in body["actors_ids"]:
            try:
                store.add_film_actor(actor_id, film_id)
            except StoreError as err:
                logger.error("%s %s: cannot add FilmActor: %s", request.method, request.path, err)
        for actor_id in body["remove_actors_ids"]:
            try:
                store.delete_film_actor(film_id, actor_id)
            except StoreError as err:
                logger.error("%s %s: cannot delete FilmActor: %s", request.method, request.path, err)

        return text_response("film updated")

    @films_router.delete("/<film_id>", strict_slashes=False)
    def delete_film(film_id):
        film_id = parse_id(film_id)
        if store.delete_film(film_id) == 0:
            abort(404, "not found")
        logger.info("film %s deleted", film_id)
        return text_response("film deleted")

    @films_router.route("/", methods=["PUT", "DELETE"])
    def reject_missing_id():
        abort(400, "invalid id")

    return films_router
