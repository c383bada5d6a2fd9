import logging

from flask import Blueprint, abort

from film_api.auth import basic_auth_guard
from film_api.responses import text_response
from film_api.schemas.actor import actor_schema
from film_api.schemas.film import films_schema
from film_api.validators import load, parse_id, read_json_body

logger = logging.getLogger(__name__)


def make_actors_router(store):
    # Blueprint gets inserted into flask app
    actors_router = Blueprint('actors', __name__, url_prefix='/actor')
    actors_router.before_request(basic_auth_guard(store))

    def actor_with_films(actor_id, actor):
        return {
            "actor": actor_schema.dump(actor),
            "films": films_schema.dump(store.get_actor_films(actor_id)),
        }

    @actors_router.get("/")
    def read_all_actors():
        # one films query per actor
        return {"actors": [actor_with_films(a.id, a) for a in store.list_actors()]}

    @actors_router.get("/<actor_id>", strict_slashes=False)
    def read_actor(actor_id):
        actor_id = parse_id(actor_id)
        # a missing actor comes back as an empty record, not a 404
        return actor_with_films(actor_id, store.get_actor(actor_id))

    @actors_router.post("/")
    def create_actor():
        actor_data = load(actor_schema, read_json_body())
        actor_id = store.add_actor(actor_data)
        logger.info("actor %s added", actor_id)
        return text_response("actor added")

    @actors_router.put("/<actor_id>", strict_slashes=False)
    def update_actor(actor_id):
        actor_id = parse_id(actor_id)
        actor_data = load(actor_schema, read_json_body())
        # only the fields present in the body are written
        store.update_actor(actor_id, actor_data)
        return text_response("actor updated")

    @actors_router.delete("/<actor_id>", strict_slashes=False)
    def delete_actor(actor_id):
        actor_id = parse_id(actor_id)
        if store.delete_actor(actor_id) == 0:
            abort(404, "not found")
        logger.info("actor %s deleted", actor_id)
        return text_response("actor deleted")

    @actors_router.route("/", methods=["PUT", "DELETE"])
    def reject_missing_id():
        abort(400, "invalid id")

    return actors_router
