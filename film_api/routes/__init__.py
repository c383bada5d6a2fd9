from film_api.routes.actors import make_actors_router
from film_api.routes.films import make_films_router
from film_api.routes.search import make_search_router
from film_api.routes.users import make_users_router


def register_routes(app, store):
    app.register_blueprint(make_users_router(store))
    app.register_blueprint(make_actors_router(store))
    app.register_blueprint(make_films_router(store))
    app.register_blueprint(make_search_router(store))
