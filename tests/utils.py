"""Helpers for seeding records through the API."""

from __future__ import annotations

import base64


def basic_auth(name, password):
    token = base64.b64encode(f"{name}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


def create_actor(client, headers, **overrides):
    payload = {"first_name": "Keanu", "last_name": "Reeves", "sex": "m", "birthdate": "02.09.1964"}
    payload.update(overrides)
    res = client.post("/actor/", json=payload, headers=headers)
    assert res.status_code == 200, res.get_data(as_text=True)
    actors = client.get("/actor/", headers=headers).get_json()["actors"]
    return max(item["actor"]["id"] for item in actors)


def create_film(client, headers, actors_ids=(), **overrides):
    film = {"name": "The Matrix", "description": "Wake up, Neo.", "release_date": "31.03.1999", "rating": 9}
    film.update(overrides)
    res = client.post("/film/", json={"film": film, "actors_ids": list(actors_ids)}, headers=headers)
    assert res.status_code == 200, res.get_data(as_text=True)
    films = client.get("/film/", headers=headers).get_json()
    return max(item["film"]["id"] for item in films)
