from film_api.models import db


# no unique constraint on (film_id, actor_id): linking twice stores two rows
class FilmActor(db.Model):
    __tablename__ = "films_actors"

    id = db.Column(db.Integer, primary_key=True)
    film_id = db.Column(db.Integer, db.ForeignKey("films.id", ondelete="CASCADE"), nullable=False)
    actor_id = db.Column(db.Integer, db.ForeignKey("actors.id", ondelete="CASCADE"), nullable=False)
