from film_api.models import db


class Film(db.Model):
    __tablename__ = "films"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150))
    description = db.Column(db.String(1500))
    release_date = db.Column(db.Date)
    rating = db.Column(db.SmallInteger)

    __table_args__ = (
        db.CheckConstraint("rating BETWEEN 0 AND 10", name="films_rating_range"),
    )

    def __repr__(self):
        return f"<Film {self.id} {self.name}>"
