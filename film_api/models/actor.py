from film_api.models import db

SEXES = ("m", "f")


class Actor(db.Model):
    __tablename__ = "actors"

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(20))
    last_name = db.Column(db.String(20))
    sex = db.Column(db.Enum(*SEXES, name="sex_enum"))
    birthdate = db.Column(db.Date)

    def __repr__(self):
        return f"<Actor {self.id} {self.first_name} {self.last_name}>"
