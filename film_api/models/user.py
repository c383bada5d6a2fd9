from film_api.models import db

ADMIN_ROLE = "admin"
USER_ROLE = "user"


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)
    role = db.Column(db.Enum(ADMIN_ROLE, USER_ROLE, name="role_enum"), nullable=False, default=USER_ROLE)
    # bcrypt hash, never the plain password
    password = db.Column(db.String(255), nullable=False)

    @property
    def is_admin(self):
        return self.role == ADMIN_ROLE
