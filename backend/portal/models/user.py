from werkzeug.security import generate_password_hash, check_password_hash
from portal.extensions import db
from .base import BaseModel

class User(BaseModel):
    __tablename__ = 'users'

    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)
    is_active = db.Column(db.Boolean, default=True)

    roles = db.relationship("UserRole", back_populates="user", cascade="all, delete-orphan")

    def __init__(self, password=None, **kwargs):
        super().__init__(**kwargs)
        if password is not None:
            self.set_password(password)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "is_active": self.is_active,
        }
