from portal.extensions import db
from .base import BaseModel

class UserRole(BaseModel):
    __tablename__ = "user_roles"

    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    role = db.Column(db.String(50), nullable=False)  # admin

    user = db.relationship("User", back_populates="roles")

    __table_args__ = (
        db.UniqueConstraint("user_id", "role", name="uq_user_role"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "role": self.role,
        }
