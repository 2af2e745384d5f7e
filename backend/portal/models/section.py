from portal.extensions import db
from portal.domain.sections import infer_section_kind
from .base import BaseModel

class Section(BaseModel):
    __tablename__ = "sections"

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    icon = db.Column(db.String(64), nullable=False, default="FileText")  # lucide icon name
    display_order = db.Column(db.Integer, nullable=False, default=0, index=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    kind = db.Column(db.String(32), nullable=False, index=True)  # study_material | flat

    contents = db.relationship(
        "SectionContent",
        back_populates="section",
        order_by="SectionContent.display_order",
    )

    def __init__(self, **kwargs):
        if not kwargs.get("kind"):
            kwargs["kind"] = infer_section_kind(kwargs.get("title")).value
        super().__init__(**kwargs)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description or "",
            "icon": self.icon,
            "display_order": self.display_order,
            "is_active": self.is_active,
            "kind": self.kind,
        }
