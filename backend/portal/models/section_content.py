from portal.extensions import db
from .base import BaseModel

class SectionContent(BaseModel):
    __tablename__ = "section_content"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    content_type = db.Column(db.String(16), nullable=False, default="text")  # text, link
    content_data = db.Column(db.JSON, nullable=False, default=dict)  # text/url + category/class/subject
    display_order = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)

    section = db.relationship("Section", back_populates="contents")

    __table_args__ = (
        db.Index("idx_section_content_order", "section_id", "display_order"),
    )

    def _payload(self):
        # rows written outside the editor may hold any JSON value
        if isinstance(self.content_data, dict):
            return dict(self.content_data)
        return {}

    def to_dict(self):
        return {
            "id": self.id,
            "section_id": self.section_id,
            "title": self.title,
            "description": self.description or "",
            "content_type": self.content_type,
            "content_data": self._payload(),
            "display_order": self.display_order,
            "is_active": self.is_active,
        }
