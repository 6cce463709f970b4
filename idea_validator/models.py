from datetime import datetime
from . import db

STATUS_PENDING = "pending"
STATUS_ANALYZING = "analyzing"
STATUS_COMPLETED = "completed"
STATUS_FAILED = "failed"

STATUSES = (STATUS_PENDING, STATUS_ANALYZING, STATUS_COMPLETED, STATUS_FAILED)


class BusinessIdea(db.Model):
    __tablename__ = 'business_ideas'

    id = db.Column(db.Integer, primary_key=True)
    description = db.Column(db.Text, nullable=False)
    title = db.Column(db.String(255))

    # Structured scorer output: six criteria + recommendations
    analysis = db.Column(db.JSON)
    overall_score = db.Column(db.Float, index=True)
    status = db.Column(
        db.Enum(*STATUSES, name="business_idea_status"),
        nullable=False,
        default=STATUS_PENDING,
        index=True,
    )

    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def is_completed(self):
        return self.status == STATUS_COMPLETED

    def display_title(self, fallback):
        return self.title or fallback

    def to_summary(self):
        """Compact form used by the recent-ideas list and /history."""
        return {
            "id": self.id,
            "title": self.display_title("Untitled Idea"),
            "score": self.overall_score,
            "date": f"{self.created_at:%b} {self.created_at.day}, {self.created_at.year}",
        }

    def to_report(self, fallback_title):
        created = self.created_at
        hour = created.hour % 12 or 12
        return {
            "id": self.id,
            "title": self.display_title(fallback_title),
            "description": self.description,
            "overall_score": self.overall_score,
            "analysis": self.analysis,
            "created_at": f"{created:%B} {created.day}, {created.year} at {hour}:{created:%M %p}",
        }

    def __repr__(self):
        return f"<BusinessIdea {self.id} [{self.status}] - {self.description[:30]}>"
