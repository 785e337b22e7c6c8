from datetime import datetime, timezone
from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, false
from app.db.session import Base

TITLE_MAX_LENGTH = 200


def utcnow():
    return datetime.now(timezone.utc)


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    content = Column(Text, nullable=False)
    author = Column(String, nullable=False)
    published = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def touch(self):
        self.updated_at = utcnow()

    def toggle_published(self):
        self.published = not self.published
        self.touch()


def _is_filled(value) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def validate_post_fields(title, content, author, published) -> list[str]:
    """Return one message per violated column constraint; empty when valid."""
    errors = []
    if not _is_filled(title) or len(title) > TITLE_MAX_LENGTH:
        errors.append(f"Title must be between 1 and {TITLE_MAX_LENGTH} characters")
    if not _is_filled(content):
        errors.append("Content cannot be empty")
    if not _is_filled(author):
        errors.append("Author cannot be empty")
    if not isinstance(published, bool):
        errors.append("Published must be true or false")
    return errors
