from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import InternalError, NotFoundError, ValidationError
from app.models.post import Post, validate_post_fields
from app.schemas.post_schema import PostCreate
import logging

REQUIRED_FIELDS_MESSAGE = "All fields are required: title, content, author"
NOT_FOUND_MESSAGE = "Post not found"

# Signed 64-bit INTEGER primary key range
MIN_POST_ID = -(2 ** 63)
MAX_POST_ID = 2 ** 63 - 1


def _find(db: Session, post_id: int, failure: str) -> Post:
    if not MIN_POST_ID <= post_id <= MAX_POST_ID:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    try:
        post = db.get(Post, post_id)
    except SQLAlchemyError as exc:
        logging.exception(f"Lookup of post {post_id} failed")
        raise InternalError(failure) from exc
    if post is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return post


def _commit(db: Session, post: Post, failure: str) -> None:
    try:
        db.commit()
        db.refresh(post)
    except SQLAlchemyError as exc:
        db.rollback()
        logging.exception(failure)
        raise InternalError(failure) from exc


def list_posts(db: Session) -> list[Post]:
    try:
        return db.query(Post).order_by(Post.created_at.desc(), Post.id.desc()).all()
    except SQLAlchemyError as exc:
        logging.exception("Listing posts failed")
        raise InternalError("Failed to fetch posts") from exc


def get_post(db: Session, post_id: int) -> Post:
    return _find(db, post_id, "Failed to fetch post")


def create_post(db: Session, data: PostCreate) -> Post:
    # Presence check runs before the session is touched.
    if not data.title or not data.content or not data.author:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    errors = validate_post_fields(data.title, data.content, data.author, False)
    if errors:
        raise ValidationError(", ".join(errors))

    new_post = Post(title=data.title, content=data.content, author=data.author, published=False)
    db.add(new_post)
    _commit(db, new_post, "Failed to create post")
    logging.debug(f"Created post {new_post.id}")
    return new_post


def update_post(db: Session, post_id: int, changes: dict) -> Post:
    """
    Apply a partial update.

    ``changes`` holds only the fields the client sent. A missing key keeps
    the stored value; a present key overwrites it even when falsy.
    """
    post = _find(db, post_id, "Failed to update post")

    merged = {
        "title": post.title,
        "content": post.content,
        "author": post.author,
        "published": post.published,
    }
    merged.update({key: value for key, value in changes.items() if key in merged})

    errors = validate_post_fields(**merged)
    if errors:
        raise ValidationError(", ".join(errors))

    for key, value in merged.items():
        setattr(post, key, value)
    post.touch()
    _commit(db, post, "Failed to update post")
    return post


def toggle_publish(db: Session, post_id: int) -> Post:
    post = _find(db, post_id, "Failed to toggle publish status")
    post.toggle_published()
    _commit(db, post, "Failed to toggle publish status")
    return post


def delete_post(db: Session, post_id: int) -> None:
    post = _find(db, post_id, "Failed to delete post")
    try:
        db.delete(post)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logging.exception("Failed to delete post")
        raise InternalError("Failed to delete post") from exc
    logging.debug(f"Deleted post {post_id}")
