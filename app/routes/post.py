from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.schemas.post_schema import PostCreate, PostUpdate, ResponsePost
from app.services import post as post_service

router = APIRouter(prefix="/api/posts", tags=["posts"])

# Plain def handlers: FastAPI runs them on its threadpool.

# List posts, newest first

@router.get("", response_model=list[ResponsePost])
def get_all_posts(db: Session = Depends(get_db)):
    return post_service.list_posts(db)

# Get a post by id

@router.get("/{post_id}", response_model=ResponsePost)
def get_post(post_id: int, db: Session = Depends(get_db)):
    return post_service.get_post(db, post_id)

# Create a new post

@router.post("", response_model=ResponsePost, status_code=status.HTTP_201_CREATED)
def create_post(post: PostCreate, db: Session = Depends(get_db)):
    return post_service.create_post(db, post)

# Update (partial: omitted fields keep their value)

@router.put("/{post_id}", response_model=ResponsePost)
def update_post(post_id: int, post_data: PostUpdate, db: Session = Depends(get_db)):
    return post_service.update_post(db, post_id, post_data.changes())

# Toggle published

@router.patch("/{post_id}/publish", response_model=ResponsePost)
def toggle_publish(post_id: int, db: Session = Depends(get_db)):
    return post_service.toggle_publish(db, post_id)

# Delete

@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: int, db: Session = Depends(get_db)):
    post_service.delete_post(db, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
