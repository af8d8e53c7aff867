"""Tag API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from larder.api.dependencies import get_current_user
from larder.database import get_db
from larder.models.tag import Tag
from larder.models.user import User
from larder.schemas.tag import TagCreate, TagResponse, TagUpdate

router = APIRouter(prefix="/api/v1/tags", tags=["tags"])


def get_user_tag(db: Session, tag_id: int, user: User) -> Tag:
    """Get a tag that belongs to the user."""
    tag = db.query(Tag).filter(Tag.id == tag_id, Tag.user_id == user.id).first()
    if not tag:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tag not found")
    return tag


def _clean_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Tag name is required")
    return name


def _ensure_unique_name(db: Session, name: str, user: User, exclude_id: int | None = None) -> None:
    query = db.query(Tag).filter(Tag.user_id == user.id, Tag.name == name)
    if exclude_id is not None:
        query = query.filter(Tag.id != exclude_id)
    if query.first():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Tag already exists")


@router.get("", response_model=list[TagResponse])
async def list_tags(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List the user's tags."""
    return db.query(Tag).filter(Tag.user_id == current_user.id).order_by(Tag.name).all()


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    data: TagCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a tag."""
    name = _clean_name(data.name)
    _ensure_unique_name(db, name, current_user)

    tag = Tag(user_id=current_user.id, name=name, color=data.color.strip())
    db.add(tag)
    db.commit()
    db.refresh(tag)
    return tag


@router.put("/{tag_id}", response_model=TagResponse)
async def update_tag(
    tag_id: int,
    data: TagUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Rename or recolor a tag."""
    tag = get_user_tag(db, tag_id, current_user)
    name = _clean_name(data.name)
    _ensure_unique_name(db, name, current_user, exclude_id=tag.id)

    tag.name = name
    tag.color = data.color.strip()
    db.commit()
    db.refresh(tag)
    return tag


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(
    tag_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a tag. Ingredients keep existing, untagged."""
    tag = get_user_tag(db, tag_id, current_user)
    db.delete(tag)
    db.commit()
