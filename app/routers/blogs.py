from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.dependencies import get_current_user
from app.models import User
from app.schemas import BlogCreate, BlogUpdate, BlogResponse
from app.services import blog_service

router = APIRouter(prefix="/api/blogs", tags=["blogs"])

@router.get("", response_model=list[BlogResponse])
async def list_blogs(db: AsyncSession = Depends(get_db)):
    return await blog_service.get_blogs(db)

@router.get("/{blog_id}", response_model=BlogResponse)
async def get_blog(blog_id: str, db: AsyncSession = Depends(get_db)):
    return await blog_service.get_blog(db, blog_id)

@router.post("", response_model=BlogResponse)
async def create_blog(
    data: BlogCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await blog_service.create_blog(db, data, current_user)

# Any caller may update; only delete checks ownership.
@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(blog_id: str, data: BlogUpdate, db: AsyncSession = Depends(get_db)):
    return await blog_service.update_blog(db, blog_id, data)

@router.delete("/{blog_id}", status_code=204)
async def delete_blog(
    blog_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await blog_service.delete_blog(db, blog_id, current_user)
    return Response(status_code=204)
