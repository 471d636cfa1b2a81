from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.services import testing_service

# Mounted by app.main only when APP_ENV == "test".
router = APIRouter(prefix="/api/testing", tags=["testing"])

@router.post("/reset", status_code=204)
async def reset(db: AsyncSession = Depends(get_db)):
    await testing_service.reset(db)
    return Response(status_code=204)
