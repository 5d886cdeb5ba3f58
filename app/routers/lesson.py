from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_current_user, get_storage
from app.schemas.lesson import LessonResponse, LessonUpdate
from app.schemas.user import UserInDB
from app.services.lesson import LessonService
from app.storage.base import Storage

router = APIRouter(prefix="/api/lessons", tags=["Lessons"])


@router.put("/{lesson_id}", response_model=LessonResponse)
def update_lesson(
    lesson_id: str,
    lesson_in: LessonUpdate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    return LessonService(storage).update_lesson(lesson_id, lesson_in, current_user)


@router.delete("/{lesson_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_lesson(
    lesson_id: str,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    LessonService(storage).delete_lesson(lesson_id, current_user)
