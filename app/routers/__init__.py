from .admin import router as admin_router
from .auth import router as auth_router
from .blog import router as blog_router
from .category import router as category_router
from .course import router as course_router
from .lesson import router as lesson_router
from .user import router as user_router

routes = [
    auth_router,
    user_router,
    category_router,
    course_router,
    lesson_router,
    blog_router,
    admin_router,
]
