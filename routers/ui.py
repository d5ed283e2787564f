from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from config.settings import settings
from services.page_service import PageService

router = APIRouter(tags=["UI"])
page_service = PageService()


# ✅ 학생 관리 화면
@router.get("/ui", response_class=HTMLResponse)
def students_ui():
    return page_service.students_page(
        api_base_url=settings.API_PREFIX,
        page_size=settings.DEFAULT_PAGE_SIZE,
    )
