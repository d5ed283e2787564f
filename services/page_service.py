from jinja2 import Environment, FileSystemLoader, select_autoescape
from pathlib import Path
from typing import Dict, Any

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


class PageService:
    def __init__(self, template_dir: Path = TEMPLATE_DIR):
        # 템플릿 환경 설정
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, template_name: str, data: Dict[str, Any]) -> str:
        """템플릿을 렌더링하여 HTML 생성"""
        template = self.env.get_template(template_name)
        return template.render(**data)

    def students_page(self, api_base_url: str, page_size: int) -> str:
        """학생 관리 화면 (목록/추가/수정/삭제)"""
        return self.render("students.html", {
            "api_base_url": api_base_url,
            "page_size": page_size,
        })
