# homework/routers/webapp.py

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from homework import config

router = APIRouter()

templates = Jinja2Templates(directory=config.TEMPLATE_DIR)


@router.get("/", response_class=HTMLResponse)
async def show_home(request: Request):
    """トップページを表示する"""
    return templates.TemplateResponse(request, "index.html", {})
