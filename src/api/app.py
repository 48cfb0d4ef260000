"""FastAPI应用组装."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .pages import router as pages_router
from .routes import router
from .session_manager import FormSessionManager
from .templates import render
from config.logging_config import get_logger, setup_logging
from config.settings import Settings, get_settings
from localizer.generation_client import GenerationClient

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None, client: Optional[GenerationClient] = None
) -> FastAPI:
    """
    创建FastAPI应用实例.

    Args:
        settings: 应用配置，默认从环境变量读取
        client: 生成式接口客户端，默认根据配置创建

    Returns:
        配置好的应用
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    if client is None:
        client = GenerationClient.from_settings(settings)
        logger.info(f"生成式接口客户端已创建，模型: {settings.gemini_model}")

    app = FastAPI(
        title="Locale Code Generator API",
        description="翻译文件与国际化代码互相生成服务",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.client = client
    app.state.sessions = FormSessionManager(
        client,
        max_sessions=settings.max_sessions,
        session_ttl=settings.session_ttl,
    )

    # 添加CORS中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 包含路由
    app.include_router(router)
    app.include_router(pages_router)

    @app.get("/", include_in_schema=False)
    async def root():
        """根路径重定向到第一个页面"""
        return RedirectResponse(url="/code-to-locale")

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and not request.url.path.startswith("/api/"):
            return HTMLResponse(render("not_found.html"), status_code=404)
        return await http_exception_handler(request, exc)

    return app
