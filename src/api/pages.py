"""两个表单页面的路由，表单提交后返回同一页面."""

from typing import List, Optional

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import HTMLResponse

from .session_manager import FormSession
from .templates import render
from config.logging_config import get_logger
from localizer.forms import CLIPBOARD_ERROR_MESSAGE
from localizer.formats import (
    OUTPUT_FORMATS,
    SUPPORTED_LOCALES,
    CodePlatform,
    TargetPlatform,
    TranslationFormat,
)
from models.models import CopyResponse, FormAction

logger = get_logger(__name__)

router = APIRouter()

UPLOAD_ACCEPT = ",".join(ext for fmt in TranslationFormat for ext in fmt.extensions)


def _load_session(request: Request):
    settings = request.app.state.settings
    session_id = request.cookies.get(settings.session_cookie)
    return request.app.state.sessions.get_session(session_id)


def _page(request: Request, session_id: str, template_name: str, **context):
    response = HTMLResponse(render(template_name, **context))
    response.set_cookie(
        request.app.state.settings.session_cookie, session_id, httponly=True
    )
    return response


def _code_to_locale_page(request: Request, session_id: str, session: FormSession):
    return _page(
        request,
        session_id,
        "code_to_locale.html",
        active="code-to-locale",
        form=session.code_to_locale.snapshot(),
        platforms=list(CodePlatform),
        output_formats=OUTPUT_FORMATS,
        locales=SUPPORTED_LOCALES,
    )


def _locale_to_code_page(request: Request, session_id: str, session: FormSession):
    form = session.locale_to_code
    return _page(
        request,
        session_id,
        "locale_to_code.html",
        active="locale-to-code",
        form=form.snapshot(),
        formats=list(TranslationFormat),
        platforms=list(TargetPlatform),
        frameworks=form.platform.frameworks,
        locales=SUPPORTED_LOCALES,
        accept=UPLOAD_ACCEPT,
    )


def _has_file(file: Optional[UploadFile]) -> bool:
    return file is not None and bool(file.filename)


@router.get("/code-to-locale", response_class=HTMLResponse)
async def code_to_locale(request: Request):
    """代码转语言文件页面."""
    session_id, session = _load_session(request)
    return _code_to_locale_page(request, session_id, session)


@router.post("/code-to-locale", response_class=HTMLResponse)
async def code_to_locale_action(
    request: Request,
    action: str = Form(FormAction.UPDATE),
    platform: CodePlatform = Form(CodePlatform.SWIFTUI),
    file_type: TranslationFormat = Form(TranslationFormat.JSON),
    input_text: str = Form(""),
    locales: List[str] = Form([]),
    file: Optional[UploadFile] = File(None),
):
    """处理代码转语言文件表单的提交."""
    session_id, session = _load_session(request)
    form = session.code_to_locale
    logger.info(f"页面动作: code_to_locale, {action}")

    if action == FormAction.RESET:
        form.reset()
        return _code_to_locale_page(request, session_id, session)

    form.select_platform(platform)
    try:
        form.select_file_type(file_type)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    form.set_input_text(input_text)
    form.select_locales(locales)

    if action == FormAction.UPLOAD and _has_file(file):
        await form.load_file(
            file.filename, file.read, request.app.state.settings.max_file_size
        )
    elif action == FormAction.GENERATE:
        await form.submit()
    return _code_to_locale_page(request, session_id, session)


@router.get("/locale-to-code", response_class=HTMLResponse)
async def locale_to_code(request: Request):
    """语言文件转代码页面."""
    session_id, session = _load_session(request)
    return _locale_to_code_page(request, session_id, session)


@router.post("/locale-to-code", response_class=HTMLResponse)
async def locale_to_code_action(
    request: Request,
    action: str = Form(FormAction.UPDATE),
    source_format: TranslationFormat = Form(TranslationFormat.JSON),
    platform: TargetPlatform = Form(TargetPlatform.REACT),
    framework: str = Form(""),
    input_text: str = Form(""),
    source_code: str = Form(""),
    locales: List[str] = Form([]),
    file: Optional[UploadFile] = File(None),
):
    """处理语言文件转代码表单的提交."""
    session_id, session = _load_session(request)
    form = session.locale_to_code
    logger.info(f"页面动作: locale_to_code, {action}")

    if action == FormAction.RESET:
        form.reset()
        return _locale_to_code_page(request, session_id, session)

    # 状态只在输入或格式发生变化时重新校验
    if source_format != form.source_format:
        form.select_format(source_format)
    if platform != form.platform:
        form.select_platform(platform)
    elif framework:
        try:
            form.select_framework(framework)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    if input_text != form.input_text:
        form.set_input_text(input_text)
    form.set_source_code(source_code)
    form.select_locales(locales)

    if action == FormAction.UPLOAD and _has_file(file):
        await form.load_file(
            file.filename, file.read, request.app.state.settings.max_file_size
        )
    elif action == FormAction.GENERATE:
        await form.submit()
    elif action == FormAction.TOGGLE_PREVIEW:
        form.toggle_preview()
    return _locale_to_code_page(request, session_id, session)


@router.post("/locale-to-code/copy", response_model=CopyResponse)
async def copy_generated_code(request: Request):
    """返回要写入剪贴板的生成结果，由页面脚本完成写入."""
    session = request.app.state.sessions.find_session(
        request.cookies.get(request.app.state.settings.session_cookie)
    )
    if session is None:
        return CopyResponse(copied=False, error=CLIPBOARD_ERROR_MESSAGE)
    form = session.locale_to_code
    copied = []
    if await form.copy_result(copied.append):
        return CopyResponse(copied=True, text=copied[0])
    return CopyResponse(copied=False, error=form.error)
