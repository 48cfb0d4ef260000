"""Locale Code Generator JSON API 路由."""

from typing import List

from fastapi import APIRouter, HTTPException, Request

from config.logging_config import get_logger
from localizer.formats import TargetPlatform, TranslationFormat, detect_format
from localizer.forms import BaseForm, CodeToLocaleForm, LocaleToCodeForm
from localizer.validation import validate_input
from models.models import (
    CodeToLocaleRequest,
    DetectFormatRequest,
    DetectFormatResponse,
    FormatInfo,
    GenerateResponse,
    LocaleToCodeRequest,
    PlatformInfo,
    ValidateRequest,
    ValidateResponse,
)

logger = get_logger(__name__)

# 创建路由实例
router = APIRouter(prefix="/api/v1/localizer")


@router.get("/formats", response_model=List[FormatInfo])
async def list_formats():
    """列出可识别的翻译文件格式."""
    return [
        FormatInfo(value=fmt, label=fmt.label, extensions=list(fmt.extensions))
        for fmt in TranslationFormat
    ]


@router.get("/platforms", response_model=List[PlatformInfo])
async def list_platforms():
    """列出目标平台，框架按默认优先顺序排列."""
    return [
        PlatformInfo(
            value=platform, label=platform.label, frameworks=list(platform.frameworks)
        )
        for platform in TargetPlatform
    ]


@router.post("/detect-format", response_model=DetectFormatResponse)
async def detect_file_format(body: DetectFormatRequest):
    """根据文件名识别格式，无法识别时返回当前格式."""
    return DetectFormatResponse(format=detect_format(body.filename, body.current_format))


@router.post("/validate", response_model=ValidateResponse)
async def validate_translation_file(body: ValidateRequest):
    """校验翻译文件内容."""
    result = validate_input(body.text, body.format)
    return ValidateResponse(status=result.status, message=result.message)


async def _run(form: BaseForm, guard_message: str) -> GenerateResponse:
    logger.info(f"收到生成请求: {type(form).__name__}")
    if not form.can_submit:
        raise HTTPException(status_code=400, detail=form.error or guard_message)
    if not await form.submit():
        raise HTTPException(status_code=502, detail=form.error)
    return GenerateResponse(result=form.result)


@router.post("/code-to-locale", response_model=GenerateResponse)
async def generate_locale_files(body: CodeToLocaleRequest, request: Request):
    """
    根据源代码生成翻译文件.

    每个请求使用新的表单实例，不与页面会话共享状态。
    """
    form = CodeToLocaleForm(request.app.state.client)
    form.select_platform(body.platform)
    try:
        form.select_file_type(body.file_type)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    form.set_input_text(body.code)
    form.select_locales(body.locales)
    return await _run(form, "Please enter or upload code")


@router.post("/locale-to-code", response_model=GenerateResponse)
async def generate_component_code(body: LocaleToCodeRequest, request: Request):
    """根据翻译文件与源代码生成组件代码."""
    form = LocaleToCodeForm(request.app.state.client)
    form.select_platform(body.platform)
    if body.framework:
        try:
            form.select_framework(body.framework)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    form.select_format(body.source_format)
    form.set_input_text(body.translation_file)
    form.set_source_code(body.source_code)
    form.select_locales(body.locales)
    return await _run(
        form, "Translation file must be valid and source code must not be empty"
    )
