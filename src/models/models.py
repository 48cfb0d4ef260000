"""API数据模型定义."""

from pydantic import BaseModel, Field
from typing import List

from localizer.formats import CodePlatform, TargetPlatform, TranslationFormat
from localizer.validation import ValidationStatus


class FormatInfo(BaseModel):
    """翻译文件格式信息."""

    value: TranslationFormat
    label: str
    extensions: List[str]


class PlatformInfo(BaseModel):
    """目标平台及其可选框架."""

    value: TargetPlatform
    label: str
    frameworks: List[str]


class ValidateRequest(BaseModel):
    """校验请求数据模型."""

    text: str
    format: TranslationFormat = TranslationFormat.JSON


class ValidateResponse(BaseModel):
    """校验结果数据模型."""

    status: ValidationStatus
    message: str = ""


class DetectFormatRequest(BaseModel):
    """格式识别请求数据模型."""

    filename: str
    current_format: TranslationFormat = TranslationFormat.JSON


class DetectFormatResponse(BaseModel):
    """格式识别结果数据模型."""

    format: TranslationFormat


class CodeToLocaleRequest(BaseModel):
    """代码转语言文件请求数据模型."""

    code: str
    platform: CodePlatform = CodePlatform.SWIFTUI
    file_type: TranslationFormat = TranslationFormat.JSON
    locales: List[str] = Field(default_factory=list)


class LocaleToCodeRequest(BaseModel):
    """语言文件转代码请求数据模型."""

    translation_file: str
    source_code: str
    source_format: TranslationFormat = TranslationFormat.JSON
    platform: TargetPlatform = TargetPlatform.REACT
    framework: str = ""
    locales: List[str] = Field(default_factory=list)


class GenerateResponse(BaseModel):
    """生成结果数据模型."""

    result: str


class CopyResponse(BaseModel):
    """复制结果数据模型."""

    copied: bool
    text: str = ""
    error: str = ""


class FormAction:
    """页面表单动作常量."""

    UPDATE = "update"
    UPLOAD = "upload"
    GENERATE = "generate"
    TOGGLE_PREVIEW = "toggle_preview"
    RESET = "reset"
