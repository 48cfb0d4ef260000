"""翻译文件内容的浅层语法校验."""

import json
import re
from dataclasses import dataclass
from enum import Enum

from localizer.errors import ValidationError
from localizer.formats import TranslationFormat

# 只要求出现至少一个类似标签的片段，会放行部分非XML文本
XML_TAG_PATTERN = re.compile(r"<[^>]+>")


class ValidationStatus(str, Enum):
    """校验状态."""

    UNCHECKED = "unchecked"
    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True)
class ValidationResult:
    """一次校验的结果."""

    status: ValidationStatus
    message: str = ""

    @property
    def is_valid(self) -> bool:
        return self.status is ValidationStatus.VALID


UNCHECKED = ValidationResult(ValidationStatus.UNCHECKED)


def check_syntax(text: str, translation_format: TranslationFormat) -> None:
    """按格式检查文本，不合法时抛出ValidationError."""
    if translation_format is TranslationFormat.JSON:
        try:
            json.loads(text)
        except json.JSONDecodeError as e:
            raise ValidationError(str(e)) from e
    elif translation_format is TranslationFormat.XML:
        if not XML_TAG_PATTERN.search(text):
            raise ValidationError("Invalid XML")
    # TODO: yaml/properties/strings 目前不做检查，需先确认期望的严格程度


def validate_input(text: str, translation_format: TranslationFormat) -> ValidationResult:
    """
    校验翻译文件内容.

    Args:
        text: 粘贴或上传的文本
        translation_format: 当前选中的格式

    Returns:
        校验结果，失败时附带错误信息
    """
    try:
        check_syntax(text, translation_format)
    except ValidationError as e:
        return ValidationResult(
            ValidationStatus.INVALID,
            f"Invalid {translation_format.value.upper()} format: {e}",
        )
    return ValidationResult(ValidationStatus.VALID)
