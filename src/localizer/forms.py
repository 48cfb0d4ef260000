"""表单编排 - 代码转语言文件与语言文件转代码两个表单的状态机."""

import inspect
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional, Tuple, Union

from config.logging_config import get_logger
from localizer.errors import ClipboardError, FileReadError, GenerationError
from localizer.formats import (
    OUTPUT_FORMATS,
    CodePlatform,
    TargetPlatform,
    TranslationFormat,
    detect_format,
)
from localizer.prompt_builder import (
    GenerationRequest,
    build_code_to_locale_prompt,
    build_locale_to_code_prompt,
)
from localizer.uploads import read_upload_text
from localizer.validation import (
    UNCHECKED,
    ValidationResult,
    ValidationStatus,
    validate_input,
)

logger = get_logger(__name__)

FILE_READ_ERROR_MESSAGE = "Error reading file"
CLIPBOARD_ERROR_MESSAGE = "Failed to copy to clipboard"


class FormPhase(str, Enum):
    """表单所处阶段."""

    IDLE = "idle"
    VALIDATING = "validating"
    VALID = "valid"
    INVALID = "invalid"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class BaseForm:
    """
    单个表单的状态与提交流程.

    同一表单同时只允许一个请求：提交期间in_flight为True，重复提交直接返回。
    每次提交分配递增序号，响应返回时序号已不是最新（表单被重置）则丢弃。
    """

    generation_error_message = "Failed to generate code"

    def __init__(self, client):
        self.client = client
        self.phase = FormPhase.IDLE
        self.input_text = ""
        self.locales: Tuple[str, ...] = ()
        self.result = ""
        self.error = ""
        self.in_flight = False
        self._sequence = 0

    def set_input_text(self, text: str) -> None:
        self.input_text = text or ""

    def select_locales(self, locales: Iterable[str]) -> None:
        """保留顺序，去掉空值与重复项."""
        selected = []
        for locale in locales:
            locale = locale.strip()
            if locale and locale not in selected:
                selected.append(locale)
        self.locales = tuple(selected)

    @property
    def can_submit(self) -> bool:
        return not self.in_flight and bool(self.input_text)

    async def load_file(
        self,
        filename: str,
        read: Callable[[], Awaitable[bytes]],
        max_size: Optional[int] = None,
    ) -> bool:
        """读取上传文件，成功后替换输入文本；失败时不应用任何内容."""
        try:
            text = await read_upload_text(read, max_size=max_size)
        except FileReadError as e:
            logger.error(f"读取文件失败: {filename}, {e}")
            self.error = FILE_READ_ERROR_MESSAGE
            self._file_failed()
            return False
        logger.info(f"文件读取成功: {filename}")
        self._file_loaded(filename, text)
        return True

    async def submit(self) -> bool:
        """
        提交当前输入到生成式接口.

        Returns:
            结果被应用时返回True；被拦截、失败或响应过期时返回False
        """
        if self.in_flight:
            logger.warning("已有请求进行中，忽略本次提交")
            return False
        if not self._check_submission():
            return False

        prompt = self._build_prompt(self._build_request())
        self._sequence += 1
        sequence = self._sequence
        self.in_flight = True
        self.phase = FormPhase.SUBMITTING
        self.error = ""
        self._before_submit()
        logger.info(f"开始生成，请求序号: {sequence}")

        try:
            result = await self.client.submit(prompt)
        except GenerationError as e:
            if sequence != self._sequence:
                logger.info(f"丢弃过期的失败响应，请求序号: {sequence}")
                return False
            logger.error(f"生成失败: {e}")
            self.phase = FormPhase.ERROR
            self.error = self.generation_error_message
            self.result = ""
            return False
        finally:
            if sequence == self._sequence:
                self.in_flight = False

        if sequence != self._sequence:
            logger.info(f"丢弃过期响应，请求序号: {sequence}")
            return False
        self.phase = FormPhase.SUCCESS
        self.result = result
        logger.info(f"生成完成，请求序号: {sequence}")
        return True

    def reset(self) -> None:
        """清空表单；进行中的请求返回后将被丢弃."""
        self._sequence += 1
        self.in_flight = False
        self.phase = FormPhase.IDLE
        self.input_text = ""
        self.locales = ()
        self.result = ""
        self.error = ""

    def snapshot(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "input_text": self.input_text,
            "locales": list(self.locales),
            "result": self.result,
            "error": self.error,
            "in_flight": self.in_flight,
            "can_submit": self.can_submit,
        }

    def _check_submission(self) -> bool:
        return bool(self.input_text)

    def _before_submit(self) -> None:
        self.result = ""

    def _file_loaded(self, filename: str, text: str) -> None:
        self.set_input_text(text)
        self.error = ""

    def _file_failed(self) -> None:
        pass

    def _build_request(self) -> GenerationRequest:
        raise NotImplementedError

    def _build_prompt(self, request: GenerationRequest) -> str:
        raise NotImplementedError


class CodeToLocaleForm(BaseForm):
    """根据源代码生成多语言翻译文件."""

    generation_error_message = "Failed to generate files"

    def __init__(self, client):
        super().__init__(client)
        self.platform = CodePlatform.SWIFTUI
        self.file_type = TranslationFormat.JSON

    def select_platform(self, platform: Union[CodePlatform, str]) -> None:
        self.platform = CodePlatform(platform)

    def select_file_type(self, file_type: Union[TranslationFormat, str]) -> None:
        file_type = TranslationFormat(file_type)
        if file_type not in OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format: {file_type.value}")
        self.file_type = file_type

    def _check_submission(self) -> bool:
        if not self.input_text:
            logger.error("未提供输入代码")
            self.error = "Please enter or upload code"
            return False
        return True

    def _build_request(self) -> GenerationRequest:
        return GenerationRequest(
            platform=self.platform.value,
            file_format=self.file_type,
            input_text=self.input_text,
            locales=self.locales,
        )

    def _build_prompt(self, request: GenerationRequest) -> str:
        return build_code_to_locale_prompt(request)

    def snapshot(self) -> Dict[str, Any]:
        data = super().snapshot()
        data.update(platform=self.platform.value, file_type=self.file_type.value)
        return data


class LocaleToCodeForm(BaseForm):
    """根据翻译文件与源代码生成国际化组件代码."""

    def __init__(self, client):
        super().__init__(client)
        self.source_format = TranslationFormat.JSON
        self.platform = TargetPlatform.REACT
        self.framework = self.platform.default_framework
        self.source_code = ""
        self.validation: ValidationResult = UNCHECKED
        self.show_preview = False
        self.copied = False

    def set_input_text(self, text: str) -> None:
        super().set_input_text(text)
        self._revalidate()

    def set_source_code(self, code: str) -> None:
        self.source_code = code or ""

    def select_format(self, source_format: Union[TranslationFormat, str]) -> None:
        self.source_format = TranslationFormat(source_format)
        self._revalidate()

    def select_platform(self, platform: Union[TargetPlatform, str]) -> None:
        """切换平台时框架重置为该平台的第一个框架."""
        self.platform = TargetPlatform(platform)
        self.framework = self.platform.default_framework

    def select_framework(self, framework: str) -> None:
        if framework not in self.platform.frameworks:
            raise ValueError(
                f"Framework {framework} is not available for {self.platform.value}"
            )
        self.framework = framework

    def validate(self) -> bool:
        self._set_phase(FormPhase.VALIDATING)
        self.validation = validate_input(self.input_text, self.source_format)
        if self.validation.is_valid:
            self._set_phase(FormPhase.VALID)
            self.error = ""
            return True
        self._set_phase(FormPhase.INVALID)
        self.error = self.validation.message
        return False

    @property
    def can_submit(self) -> bool:
        return (
            super().can_submit
            and self.validation.is_valid
            and bool(self.source_code)
        )

    def toggle_preview(self) -> None:
        if self.result:
            self.show_preview = not self.show_preview

    async def copy_result(
        self, writer: Callable[[str], Union[None, Awaitable[None]]]
    ) -> bool:
        """
        复制生成结果.

        Args:
            writer: 写入剪贴板的函数，失败时抛出ClipboardError

        Returns:
            复制成功返回True
        """
        try:
            if not self.result:
                raise ClipboardError("nothing to copy")
            outcome = writer(self.result)
            if inspect.isawaitable(outcome):
                await outcome
        except ClipboardError as e:
            logger.error(f"复制到剪贴板失败: {e}")
            self.copied = False
            self.error = CLIPBOARD_ERROR_MESSAGE
            return False
        self.copied = True
        return True

    def reset(self) -> None:
        super().reset()
        self.source_code = ""
        self.validation = UNCHECKED
        self.show_preview = False
        self.copied = False

    def snapshot(self) -> Dict[str, Any]:
        data = super().snapshot()
        data.update(
            source_format=self.source_format.value,
            platform=self.platform.value,
            framework=self.framework,
            source_code=self.source_code,
            validation_status=self.validation.status.value,
            show_preview=self.show_preview,
            copied=self.copied,
        )
        return data

    def _set_phase(self, phase: FormPhase) -> None:
        # 请求进行中保持submitting，直到响应返回
        if not self.in_flight:
            self.phase = phase

    def _revalidate(self) -> None:
        if self.input_text:
            self.validate()
        else:
            self.validation = UNCHECKED
            self._set_phase(FormPhase.IDLE)

    def _check_submission(self) -> bool:
        return bool(self.input_text) and self.validate() and bool(self.source_code)

    def _before_submit(self) -> None:
        super()._before_submit()
        self.copied = False
        self.show_preview = False

    def _file_loaded(self, filename: str, text: str) -> None:
        self.input_text = text
        self.source_format = detect_format(filename, self.source_format)
        self.validate()

    def _file_failed(self) -> None:
        self.validation = ValidationResult(ValidationStatus.INVALID, self.error)
        self._set_phase(FormPhase.INVALID)

    def _build_request(self) -> GenerationRequest:
        return GenerationRequest(
            platform=self.platform.value,
            framework=self.framework,
            file_format=self.source_format,
            input_text=self.input_text,
            source_code=self.source_code,
            locales=self.locales,
        )

    def _build_prompt(self, request: GenerationRequest) -> str:
        return build_locale_to_code_prompt(request)
