"""生成式接口提示词构建."""

from dataclasses import dataclass
from typing import Optional, Tuple

from localizer.formats import TranslationFormat


@dataclass(frozen=True)
class GenerationRequest:
    """一次提交所需的全部输入，提交时构建，之后不再修改."""

    platform: str
    file_format: TranslationFormat
    input_text: str
    framework: Optional[str] = None
    source_code: str = ""
    locales: Tuple[str, ...] = ()


def build_code_to_locale_prompt(request: GenerationRequest) -> str:
    """构建代码转语言文件的提示词，原始文本不做转义直接拼接."""
    file_type = request.file_format.value
    return (
        f"Translate the following code into {request.platform} and generate a "
        f"{file_type} file.Please give me each file separately, don't put any "
        f"other information than the {file_type} file. Also, provide translations "
        f"in the following languages: {', '.join(request.locales)}. "
        f"Here is the code:\n\n{request.input_text}"
    )


def build_locale_to_code_prompt(request: GenerationRequest) -> str:
    """构建语言文件转组件代码的提示词."""
    requirements = [
        f"Convert this {request.file_format.value.upper()} translation file",
        "Implement full i18n support",
        "Include proper error handling and validation",
        f"Implement best practices for {request.platform} and {request.framework}",
        "Give me only the code don't put any extra information.",
    ]
    if request.locales:
        requirements.append(
            f"Provide translations for the following locales: {', '.join(request.locales)}"
        )
    numbered = "\n".join(
        f"{index}. {requirement}" for index, requirement in enumerate(requirements, 1)
    )
    return (
        f"Generate a {request.platform} component using {request.framework} "
        f"with these requirements:\n{numbered}\n\n"
        f"Translation file:\n{request.input_text}\n\n"
        f"Source code to translate:\n{request.source_code}"
    )
