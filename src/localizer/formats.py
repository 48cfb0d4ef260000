"""翻译文件格式、目标平台与语言区域的参考数据."""

from enum import Enum
from typing import Dict, Tuple


class TranslationFormat(str, Enum):
    """可识别的翻译文件格式."""

    JSON = "json"
    XML = "xml"
    YAML = "yaml"
    PROPERTIES = "properties"
    IOS_STRINGS = "ios-strings"

    @property
    def label(self) -> str:
        return FORMAT_LABELS[self]

    @property
    def extensions(self) -> Tuple[str, ...]:
        return FORMAT_EXTENSIONS[self]


FORMAT_LABELS: Dict[TranslationFormat, str] = {
    TranslationFormat.JSON: "JSON",
    TranslationFormat.XML: "XML",
    TranslationFormat.YAML: "YAML",
    TranslationFormat.PROPERTIES: "Properties",
    TranslationFormat.IOS_STRINGS: "iOS Strings",
}

FORMAT_EXTENSIONS: Dict[TranslationFormat, Tuple[str, ...]] = {
    TranslationFormat.JSON: (".json",),
    TranslationFormat.XML: (".xml",),
    TranslationFormat.YAML: (".yaml", ".yml"),
    TranslationFormat.PROPERTIES: (".properties",),
    TranslationFormat.IOS_STRINGS: (".strings",),
}

# 代码转语言文件表单可生成的文件类型
OUTPUT_FORMATS: Tuple[TranslationFormat, ...] = (
    TranslationFormat.JSON,
    TranslationFormat.XML,
    TranslationFormat.YAML,
)


class TargetPlatform(str, Enum):
    """语言文件转代码时的目标平台."""

    REACT = "react"
    VUE = "vue"
    ANGULAR = "angular"
    FLUTTER = "flutter"
    SWIFTUI = "swiftui"

    @property
    def label(self) -> str:
        return PLATFORM_LABELS[self]

    @property
    def frameworks(self) -> Tuple[str, ...]:
        return PLATFORM_FRAMEWORKS[self]

    @property
    def default_framework(self) -> str:
        return PLATFORM_FRAMEWORKS[self][0]


PLATFORM_LABELS: Dict[TargetPlatform, str] = {
    TargetPlatform.REACT: "React",
    TargetPlatform.VUE: "Vue.js",
    TargetPlatform.ANGULAR: "Angular",
    TargetPlatform.FLUTTER: "Flutter",
    TargetPlatform.SWIFTUI: "Swift UI",
}

PLATFORM_FRAMEWORKS: Dict[TargetPlatform, Tuple[str, ...]] = {
    TargetPlatform.REACT: ("react-i18next", "react-intl", "next-intl"),
    TargetPlatform.VUE: ("vue-i18n", "vue-intl"),
    TargetPlatform.ANGULAR: ("ngx-translate", "@angular/localize"),
    TargetPlatform.FLUTTER: ("flutter_localizations", "easy_localization"),
    TargetPlatform.SWIFTUI: ("SwiftGen", "Localize-Swift"),
}


class CodePlatform(str, Enum):
    """代码转语言文件时源代码所属的平台."""

    SWIFTUI = "swiftui"
    REACT = "react"
    REACT_NATIVE = "react-native"
    KOTLIN_ANDROID = "kotlin-android"
    JETPACK_COMPOSE = "jetpack-compose"

    @property
    def label(self) -> str:
        return CODE_PLATFORM_LABELS[self]


CODE_PLATFORM_LABELS: Dict[CodePlatform, str] = {
    CodePlatform.SWIFTUI: "SwiftUI",
    CodePlatform.REACT: "React",
    CodePlatform.REACT_NATIVE: "React Native",
    CodePlatform.KOTLIN_ANDROID: "Kotlin Android",
    CodePlatform.JETPACK_COMPOSE: "Jetpack Compose",
}

SUPPORTED_LOCALES: Dict[str, str] = {
    "english": "English",
    "french": "French",
    "spanish": "Spanish",
}


def detect_format(filename: str, current: TranslationFormat) -> TranslationFormat:
    """
    根据文件扩展名识别翻译文件格式.

    Args:
        filename: 上传文件名
        current: 当前选中的格式

    Returns:
        匹配到的格式；扩展名无法识别时原样返回当前格式
    """
    # 以最后一个点之后的部分作为扩展名，".json"这类文件名同样可以识别
    if "." not in (filename or ""):
        return current
    extension = "." + filename.rsplit(".", 1)[1].lower()
    for translation_format in TranslationFormat:
        if extension in translation_format.extensions:
            return translation_format
    return current
