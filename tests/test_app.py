import unittest

from fastapi.testclient import TestClient

from api.app import create_app
from config.settings import Settings
from localizer.errors import GenerationError
from localizer.formats import TranslationFormat
from localizer.validation import ValidationStatus


class FakeClient:
    def __init__(self, result="generated output", error=None):
        self.result = result
        self.error = error
        self.prompts = []

    async def submit(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.result


class AppTestCase(unittest.TestCase):
    def setUp(self):
        self.generator = FakeClient()
        self.app = create_app(
            settings=Settings(gemini_api_key="test-key"), client=self.generator
        )
        self.client = TestClient(self.app)

    def _session(self):
        sessions = list(self.app.state.sessions.sessions.values())
        self.assertEqual(len(sessions), 1)
        return sessions[0]


class TestRouting(AppTestCase):
    def test_root_redirects_to_code_to_locale(self):
        response = self.client.get("/", follow_redirects=False)
        self.assertEqual(response.status_code, 307)
        self.assertEqual(response.headers["location"], "/code-to-locale")

    def test_unknown_page_renders_not_found(self):
        response = self.client.get("/missing")
        self.assertEqual(response.status_code, 404)
        self.assertIn("404 - Page Not Found", response.text)

    def test_unknown_api_path_returns_json(self):
        response = self.client.get("/api/v1/localizer/missing")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "Not Found")

    def test_pages_render(self):
        self.assertIn("Code to Locale", self.client.get("/code-to-locale").text)
        self.assertIn("Translation to Code", self.client.get("/locale-to-code").text)


class TestCodeToLocalePage(AppTestCase):
    def test_generate_with_empty_input_shows_error(self):
        response = self.client.post(
            "/code-to-locale", data={"action": "generate", "input_text": ""}
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("Please enter or upload code", response.text)
        self.assertEqual(self.generator.prompts, [])

    def test_generate_renders_escaped_result(self):
        self.generator.result = '<resources lang="en"/>'
        response = self.client.post(
            "/code-to-locale",
            data={
                "action": "generate",
                "platform": "react",
                "file_type": "xml",
                "input_text": "<Text>Hello</Text>",
                "locales": ["english", "french"],
            },
        )
        self.assertIn("&lt;resources lang=&#34;en&#34;/&gt;", response.text)
        self.assertIn("english, french", self.generator.prompts[0])
        self.assertIn("into react", self.generator.prompts[0])

    def test_forms_keep_state_per_session(self):
        self.client.post(
            "/code-to-locale", data={"action": "update", "input_text": "let x = 1"}
        )
        page = self.client.get("/code-to-locale")
        self.assertIn("let x = 1", page.text)
        self.assertEqual(self._session().locale_to_code.input_text, "")


class TestLocaleToCodePage(AppTestCase):
    def test_platform_change_resets_framework(self):
        self.client.post(
            "/locale-to-code",
            data={"action": "update", "platform": "vue", "framework": "react-intl"},
        )
        self.assertEqual(self._session().locale_to_code.framework, "vue-i18n")

        self.client.post(
            "/locale-to-code",
            data={"action": "update", "platform": "vue", "framework": "vue-intl"},
        )
        self.assertEqual(self._session().locale_to_code.framework, "vue-intl")

    def test_framework_from_other_platform_is_rejected(self):
        response = self.client.post(
            "/locale-to-code",
            data={"action": "update", "platform": "react", "framework": "vue-i18n"},
        )
        self.assertEqual(response.status_code, 400)

    def test_upload_detects_format(self):
        response = self.client.post(
            "/locale-to-code",
            data={"action": "upload"},
            files={"file": ("strings.xml", b"<string>Hi</string>", "application/xml")},
        )
        self.assertEqual(response.status_code, 200)
        form = self._session().locale_to_code
        self.assertEqual(form.source_format, TranslationFormat.XML)
        self.assertEqual(form.validation.status, ValidationStatus.VALID)
        self.assertEqual(form.input_text, "<string>Hi</string>")

    def test_invalid_json_disables_generation(self):
        response = self.client.post(
            "/locale-to-code",
            data={
                "action": "generate",
                "input_text": "not json",
                "source_code": "const x = 1;",
            },
        )
        self.assertIn("Invalid JSON format", response.text)
        self.assertEqual(self.generator.prompts, [])
        self.assertFalse(self._session().locale_to_code.can_submit)

    def test_generate_then_copy(self):
        self.generator.result = "export const App = () => null;"
        self.client.post(
            "/locale-to-code",
            data={
                "action": "generate",
                "input_text": '{"a":1}',
                "source_code": "const App = () => null;",
            },
        )
        response = self.client.post("/locale-to-code/copy")
        self.assertEqual(
            response.json(),
            {"copied": True, "text": "export const App = () => null;", "error": ""},
        )

    def test_copy_without_result_reports_error(self):
        self.client.get("/locale-to-code")
        response = self.client.post("/locale-to-code/copy")
        self.assertEqual(response.json()["copied"], False)
        self.assertEqual(response.json()["error"], "Failed to copy to clipboard")

    def test_generation_error_shows_fixed_message(self):
        self.generator.error = GenerationError("quota")
        response = self.client.post(
            "/locale-to-code",
            data={
                "action": "generate",
                "input_text": '{"a":1}',
                "source_code": "const x = 1;",
            },
        )
        self.assertIn("Failed to generate code", response.text)
        self.assertEqual(self._session().locale_to_code.result, "")


class TestJsonApi(AppTestCase):
    def test_lists_formats_and_platforms(self):
        formats = self.client.get("/api/v1/localizer/formats").json()
        self.assertEqual(
            [item["value"] for item in formats],
            ["json", "xml", "yaml", "properties", "ios-strings"],
        )
        platforms = self.client.get("/api/v1/localizer/platforms").json()
        self.assertEqual(platforms[0]["frameworks"][0], "react-i18next")

    def test_validate_and_detect(self):
        response = self.client.post(
            "/api/v1/localizer/validate", json={"text": "{", "format": "json"}
        )
        self.assertEqual(response.json()["status"], "invalid")
        self.assertTrue(response.json()["message"])

        response = self.client.post(
            "/api/v1/localizer/detect-format",
            json={"filename": "readme.md", "current_format": "yaml"},
        )
        self.assertEqual(response.json(), {"format": "yaml"})

    def test_code_to_locale(self):
        response = self.client.post(
            "/api/v1/localizer/code-to-locale",
            json={"code": "Text('Hi')", "locales": ["english", "french"]},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"result": "generated output"})

    def test_code_to_locale_requires_code(self):
        response = self.client.post("/api/v1/localizer/code-to-locale", json={"code": ""})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.generator.prompts, [])

    def test_locale_to_code_rejects_invalid_input(self):
        response = self.client.post(
            "/api/v1/localizer/locale-to-code",
            json={"translation_file": "not json", "source_code": "x"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("Invalid JSON format", response.json()["detail"])
        self.assertEqual(self.generator.prompts, [])

    def test_locale_to_code_generation_failure(self):
        self.generator.error = GenerationError("network")
        response = self.client.post(
            "/api/v1/localizer/locale-to-code",
            json={
                "translation_file": '{"a":1}',
                "source_code": "x",
                "platform": "flutter",
            },
        )
        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json()["detail"], "Failed to generate code")
        self.assertIn("using flutter_localizations", self.generator.prompts[0])


if __name__ == "__main__":
    unittest.main()
