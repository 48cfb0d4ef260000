"""页面模板."""

from jinja2 import DictLoader, Environment, select_autoescape

LAYOUT = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{% block title %}Locale Code Generator{% endblock %}</title>
  <style>
    body { display: flex; margin: 0; min-height: 100vh; font-family: sans-serif; background: #f3f4f6; }
    aside { width: 16rem; background: #1e40af; color: #fff; padding: 1rem; }
    aside a { display: block; color: #fff; padding: .5rem 1rem; text-decoration: none; border-radius: .25rem; }
    aside a.active, aside a:hover { background: #1d4ed8; }
    main { flex-grow: 1; padding: 1.5rem; }
    textarea { width: 100%; height: 12rem; font-family: monospace; }
    .valid { border: 1px solid #86efac; }
    .invalid { border: 1px solid #fecaca; }
    .error { background: #fef2f2; border: 1px solid #fecaca; color: #dc2626; padding: 1rem; }
    pre { background: #f9fafb; border: 1px solid #e5e7eb; padding: 1rem; overflow-x: auto; }
  </style>
</head>
<body>
  <aside>
    <nav>
      <a href="/code-to-locale" {% if active == "code-to-locale" %}class="active"{% endif %}>Code to Locale</a>
      <a href="/locale-to-code" {% if active == "locale-to-code" %}class="active"{% endif %}>Locale to Code</a>
    </nav>
  </aside>
  <main>{% block content %}{% endblock %}</main>
</body>
</html>
"""

CODE_TO_LOCALE = """{% extends "layout.html" %}
{% block title %}Code to Locale{% endblock %}
{% block content %}
<h1>Code to Locale</h1>
<p>Translate your code across multiple languages</p>
<form method="post" action="/code-to-locale" enctype="multipart/form-data">
  <select name="platform">
    {% for platform in platforms %}
    <option value="{{ platform.value }}" {% if platform.value == form.platform %}selected{% endif %}>{{ platform.label }}</option>
    {% endfor %}
  </select>
  <select name="file_type">
    {% for fmt in output_formats %}
    <option value="{{ fmt.value }}" {% if fmt.value == form.file_type %}selected{% endif %}>{{ fmt.label }}</option>
    {% endfor %}
  </select>
  <textarea name="input_text" placeholder="Paste your code here...">{{ form.input_text }}</textarea>
  <input type="file" name="file" accept=".json,.xml,.txt">
  <button type="submit" name="action" value="upload">Upload</button>
  <select name="locales" multiple>
    {% for value, label in locales.items() %}
    <option value="{{ value }}" {% if value in form.locales %}selected{% endif %}>{{ label }}</option>
    {% endfor %}
  </select>
  <button type="submit" name="action" value="generate" {% if not form.can_submit %}disabled{% endif %}>
    {% if form.in_flight %}Generating...{% else %}Generate{% endif %}
  </button>
  <button type="submit" name="action" value="reset">Reset</button>
</form>
{% if form.error %}<div class="error">{{ form.error }}</div>{% endif %}
{% if form.result %}<pre><code>{{ form.result }}</code></pre>{% endif %}
{% endblock %}
"""

LOCALE_TO_CODE = """{% extends "layout.html" %}
{% block title %}Translation to Code{% endblock %}
{% block content %}
<h1>Translation to Code</h1>
<p>Convert translation files into fully internationalized components with error handling</p>
<form method="post" action="/locale-to-code" enctype="multipart/form-data">
  <label>Source Format
    <select name="source_format">
      {% for fmt in formats %}
      <option value="{{ fmt.value }}" {% if fmt.value == form.source_format %}selected{% endif %}>{{ fmt.label }} ({{ fmt.extensions | join(", ") }})</option>
      {% endfor %}
    </select>
  </label>
  <label>Target Language
    <select name="platform">
      {% for platform in platforms %}
      <option value="{{ platform.value }}" {% if platform.value == form.platform %}selected{% endif %}>{{ platform.label }}</option>
      {% endfor %}
    </select>
  </label>
  <label>Framework
    <select name="framework">
      {% for framework in frameworks %}
      <option value="{{ framework }}" {% if framework == form.framework %}selected{% endif %}>{{ framework }}</option>
      {% endfor %}
    </select>
  </label>
  <button type="submit" name="action" value="update">Apply</button>
  <label>Translation File Content
    <textarea name="input_text" class="{{ form.validation_status }}" placeholder="Paste your {{ form.source_format | upper }} translation file content here...">{{ form.input_text }}</textarea>
  </label>
  {% if form.validation_status != "unchecked" %}<span class="{{ form.validation_status }}">{{ form.validation_status }}</span>{% endif %}
  <input type="file" name="file" accept="{{ accept }}">
  <button type="submit" name="action" value="upload">Upload File</button>
  <label>Source Code to Translate
    <textarea name="source_code" placeholder="Paste your source code here...">{{ form.source_code }}</textarea>
  </label>
  <select name="locales" multiple>
    {% for value, label in locales.items() %}
    <option value="{{ value }}" {% if value in form.locales %}selected{% endif %}>{{ label }}</option>
    {% endfor %}
  </select>
  <button type="submit" name="action" value="generate" {% if not form.can_submit %}disabled{% endif %}>
    {% if form.in_flight %}Generating...{% else %}Generate Component{% endif %}
  </button>
  <button type="submit" name="action" value="reset">Reset</button>
  {% if form.result %}
  <button type="submit" name="action" value="toggle_preview">{% if form.show_preview %}Hide Preview{% else %}Show Preview{% endif %}</button>
  {% endif %}
</form>
<div id="error" class="error" {% if not form.error %}hidden{% endif %}>{{ form.error }}</div>
{% if form.result %}
<section>
  <h3>Generated Component <span>{{ form.platform }} + {{ form.framework }}</span></h3>
  <button type="button" id="copy" title="Copy to clipboard">Copy</button>
  <pre><code>{{ form.result }}</code></pre>
</section>
<script>
  document.getElementById("copy").addEventListener("click", async () => {
    const box = document.getElementById("error");
    try {
      const response = await fetch("/locale-to-code/copy", { method: "POST" });
      const payload = await response.json();
      if (!payload.copied) throw new Error(payload.error);
      await navigator.clipboard.writeText(payload.text);
      document.getElementById("copy").textContent = "Copied";
    } catch (err) {
      box.textContent = "Failed to copy to clipboard";
      box.hidden = false;
    }
  });
</script>
{% endif %}
{% endblock %}
"""

NOT_FOUND = """{% extends "layout.html" %}
{% block content %}<h1>404 - Page Not Found</h1>{% endblock %}
"""

environment = Environment(
    loader=DictLoader(
        {
            "layout.html": LAYOUT,
            "code_to_locale.html": CODE_TO_LOCALE,
            "locale_to_code.html": LOCALE_TO_CODE,
            "not_found.html": NOT_FOUND,
        }
    ),
    autoescape=select_autoescape(default=True),
)


def render(template_name: str, **context) -> str:
    """渲染指定模板."""
    return environment.get_template(template_name).render(**context)
