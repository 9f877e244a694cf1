from __future__ import annotations

from types import SimpleNamespace

from django.template import TemplateSyntaxError
from django.test import SimpleTestCase

from notices.markdown.preprocessors import PREPROCESSORS, apply_preprocessors
from notices.markdown.preprocessors.notice_tags import notice_tags, notice_tags_default


class NoticeTagsPreprocessorTests(SimpleTestCase):
    def test_expands_notice_blocks_in_page_source(self) -> None:
        text = "# Title\n\n{% info %}Remember to **save**.{% endinfo %}\n"
        self.assertEqual(
            notice_tags(text, {}),
            "# Title\n\n"
            '<aside class="notice info" markdown="1">\n Remember to **save**.\n</aside>\n\n',
        )

    def test_plain_markdown_is_returned_unchanged(self) -> None:
        text = "Just *markdown* with {braces}."
        self.assertIs(notice_tags(text, {}), text)

    def test_context_values_are_not_escaped(self) -> None:
        output = notice_tags(
            "{% success %}{{ page.snippet }}{% endsuccess %}", {"page": {"snippet": "<kbd>Ctrl</kbd> & C"}}
        )
        self.assertIn("\n <kbd>Ctrl</kbd> & C\n", output)

    def test_context_is_available_to_the_template(self) -> None:
        output = notice_tags("{% info %}{{ page.title }}{% endinfo %}", {"page": {"title": "Setup"}})
        self.assertIn("\n Setup\n", output)

    def test_template_errors_propagate(self) -> None:
        with self.assertRaises(TemplateSyntaxError):
            notice_tags("{% warning %}unclosed", {})

    def test_pipeline_runs_default_preprocessor(self) -> None:
        self.assertIn(notice_tags_default, PREPROCESSORS)
        output = apply_preprocessors("{% error %}Boom{% enderror %}", {})
        self.assertEqual(output, '<aside class="notice error" markdown="1">\n Boom\n</aside>\n')

    def test_only_page_is_visible_to_page_source(self) -> None:
        context = {
            "page": {"title": "Setup"},
            "user": SimpleNamespace(password="pbkdf2_sha256$secret"),
            "request": SimpleNamespace(META={"HTTP_COOKIE": "sessionid=abc"}),
        }
        output = notice_tags(
            "{{ page.title }}|{{ user.password }}|{{ request.META.HTTP_COOKIE }}", context
        )
        self.assertEqual(output, "Setup||")

    def test_other_tag_libraries_cannot_be_loaded(self) -> None:
        with self.assertRaises(TemplateSyntaxError):
            notice_tags("{% load markdown_tags %}{{ x|markdown }}", {})

    def test_literal_template_syntax_raises_unless_verbatim(self) -> None:
        with self.assertRaises(TemplateSyntaxError):
            notice_tags("Use `{% raw %}` in Liquid.", {})
        self.assertEqual(
            notice_tags("Use `{% verbatim %}{% raw %}{% endverbatim %}` in Liquid.", {}),
            "Use `{% raw %}` in Liquid.",
        )
