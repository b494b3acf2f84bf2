"""Unit tests for highlighting pipeline assembly."""

from __future__ import annotations

import pytest

from render.pipeline import apply_pipeline, build_pipeline, pipeline_stage_names, render_source


def test_build_pipeline_orders_core_stages() -> None:
    """Default pipeline should run the four core stages in order."""
    names = pipeline_stage_names(build_pipeline())

    assert names == ("base_wrap", "keyword_highlight", "comment_highlight", "string_highlight")


def test_build_pipeline_appends_include_escape_last() -> None:
    """Include escaping should be the final stage when enabled."""
    names = pipeline_stage_names(build_pipeline(escape_includes=True))

    assert names[-1] == "include_escape" and len(names) == 5


def test_render_source_highlights_keywords_in_main() -> None:
    """Only int and return should be wrapped in the main scenario."""
    html = render_source("int main() { return 0; }")

    assert html == (
        "<pre><span style='color: blue;'>int</span> main() { "
        "<span style='color: blue;'>return</span> 0; }</pre>"
    )


def test_render_source_without_tokens_is_base_wrap_only() -> None:
    """Input without recognized tokens should gain no spans."""
    assert render_source("x = y + z;") == "<pre>x = y + z;</pre>"


def test_render_source_is_deterministic() -> None:
    """Repeated rendering of the same input should match exactly."""
    source = 'for (int i = 0; i < n; i++) { puts("x"); } // loop'

    assert render_source(source) == render_source(source)


@pytest.mark.parametrize(
    "source",
    ["", "// trailing", '"unterminated', "/* open", "#include <x", "int", "a\n// end\n"],
)
def test_render_source_always_wrapped_in_pre(source: str) -> None:
    """Output should start and end with the preformatted tags."""
    html = render_source(source, escape_includes=True)

    assert html.startswith("<pre>") and html.endswith("</pre>")


def test_render_source_is_not_idempotent() -> None:
    """Rendering rendered HTML again should add more spans."""
    once = render_source("int x;")
    twice = render_source(once)

    assert twice != once and twice.count("<span") > once.count("<span")


def test_render_source_nests_keyword_inside_comment() -> None:
    """Keyword spans run first and end up inside the comment span."""
    html = render_source("// return early")

    assert html == (
        "<pre><span style='color: green;'>// "
        "<span style='color: blue;'>return</span> early</span></pre>"
    )


def test_render_source_treats_slashes_in_strings_as_comment() -> None:
    """Comment highlighting runs before string highlighting."""
    html = render_source('url = "http://example";')

    assert "<span style='color: green;'>//example\"" in html


def test_render_source_escapes_includes_only_when_requested() -> None:
    """Include directives stay raw unless the escape stage is enabled."""
    source = "#include <iostream>"

    assert render_source(source) == "<pre>#include <iostream></pre>" and render_source(
        source, escape_includes=True
    ) == ("<pre>#in-clude &lt;iostream&gt;</pre>")


def test_apply_pipeline_with_no_stages_returns_input() -> None:
    """Folding over an empty pipeline is the identity."""
    assert apply_pipeline((), "text") == "text"


def test_render_source_leaves_keyword_named_header_unescaped() -> None:
    """Keyword highlighting runs before include escaping, so <float.h> stays raw."""
    html = render_source("#include <float.h>", escape_includes=True)

    assert html == "<pre>#include <<span style='color: blue;'>float</span>.h></pre>"


def test_render_source_url_in_block_comment_stays_one_span() -> None:
    """A URL inside a block comment should not open a nested line comment."""
    html = render_source("/* see http://example */ int x;")

    assert html == (
        "<pre><span style='color: green;'>/* see http://example */</span> "
        "<span style='color: blue;'>int</span> x;</pre>"
    )
