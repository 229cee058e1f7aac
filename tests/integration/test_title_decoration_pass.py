import copy
import threading
from typing import Dict

import pytest

from drape.app import MappingContext, TitleDecorationPass
from drape.app.services import HtmlSerializer
from drape.config import DrapeConfig
from drape.needle import L
from drape.spec import DecorationPassState, Element, EvaluationError, Text
from drape.test_utils import title


@pytest.fixture
def decoration(diagnostics) -> TitleDecorationPass:
    return TitleDecorationPass(diagnostics=diagnostics)


def render(node) -> str:
    return HtmlSerializer().serialize(node)


def test_layout_pattern_with_content_title(decoration):
    layout = title("My Site", layout__title_pattern="$CONTENT_TITLE | $LAYOUT_TITLE")
    content = title("Home")

    result, state = decoration.run(layout, content)

    assert render(result) == "<title>Home | My Site</title>"
    assert state.content_title == Text("Home")
    assert state.layout_title == Text("My Site")


def test_content_pattern_overrides_layout_pattern(decoration):
    layout = title("Site", layout__title_pattern="$LAYOUT_TITLE :: $CONTENT_TITLE")
    content = title("Page", layout__title_pattern="$CONTENT_TITLE (on $LAYOUT_TITLE)")

    result, _ = decoration.run(layout, content)

    assert render(result) == "<title>Page (on Site)</title>"


def test_expressions_are_evaluated_in_the_context(decoration):
    layout = title(th__text="${siteName}", layout__title_pattern="$LAYOUT_TITLE - $CONTENT_TITLE")
    content = title(th__text="|Issue #${issue}|")
    context = MappingContext({"siteName": "Tracker", "issue": "42"})

    result, _ = decoration.run(layout, content, context)

    assert render(result) == "<title>Tracker - Issue #42</title>"


def test_special_characters_survive_round_trip(decoration):
    layout = title("R&amp;D &lt;Lab&gt;", layout__title_pattern="$CONTENT_TITLE @ $LAYOUT_TITLE")
    content = title("Bob&#39;s page")

    result, _ = decoration.run(layout, content)

    assert render(result) == "<title>Bob&#39;s page @ R&amp;D &lt;Lab&gt;</title>"


def test_entities_are_not_escaped_twice_by_a_pattern(decoration):
    layout = title("R&amp;D", layout__title_pattern="$CONTENT_TITLE @ $LAYOUT_TITLE")
    content = title("Tom &amp; Jerry")

    result, _ = decoration.run(layout, content)

    assert render(result) == "<title>Tom &amp; Jerry @ R&amp;D</title>"


@pytest.mark.parametrize(
    "markup",
    ["R&amp;D", "1 &lt; 2 &gt; 0", "Bob&#39;s page", "&quot;Quoted&quot; &amp; co"],
)
def test_pattern_renders_titles_like_a_plain_merge(decoration, markup):
    plain, _ = decoration.run(None, title(markup))
    from_content, _ = decoration.run(title(layout__title_pattern="$CONTENT_TITLE"), title(markup))
    from_layout, _ = decoration.run(title(markup, layout__title_pattern="$LAYOUT_TITLE"), None)

    assert render(plain) == f"<title>{markup}</title>"
    assert render(from_content) == render(plain)
    assert render(from_layout) == render(plain)


def test_unescaped_titles_when_configured(diagnostics):
    decoration = TitleDecorationPass(DrapeConfig(escape_titles=False), diagnostics=diagnostics)
    layout = title(th__text="${brand}", layout__title_pattern="$LAYOUT_TITLE: $CONTENT_TITLE")
    content = title("News")

    result, _ = decoration.run(layout, content, MappingContext({"brand": "<b>Acme</b>"}))

    assert render(result) == "<title><b>Acme</b>: News</title>"


def test_pattern_without_layout_title_keeps_content_title(decoration):
    layout = title(layout__title_pattern="My Site - $CONTENT_TITLE")
    content = title("Home")

    result, state = decoration.run(layout, content)

    assert render(result) == "<title>Home</title>"
    assert state.layout_title is None


def test_no_titles_at_all_gives_empty_title(decoration):
    result, state = decoration.run(title(layout__title_pattern="$CONTENT_TITLE"), None)

    assert result == Element.create("title")
    assert state.resulting_title is not None
    assert state.resulting_title.is_empty()


def test_without_pattern_titles_merge_structurally(decoration):
    layout = title("Site", lang="en")
    content = title("Page")

    result, state = decoration.run(layout, content)

    assert render(result) == '<title lang="en">Page</title>'
    assert state == DecorationPassState()


def test_missing_titles_without_pattern(decoration):
    assert decoration.run(None, None)[0] is None
    assert render(decoration.run(title("Site"), None)[0]) == "<title>Site</title>"


def test_evaluation_failure_aborts_the_pass(decoration):
    layout = title(th__text="${undefined}", layout__title_pattern="$LAYOUT_TITLE")

    with pytest.raises(EvaluationError):
        decoration.run(layout, title("Page"))


def test_deprecated_token_warns_once_across_documents(decoration, spy_bus):
    for page in ("One", "Two", "Three"):
        layout = title("Site", layout__title_pattern="$DECORATOR_TITLE | $CONTENT_TITLE")
        result, _ = decoration.run(layout, title(page))
        assert render(result) == f"<title>Site | {page}</title>"

    assert spy_bus.count(L.title.pattern.deprecated_token, level="warning") == 1


def test_decoration_does_not_mutate_inputs(decoration):
    layout = Element.create(
        "title",
        {"layout:title-pattern": "$LAYOUT_TITLE | $CONTENT_TITLE", "lang": "en"},
        [Text("Layout page"), Element.create("small", children=[Text("beta")])],
    )
    content = Element.create("title", {"th:text": "'Content page'"}, [Text("ignored")])
    layout_orig, content_orig = copy.deepcopy(layout), copy.deepcopy(content)

    decoration.run(layout, content)
    decoration.run(title("No pattern"), content)

    assert layout == layout_orig
    assert content == content_orig


def test_concurrent_passes_keep_separate_state(decoration):
    results: Dict[str, str] = {}
    barrier = threading.Barrier(6)

    def worker(page: str):
        barrier.wait()
        _, state = decoration.run(
            title("Site", layout__title_pattern="$CONTENT_TITLE"), title(page)
        )
        results[page] = state.content_title.content

    pages = [f"page-{i}" for i in range(6)]
    threads = [threading.Thread(target=worker, args=(p,)) for p in pages]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == {p: p for p in pages}
