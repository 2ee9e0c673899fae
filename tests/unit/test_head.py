"""Unit tests for whole head input conversion."""

from head_tag_normalizer.core.head import head_input_to_tags, resolve_title_template
from head_tag_normalizer.core.schema import SchemaCatalog


class TestResolveTitleTemplate:
    def test_no_template(self) -> None:
        assert resolve_title_template(None, "Home") == "Home"

    def test_placeholder(self) -> None:
        assert resolve_title_template("%s | Site", "Home") == "Home | Site"

    def test_whitespace_kept(self) -> None:
        assert resolve_title_template(" %s ", "Home") == " Home "
        assert resolve_title_template("%s | Site", "") == " | Site"

    def test_template_without_placeholder(self) -> None:
        assert resolve_title_template("Site", "Home") == "Site"

    def test_callable(self) -> None:
        assert resolve_title_template(lambda t: f"[{t}]", "Home") == "[Home]"


class TestHeadInputToTags:
    def test_sections_in_input_order(self) -> None:
        head = {
            "title": "Home",
            "titleTemplate": "%s | Site",
            "meta": [{"name": "description", "content": "hello"}],
            "htmlAttrs": {"lang": "en", "class": {"dark": True, "light": False}},
            "base": {"href": "/"},
        }

        tags = head_input_to_tags(head)

        assert [t.tag for t in tags] == ["title", "meta", "htmlAttrs", "base"]
        assert tags[0].children == "Home | Site"
        assert tags[1].props == {"name": "description", "content": "hello"}
        assert tags[2].props == {"lang": "en", "class": "dark"}
        assert tags[3].props == {"href": "/"}

    def test_fan_out_is_flattened(self) -> None:
        head = {"meta": [{"name": "keywords", "content": ["a", "b"]}, {"charset": "utf-8"}]}

        tags = head_input_to_tags(head)

        assert [t.key for t in tags] == ["keywords:0", "keywords:1", None]

    def test_single_entry_for_array_section(self) -> None:
        tags = head_input_to_tags({"script": {"src": "/a.js", "defer": True}})
        assert len(tags) == 1
        assert tags[0].props == {"src": "/a.js", "defer": ""}

    def test_unknown_and_none_sections_skipped(self) -> None:
        tags = head_input_to_tags({"foo": {"bar": 1}, "link": None, "noscript": [None]})
        assert tags == []

    def test_template_without_title(self) -> None:
        assert head_input_to_tags({"titleTemplate": "%s | Site"}) == []

    def test_meta_flat_section(self) -> None:
        tags = head_input_to_tags({"metaFlat": {"ogTitle": "Hello", "twitterCard": "summary"}})

        assert [t.tag for t in tags] == ["meta", "meta"]
        assert tags[0].props == {"property": "og:title", "content": "Hello"}
        assert tags[1].props == {"name": "twitter:card", "content": "summary"}

    def test_custom_catalog(self) -> None:
        catalog = SchemaCatalog(promoted={"link": ["tagPreload"]})

        tags = head_input_to_tags({"link": [{"rel": "preload", "href": "/f.woff2", "tagPreload": True}]}, catalog)

        assert tags[0].props == {"rel": "preload", "href": "/f.woff2"}
        assert tags[0].config == {"tagPreload": ""}
