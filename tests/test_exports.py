"""Tests for the llms.txt, llms-full.txt and per-page exports."""

from playbook.core.content import get_documents
from playbook.exports import LlmsFullExport, LlmsIndexExport, PageExport, Route
from tests.conftest import make_doc


class TestPageExport:

    def test_routes_only_for_llm_pages(self):
        docs = [
            make_doc("guides/naming"),
            make_doc("guides/nested/deep"),
            make_doc("changelog", in_llms=False),
            make_doc("about"),
        ]

        paths = [route.path for route in PageExport().get_routes(docs)]

        assert paths == ["guides/naming.md", "guides/nested/deep.md", "about.md"]

    def test_render_removes_imports(self):
        doc = make_doc(
            "guides/naming",
            title="Naming",
            body='\nimport { Aside } from "@astrojs/starlight/components"\n\nUse PascalCase.\n',
        )
        export = PageExport()
        [route] = export.get_routes([doc])

        response = export.render([doc], route)

        assert response.body == "# Naming\n\nUse PascalCase.\n\n"
        assert response.content_type == "text/plain; charset=utf-8"

    def test_render_missing_body_is_empty(self):
        doc = make_doc("guides/empty", title="Title", body=None)

        response = PageExport().render([doc], Route("guides/empty.md", doc))

        assert response.body == "# Title\n\n\n"
        assert "None" not in response.body
        assert "null" not in response.body

    def test_find_route(self):
        docs = [make_doc("guides/naming"), make_doc("guides/hidden", in_llms=False)]
        export = PageExport()

        assert export.find_route(docs, "/guides/naming.md").document.id == "guides/naming"
        assert export.find_route(docs, "guides/naming") is None
        assert export.find_route(docs, "guides/hidden.md") is None


class TestLlmsIndexExport:

    def _export(self):
        return LlmsIndexExport(
            site_url="https://example.com",
            base_path="/playbook/",
            title="Playbook",
            description="How we work.",
        )

    def test_includes_ordered_pages_in_order(self):
        docs = [
            make_doc("guides/b", title="B", order=2, description="Second"),
            make_doc("guides/a", title="A", order=1, description="First"),
            make_doc("guides/c", title="C", order=None),
        ]
        export = self._export()

        response = export.render(docs, export.get_routes(docs)[0])

        assert response.body == (
            "# Playbook\n"
            "\n"
            "> How we work.\n"
            "\n"
            "## Table of contents\n"
            "\n"
            "- [A](https://example.com/playbook/guides/a.md): First\n"
            "- [B](https://example.com/playbook/guides/b.md): Second\n"
        )

    def test_excludes_pages_not_in_llms(self):
        docs = [
            make_doc("guides/a", order=1),
            make_doc("changelog", order=2, in_llms=False),
        ]

        assert [doc.id for doc in self._export().select(docs)] == ["guides/a"]

    def test_numeric_order_and_stable_ties(self):
        docs = [
            make_doc("guides/ten", order=10),
            make_doc("guides/two", order=2),
            make_doc("guides/zero", order=0),
            make_doc("guides/two-b", order=2),
        ]

        ids = [doc.id for doc in self._export().select(docs)]

        assert ids == ["guides/zero", "guides/two", "guides/two-b", "guides/ten"]

    def test_link_with_root_base_path(self):
        export = LlmsIndexExport(site_url="https://example.com", base_path="/")
        assert export.link(make_doc("guides/a")) == "https://example.com/guides/a.md"

    def test_single_route(self):
        assert [route.path for route in self._export().get_routes([])] == ["llms.txt"]


class TestLlmsFullExport:

    def test_concatenates_raw_bodies_in_order(self):
        docs = [
            make_doc("guides/b", title="B", order=2, body="Second"),
            make_doc("guides/a", title="A", order=1, body='import X from "x"\n\nFirst'),
            make_doc("guides/c", title="C", order=None, body="Skipped"),
        ]
        export = LlmsFullExport(title="Playbook")

        response = export.render(docs, export.get_routes(docs)[0])

        assert response.body == (
            "# Playbook - Full\n\n"
            '# A\n\nimport X from "x"\n\nFirst\n\n'
            "# B\n\nSecond\n\n"
        )

    def test_includes_pages_not_in_llms(self):
        docs = [make_doc("changelog", title="Changelog", order=1, in_llms=False, body=None)]
        export = LlmsFullExport(title="Playbook")

        response = export.render(docs, export.get_routes(docs)[0])

        assert response.body == "# Playbook - Full\n\n# Changelog\n\n\n\n"

    def test_empty_collection(self):
        export = LlmsFullExport(title="Playbook")
        assert export.render([], Route("llms-full.txt")).body == "# Playbook - Full\n\n"


def test_links_have_no_raw_spaces(write_page, content_dir):
    write_page("guides/My Page.md", "title: My page\nsidebar:\n  order: 1")
    docs = get_documents(content_dir)
    export = LlmsIndexExport(site_url="https://example.com", base_path="/p/")

    assert export.link(docs[0]) == "https://example.com/p/guides/my-page.md"
    assert PageExport().get_routes(docs)[0].path == "guides/my-page.md"


def test_link_is_percent_encoded():
    export = LlmsIndexExport(site_url="https://example.com", base_path="/p/")
    assert export.link(make_doc("guides/café")) == "https://example.com/p/guides/caf%C3%A9.md"
