import json
from pathlib import Path

from frontmatter_lint.commands import export_index as index_cmd


def load(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_index_lists_valid_documents_newest_first(content_root, make_config, isolated_data_dir):
    config_path = make_config(content_root)

    output_path = index_cmd.run(str(config_path))

    assert output_path == isolated_data_dir.resolve() / "index" / "content_index.json"
    entries = load(output_path)
    assert [e["slug"] for e in entries] == ["data-fetching", "2020-recap"]

    first = entries[0]
    assert first["title"] == "Data Fetching Strategies"
    assert first["publishedAt"] == "2021-03-02"
    assert first["image"] == "/static/images/data-fetching/banner.png"
    assert first["path"] == "posts/data-fetching/index.mdx"
    assert first["readingTime"] == 1
    assert first["wordCount"] > 0

    recap = entries[1]
    assert recap["publishedAt"] == "2020-12-31"
    assert recap["wordCount"] == 5


def test_index_can_include_drafts(content_root, make_config):
    config_path = make_config(content_root)

    entries = load(index_cmd.run(str(config_path), include_drafts=True))

    assert [e["slug"] for e in entries] == ["upcoming", "data-fetching", "2020-recap"]


def test_index_ties_break_on_slug(content_root, make_config):
    config_path = make_config(content_root)
    twin = content_root / "posts" / "another-recap.md"
    twin.write_text(
        (content_root / "posts" / "2020-recap.md").read_text(encoding="utf-8"),
        encoding="utf-8",
    )

    entries = load(index_cmd.run(str(config_path)))

    assert [e["slug"] for e in entries] == ["data-fetching", "2020-recap", "another-recap"]


def test_index_relative_output_lands_in_data_dir(content_root, make_config, isolated_data_dir):
    config_path = make_config(content_root)

    output_path = index_cmd.run(str(config_path), "exports/site.json")

    assert output_path == isolated_data_dir.resolve() / "exports" / "site.json"
    assert output_path.exists()


def test_index_absolute_output(content_root, make_config, tmp_path):
    config_path = make_config(content_root)
    target = tmp_path / "site" / "index.json"

    output_path = index_cmd.run(str(config_path), str(target))

    assert output_path == target
    assert len(load(target)) == 2


def write_post(path, title):
    path.write_text(
        "---\n"
        f"title: '{title}'\n"
        "publishedAt: '2021-01-15'\n"
        "summary: 'Short.'\n"
        "image: '/static/images/x.png'\n"
        "---\n"
        "Body text.\n",
        encoding="utf-8",
    )


def test_non_latin_file_names_keep_their_stem_as_slug(content_root, make_config):
    write_post(content_root / "posts" / "日本語.md", "Japanese")
    write_post(content_root / "posts" / "中文.md", "Chinese")
    config_path = make_config(content_root)

    entries = load(index_cmd.run(str(config_path)))

    slugs = [e["slug"] for e in entries]
    assert "" not in slugs
    assert sorted(slugs) == sorted(["日本語", "中文", "data-fetching", "2020-recap"])


def test_duplicate_slug_is_skipped(content_root, make_config):
    write_post(content_root / "posts" / "data_fetching.md", "Duplicate")
    config_path = make_config(content_root)

    entries = load(index_cmd.run(str(config_path)))

    assert [e["slug"] for e in entries] == ["data-fetching", "2020-recap"]
    assert entries[0]["title"] == "Data Fetching Strategies"


def test_unreadable_document_is_skipped(content_root, make_config, monkeypatch):
    config_path = make_config(content_root)
    original_read_text = Path.read_text

    def read_text(self, *args, **kwargs):
        if self.name == "2020-recap.md":
            raise PermissionError(13, "Permission denied", str(self))
        return original_read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", read_text)
    entries = load(index_cmd.run(str(config_path)))

    assert [e["slug"] for e in entries] == ["data-fetching"]
