from pathlib import Path

import pytest

from frontmatter_lint.commands import validate as validate_cmd


def test_validate_whole_content_root(content_root, make_config):
    config_path = make_config(content_root)

    report = validate_cmd.run(str(config_path))

    assert len(report.documents) == 4
    assert not report.ok
    assert [(i.path.name, i.key) for i in report.errors] == [("broken-date.md", "publishedAt")]
    assert report.warnings == []


def test_validate_explicit_paths_only(content_root, make_config):
    config_path = make_config(content_root)
    target = content_root / "posts" / "data-fetching"

    report = validate_cmd.run(str(config_path), [str(target)])

    assert [p.name for p in report.documents] == ["index.mdx"]
    assert report.ok
    assert report.ok_strict


def test_strict_mode_counts_warnings(content_root, make_config):
    checks = (
        '  future_dates: "warn"\n'
        '  unknown_keys: "warn"\n'
        '  image_exists: false\n'
    )
    config_path = make_config(content_root, checks=checks)
    target = content_root / "posts" / "2020-recap.md"
    (content_root / "posts" / "2020-recap.md").write_text(
        target.read_text(encoding="utf-8").replace("tags: [recap]", "author: me"),
        encoding="utf-8",
    )

    report = validate_cmd.run(str(config_path), [str(target)], strict=True)

    assert report.ok
    assert not report.ok_strict
    assert [i.key for i in report.warnings] == ["author"]


def test_invalid_config_raises(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("content:\n  root: posts\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid configuration"):
        validate_cmd.run(str(config_path))


def test_missing_content_root_raises(tmp_path, make_config):
    config_path = make_config(tmp_path / "does-not-exist")

    with pytest.raises(FileNotFoundError):
        validate_cmd.run(str(config_path))


def test_unreadable_document_becomes_an_issue(content_root, make_config, monkeypatch):
    config_path = make_config(content_root)
    original_read_text = Path.read_text

    def read_text(self, *args, **kwargs):
        if self.name == "2020-recap.md":
            raise PermissionError(13, "Permission denied", str(self))
        return original_read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", read_text)
    report = validate_cmd.run(str(config_path))

    assert len(report.documents) == 4
    assert sorted((i.path.name, i.key) for i in report.errors) == [
        ("2020-recap.md", None),
        ("broken-date.md", "publishedAt"),
    ]
