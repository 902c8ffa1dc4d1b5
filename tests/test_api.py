"""Tests for the programmatic package API."""

import frontmatter_lint


def test_validate_and_index_via_package(content_root, make_config, tmp_path):
    config_path = str(make_config(content_root))

    report = frontmatter_lint.validate(config_path=config_path)
    assert len(report.errors) == 1

    output = frontmatter_lint.index(str(tmp_path / "idx.json"), config_path=config_path)
    assert output.exists()


def test_status_for_missing_config(tmp_path):
    info = frontmatter_lint.status(str(tmp_path / "nope.yaml"))
    assert info["valid"] is False
    assert "not found" in info["error"]


def test_status_for_valid_config(content_root, make_config):
    info = frontmatter_lint.status(str(make_config(content_root)))
    assert info["valid"] is True
    assert info["content_root_exists"] is True
    assert info["required_keys"] == ["title", "publishedAt", "summary", "image"]
