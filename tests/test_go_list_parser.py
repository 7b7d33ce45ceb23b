"""Tests for the 'go list -m all' parser."""

import pytest

from common.errors import ManifestReadError
from manifest.go_list import normalize_module_version, parse_go_list, parse_go_list_text


class TestNormalizeModuleVersion:
    """Test version token normalization."""

    def test_plain_tag_unchanged(self):
        assert normalize_module_version("v1.4.0") == "v1.4.0"

    def test_build_metadata_stripped(self):
        assert normalize_module_version("v2.0.0+incompatible") == "v2.0.0"

    def test_pseudo_version_reduced_to_revision(self):
        assert normalize_module_version("v0.0.0-20190620200207-3b0461eec859") == "3b0461eec859"

    def test_prerelease_pseudo_version(self):
        assert normalize_module_version("v1.2.4-0.20190101000000-abcdef123456") == "abcdef123456"

    def test_pseudo_version_with_metadata(self):
        """Metadata is stripped before the pseudo-version split."""
        assert (
            normalize_module_version("v2.0.1-0.20190101000000-abcdef123456+incompatible")
            == "abcdef123456"
        )

    def test_two_segment_prerelease_kept_whole(self):
        """Versions that are not pseudo-versions are not split."""
        assert normalize_module_version("v2.0.0-rc1") == "v2.0.0-rc1"

    def test_extra_segments_select_third(self):
        assert normalize_module_version("v1.0.0-beta-20190101000000-abcdef123456") == "20190101000000"


class TestParseGoListText:
    """Test line parsing."""

    def test_skips_short_and_blank_lines(self):
        content = "github.com/example/project\n\n   \ngithub.com/foo/bar v1.0.0\n"

        assert parse_go_list_text(content) == {"github.com/foo/bar": "v1.0.0"}

    def test_ignores_extra_fields(self):
        content = "github.com/foo/bar v1.0.0 => github.com/fork/bar v1.0.1\n"

        assert parse_go_list_text(content) == {"github.com/foo/bar": "v1.0.0"}

    def test_tolerates_repeated_whitespace(self):
        content = "github.com/foo/bar\tv1.0.0\r\ngithub.com/foo/baz   v0.2.0\n"

        assert parse_go_list_text(content) == {
            "github.com/foo/bar": "v1.0.0",
            "github.com/foo/baz": "v0.2.0",
        }

    def test_skips_versions_that_normalize_to_empty(self):
        """Lines whose version reduces to nothing are treated as absent."""
        content = (
            "github.com/foo/bar +meta\n"
            "github.com/foo/baz v1.0.0-x-\n"
            "github.com/foo/qux v1.1.0\n"
        )

        assert parse_go_list_text(content) == {"github.com/foo/qux": "v1.1.0"}

    def test_last_duplicate_wins(self):
        content = "github.com/foo/bar v1.0.0\ngithub.com/foo/bar v1.1.0\n"

        assert parse_go_list_text(content) == {"github.com/foo/bar": "v1.1.0"}


class TestParseGoList:
    """Test file loading."""

    def test_reads_file(self, tmp_path):
        list_path = tmp_path / "go.list"
        list_path.write_text(
            "github.com/example/project\n"
            "golang.org/x/net v0.0.0-20190620200207-3b0461eec859\n",
            encoding="utf-8",
        )

        assert parse_go_list(str(list_path)) == {"golang.org/x/net": "3b0461eec859"}

    def test_missing_file_raises_read_error(self, tmp_path):
        with pytest.raises(ManifestReadError) as excinfo:
            parse_go_list(str(tmp_path / "missing.list"))
        assert "go list -m all" in str(excinfo.value)
