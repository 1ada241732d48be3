"""Tests for smart_renamer.engine.renaming: skip rules, plans and application."""

import pytest

from smart_renamer.core.enums import NamingConvention
from smart_renamer.engine.renaming import (
    RenamePlan,
    apply_renames,
    plan_renames,
    skip_reason,
)
from smart_renamer.file_discovery import FileInfo


def _file(path):
    name = path.rsplit("/", 1)[-1]
    ext = "." + name.rsplit(".", 1)[-1] if "." in name[1:] else ""
    return FileInfo(name=name, path=path, extension=ext, is_directory=False)


class TestSkipReason:
    @pytest.mark.parametrize(
        "filename,reason",
        [
            (".env", "hidden file"),
            ("package.json", "protected project file"),
            ("Dockerfile", "protected project file"),
            ("logo.PNG", "image file"),
            ("README.md", "markdown file"),
            ("types.d.ts", "TypeScript declaration file"),
            ("stdio.h", "C/C++ header file"),
            ("stubs.pyi", "declaration file"),
            ("ci.yml", "config file"),
            ("app.config.ts", "config file"),
            ("appConfig.ts", "config file"),
        ],
    )
    def test_reasons(self, filename, reason):
        assert skip_reason(filename) == reason

    def test_kept(self):
        assert skip_reason("Legacy_File.ts", keep={"Legacy_File.ts"}) == "kept"

    def test_renamable(self):
        assert skip_reason("user_profile.ts") is None


class TestPlanRenames:
    def test_plans_and_skips(self):
        files = [
            _file("src/user_profile.ts"),
            _file("src/userCard.ts"),
            _file("package.json"),
            _file("App.ts"),
            FileInfo(name="Some_Dir", path="Some_Dir", extension="", is_directory=True),
        ]
        planned, skipped = plan_renames(files, NamingConvention.CAMEL, exceptions=["app"])
        assert planned == [
            RenamePlan("src/user_profile.ts", "user_profile.ts", "userProfile.ts", 1.0)
        ]
        assert planned[0].target == "src/userProfile.ts"
        assert skipped == [("package.json", "protected project file")]


class TestApplyRenames:
    def test_renames_files(self, tmp_path):
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "user_profile.ts").write_text("x")
        plan = RenamePlan("src/user_profile.ts", "user_profile.ts", "userProfile.ts", 1.0)
        report = apply_renames([plan], tmp_path)
        assert report.renamed == [plan]
        assert report.failed == []
        assert (tmp_path / "src" / "userProfile.ts").read_text() == "x"

    def test_refuses_to_overwrite(self, tmp_path):
        (tmp_path / "user_profile.ts").write_text("old")
        (tmp_path / "userProfile.ts").write_text("keep me")
        plan = RenamePlan("user_profile.ts", "user_profile.ts", "userProfile.ts", 1.0)
        report = apply_renames([plan], tmp_path)
        assert report.renamed == []
        assert "target exists" in report.failed[0][1]
        assert (tmp_path / "userProfile.ts").read_text() == "keep me"

    def test_missing_source_recorded(self, tmp_path):
        plan = RenamePlan("ghost_file.ts", "ghost_file.ts", "ghostFile.ts", 1.0)
        report = apply_renames([plan], tmp_path)
        assert report.renamed == []
        assert report.failed[0][0] == plan
