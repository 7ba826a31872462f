"""
Tests for BarrelGenerator.

Covers recursive composition, empty subtree suppression, exclusion toggles,
ignore patterns and write failure propagation.
"""

import os
import sys
from pathlib import Path

import pytest

from barrelgen.core.barrel import BarrelGenerator, render_barrel, sort_entries
from barrelgen.core.config import GenerationConfig
from barrelgen.core.errors import WriteFailureError
from tests.barrel_strategies import create_tree, read_exports


def _config(**kwargs) -> GenerationConfig:
    return GenerationConfig(**kwargs)


class TestRenderBarrel:
    def test_empty_entries_render_empty_body(self):
        assert render_barrel([]) == ""

    def test_entries_are_sorted_and_newline_terminated(self):
        body = render_barrel(["x.dart", "sub/sub.dart", "a.dart"])

        assert body == (
            "export 'a.dart';\n"
            "export 'sub/sub.dart';\n"
            "export 'x.dart';\n"
        )

    def test_astral_names_sort_by_utf16_code_unit(self):
        # U+1F600 encodes as surrogates (0xD83D...), below U+FF5E
        entries = ["～.dart", "\U0001F600.dart", "a.dart"]

        assert sort_entries(entries) == ["a.dart", "\U0001F600.dart", "～.dart"]
        assert render_barrel(entries).splitlines()[1] == "export '\U0001F600.dart';"


class TestFlatGeneration:
    def test_writes_barrel_named_after_directory(self, tmp_path: Path):
        root = tmp_path / "models"
        create_tree(root, ["user.dart", "post.dart"])

        written = BarrelGenerator(_config()).generate(root)

        assert written == (root / "models.dart").resolve()
        assert written.read_text(encoding="utf-8") == (
            "export 'post.dart';\nexport 'user.dart';\n"
        )

    def test_ignores_other_extensions(self, tmp_path: Path):
        root = tmp_path / "lib"
        create_tree(root, ["a.dart", "notes.txt", "b.dart.bak", "README.md"])

        written = BarrelGenerator(_config()).generate(root)

        assert read_exports(written) == ["a.dart"]

    def test_never_exports_itself(self, tmp_path: Path):
        root = tmp_path / "widgets"
        create_tree(root, ["widgets.dart", "button.dart"])

        written = BarrelGenerator(_config()).generate(root)

        assert read_exports(written) == ["button.dart"]

    def test_empty_directory_gets_empty_barrel(self, tmp_path: Path):
        root = tmp_path / "empty"
        root.mkdir()

        written = BarrelGenerator(_config()).generate(root)

        assert written.exists()
        assert written.read_text(encoding="utf-8") == ""

    def test_overwrites_existing_barrel(self, tmp_path: Path):
        root = tmp_path / "lib"
        create_tree(root, ["a.dart"])
        (root / "lib.dart").write_text("// hand written\n", encoding="utf-8")

        written = BarrelGenerator(_config()).generate(root)

        assert written.read_text(encoding="utf-8") == "export 'a.dart';\n"

    def test_non_recursive_skips_subdirectories(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", "sub/y.dart"])

        written = BarrelGenerator(_config()).generate(root, recursive=False)

        assert read_exports(written) == ["x.dart"]
        assert not (root / "sub" / "sub.dart").exists()

    def test_custom_extension(self, tmp_path: Path):
        root = tmp_path / "src"
        create_tree(root, ["a.ts", "b.g.ts", "c.dart"])

        written = BarrelGenerator(_config(extension=".ts")).generate(root)

        assert written.name == "src.ts"
        assert read_exports(written) == ["a.ts", "b.g.ts"]


class TestExclusionToggles:
    FILES = ["a.dart", "a.g.dart", "a.freezed.dart"]

    @pytest.mark.parametrize(
        "exclude_freezed,exclude_generated,expected",
        [
            (False, False, ["a.dart", "a.freezed.dart", "a.g.dart"]),
            (False, True, ["a.dart", "a.freezed.dart"]),
            (True, False, ["a.dart", "a.g.dart"]),
            (True, True, ["a.dart"]),
        ],
    )
    def test_toggles_remove_exactly_their_suffix(
        self, tmp_path: Path, exclude_freezed, exclude_generated, expected
    ):
        root = tmp_path / "state"
        create_tree(root, self.FILES)
        config = _config(exclude_freezed=exclude_freezed, exclude_generated=exclude_generated)

        written = BarrelGenerator(config).generate(root)

        assert read_exports(written) == expected


class TestRecursiveGeneration:
    def test_recursive_composition(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", "sub/y.dart"])

        written = BarrelGenerator(_config()).generate(root, recursive=True)

        assert (root / "sub" / "sub.dart").read_text(encoding="utf-8") == "export 'y.dart';\n"
        assert written.read_text(encoding="utf-8") == (
            "export 'sub/sub.dart';\nexport 'x.dart';\n"
        )

    def test_deeply_nested_directories(self, tmp_path: Path):
        root = tmp_path / "lib"
        create_tree(root, ["a/b/c/leaf.dart"])

        written = BarrelGenerator(_config()).generate(root, recursive=True)

        assert read_exports(written) == ["a/a.dart"]
        assert read_exports(root / "a" / "a.dart") == ["b/b.dart"]
        assert read_exports(root / "a" / "b" / "b.dart") == ["c/c.dart"]
        assert read_exports(root / "a" / "b" / "c" / "c.dart") == ["leaf.dart"]

    def test_empty_subtree_is_not_referenced(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", "assets/logo.png", "empty/deeper/notes.txt"])
        (root / "blank").mkdir()

        written = BarrelGenerator(_config()).generate(root, recursive=True)

        assert read_exports(written) == ["x.dart"]
        assert not (root / "assets" / "assets.dart").exists()
        assert not (root / "empty" / "empty.dart").exists()
        assert not (root / "blank" / "blank.dart").exists()

    def test_excluded_only_subtree_is_not_referenced(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", "gen/model.g.dart"])

        written = BarrelGenerator(_config(exclude_generated=True)).generate(root, recursive=True)

        assert read_exports(written) == ["x.dart"]
        assert not (root / "gen" / "gen.dart").exists()

    def test_stale_nested_barrel_does_not_keep_directory_active(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", "old/old.dart"])

        written = BarrelGenerator(_config()).generate(root, recursive=True)

        assert read_exports(written) == ["x.dart"]

    def test_same_named_directories_stay_separate(self, tmp_path: Path):
        root = tmp_path / "lib"
        create_tree(root, ["models/user.dart", "feature/models/order.dart"])

        BarrelGenerator(_config()).generate(root, recursive=True)

        assert read_exports(root / "models" / "models.dart") == ["user.dart"]
        assert read_exports(root / "feature" / "models" / "models.dart") == ["order.dart"]
        assert read_exports(root / "feature" / "feature.dart") == ["models/models.dart"]

    def test_unrelated_same_named_directory_outside_target_is_ignored(self, tmp_path: Path):
        create_tree(tmp_path, ["app/models/user.dart", "other/models/secret.dart"])

        BarrelGenerator(_config()).generate(tmp_path / "app" / "models", recursive=True)

        assert read_exports(tmp_path / "app" / "models" / "models.dart") == ["user.dart"]

    def test_written_files_lists_children_before_parents(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", "sub/y.dart", "sub/inner/z.dart"])
        seen = []
        generator = BarrelGenerator(_config(), progress_callback=lambda b: seen.append(b.path))

        written = generator.generate(root, recursive=True)

        paths = [b.path for b in generator.written_files]
        assert paths == seen
        assert paths == [
            (root / "sub" / "inner" / "inner.dart").resolve(),
            (root / "sub" / "sub.dart").resolve(),
            written,
        ]

    def test_ignore_patterns_skip_directories(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", ".dart_tool/cache.dart", "build/out.dart"])

        written = BarrelGenerator(
            _config(ignore_patterns=[".dart_tool", "build/"])
        ).generate(root, recursive=True)

        assert read_exports(written) == ["x.dart"]

    def test_rerun_is_stable(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", "sub/y.dart", "sub/inner/z.dart"])
        generator = BarrelGenerator(_config())

        first = generator.generate(root, recursive=True).read_text(encoding="utf-8")
        second = generator.generate(root, recursive=True).read_text(encoding="utf-8")

        assert first == second
        assert read_exports(root / "sub" / "sub.dart") == ["inner/inner.dart", "y.dart"]


class TestIgnoreRoot:
    def test_anchored_pattern_matches_only_at_top_level(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", "gen/top.dart", "sub/gen/only.dart"])

        written = BarrelGenerator(_config(ignore_patterns=["/gen"])).generate(
            root, recursive=True
        )

        assert read_exports(written) == ["sub/sub.dart", "x.dart"]
        assert read_exports(root / "sub" / "sub.dart") == ["gen/gen.dart"]
        assert read_exports(root / "sub" / "gen" / "gen.dart") == ["only.dart"]
        assert not (root / "gen" / "gen.dart").exists()

    def test_path_pattern_drops_subdirectory_at_every_level(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", "sub/generated/only.dart"])

        written = BarrelGenerator(_config(ignore_patterns=["sub/generated"])).generate(
            root, recursive=True
        )

        assert read_exports(written) == ["x.dart"]
        assert not (root / "sub" / "sub.dart").exists()

    def test_nested_references_are_never_empty(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", "a/gen/one.dart", "b/c/gen/two.dart", "gen/three.dart"])
        generator = BarrelGenerator(_config(ignore_patterns=["/gen", "b/c"]))

        generator.generate(root, recursive=True)

        for barrel in generator.written_files:
            for entry in barrel.entries:
                if "/" in entry:
                    assert read_exports(barrel.path.parent / entry)


class TestWriteFailure:
    def test_write_failure_aborts_and_keeps_nested_output(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", "sub/y.dart"])
        # A directory where the barrel file should go cannot be written to
        (root / "root.dart").mkdir()

        with pytest.raises(WriteFailureError) as exc_info:
            BarrelGenerator(_config()).generate(root, recursive=True)

        assert exc_info.value.path == (root / "root.dart").resolve()
        assert (root / "sub" / "sub.dart").read_text(encoding="utf-8") == "export 'y.dart';\n"
        assert (root / "root.dart").is_dir()

    def test_failure_in_nested_directory_aborts_parent(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", "sub/y.dart"])
        (root / "sub" / "sub.dart").mkdir()

        with pytest.raises(WriteFailureError):
            BarrelGenerator(_config()).generate(root, recursive=True)

        assert not (root / "root.dart").exists()

    @pytest.mark.skipif(
        sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="Requires POSIX permissions enforced for a non-root user",
    )
    def test_read_only_directory(self, tmp_path: Path):
        root = tmp_path / "root"
        create_tree(root, ["x.dart", "sub/y.dart"])
        root.chmod(0o555)
        try:
            with pytest.raises(WriteFailureError) as exc_info:
                BarrelGenerator(_config()).generate(root, recursive=True)
        finally:
            root.chmod(0o755)

        assert exc_info.value.path == (root / "root.dart").resolve()
        assert (root / "sub" / "sub.dart").exists()
        assert not (root / "root.dart").exists()
