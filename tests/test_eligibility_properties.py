"""
Property-based tests for the eligibility filter.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from barrelgen.core.barrel import Classification, classify, is_exportable
from barrelgen.core.config import GenerationConfig
from tests.barrel_strategies import dir_name, stem

extension = st.sampled_from([".dart", ".ts", ".py"])


@given(name=dir_name, ext=extension, exclude_freezed=st.booleans(), exclude_generated=st.booleans())
@settings(max_examples=100)
def test_own_barrel_is_never_exportable(name, ext, exclude_freezed, exclude_generated):
    """A directory's own barrel file is never exported, whatever the toggles."""
    config = GenerationConfig(
        extension=ext, exclude_freezed=exclude_freezed, exclude_generated=exclude_generated
    )

    assert classify(f"/work/{name}/{name}{ext}", name, config) is Classification.NOT_APPLICABLE
    assert not is_exportable(f"{name}{ext}", name, config)


@given(base=stem, name=dir_name, ext=extension)
@settings(max_examples=100)
def test_other_extensions_are_not_applicable(base, name, ext):
    config = GenerationConfig(extension=ext)

    assert classify(f"{base}{ext}.bak", name, config) is Classification.NOT_APPLICABLE
    assert classify(f"{base}.md", name, config) is Classification.NOT_APPLICABLE


@given(base=stem, name=dir_name, exclude_freezed=st.booleans(), exclude_generated=st.booleans())
@settings(max_examples=100)
def test_toggles_only_affect_their_own_suffix(base, name, exclude_freezed, exclude_generated):
    """Each toggle excludes exactly its generated suffix and nothing else."""
    config = GenerationConfig(exclude_freezed=exclude_freezed, exclude_generated=exclude_generated)
    plain = f"{base}.dart"
    generated = f"{base}.g.dart"
    freezed = f"{base}.freezed.dart"

    if plain != f"{name}.dart":
        assert is_exportable(plain, name, config)
    if generated != f"{name}.dart":
        assert is_exportable(generated, name, config) is not exclude_generated
    if freezed != f"{name}.dart":
        assert is_exportable(freezed, name, config) is not exclude_freezed


def test_excluded_generated_file_is_tagged():
    config = GenerationConfig(exclude_generated=True, exclude_freezed=True)

    assert classify("user.g.dart", "models", config) is Classification.GENERATED_EXCLUDED
    assert classify("user.freezed.dart", "models", config) is Classification.GENERATED_EXCLUDED
    assert classify("user.dart", "models", config) is Classification.EXPORT


def test_extension_without_dot_is_normalized():
    config = GenerationConfig(extension="dart")

    assert config.extension == ".dart"
    assert is_exportable("user.dart", "models", config)


def test_barrel_of_another_directory_is_exportable():
    config = GenerationConfig()

    assert is_exportable("/work/lib/models/models.dart", "lib", config)
