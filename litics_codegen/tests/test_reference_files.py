import difflib
from pathlib import Path

import pytest

from litics_codegen.pipeline import CodeGeneratorConfig, PipelineGenerator

TEST_DATA = Path(__file__).parent / "test_data"
REFERENCE_DIR = TEST_DATA / "reference"

NAMESPACES = {
    "kotlin": "com.example.analytics",
    "python": "example_bindings",
}


def discover_test_cases():
    """Collect every reference file, keyed by language and relative path"""
    test_cases = []
    for language in sorted(NAMESPACES):
        language_dir = REFERENCE_DIR / language
        for reference_file in sorted(language_dir.rglob("*")):
            if not reference_file.is_file():
                continue
            test_cases.append(
                {
                    "test_name": f"{language}_{reference_file.stem}",
                    "language": language,
                    "relative_path": reference_file.relative_to(language_dir),
                    "reference_file": reference_file,
                }
            )
    return test_cases


@pytest.mark.parametrize("test_case", discover_test_cases(), ids=lambda tc: tc["test_name"])
def test_reference_file_generation(test_case):
    """Test code generation against reference files"""
    config = CodeGeneratorConfig(namespace=NAMESPACES[test_case["language"]], add_generation_comment=False)
    files = PipelineGenerator(config, test_case["language"]).generate(TEST_DATA / "per_event")

    assert test_case["relative_path"] in files
    generated_code = files[test_case["relative_path"]]

    with open(test_case["reference_file"], encoding="utf-8") as f:
        reference_code = f.read()

    # Normalize line endings for cross-platform compatibility
    generated_normalized = generated_code.replace("\r\n", "\n").strip()
    reference_normalized = reference_code.replace("\r\n", "\n").strip()

    if generated_normalized != reference_normalized:
        diff = difflib.unified_diff(
            reference_normalized.splitlines(keepends=True),
            generated_normalized.splitlines(keepends=True),
            fromfile="reference",
            tofile="generated",
            lineterm="",
        )
        diff_text = "".join(diff)

        pytest.fail(f"Generated code does not match reference for {test_case['test_name']}\n\nDiff:\n{diff_text}")


def test_every_language_has_references():
    languages = {tc["language"] for tc in discover_test_cases()}
    assert languages == set(NAMESPACES)
