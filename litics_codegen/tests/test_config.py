import pytest

from litics_codegen.pipeline import (
    CodeGeneratorConfig,
    DuplicateParameterPolicy,
    OutputMode,
    SchemaNotFoundError,
    SchemaParseError,
    TargetPlatform,
)


class TestCodeGeneratorConfig:
    """Test cases for configuration loading"""

    def test_defaults(self):
        config = CodeGeneratorConfig()
        assert config.api_class_name == "GeneratedEventsAnalytics"
        assert config.impl_class_name == "GeneratedEventsAnalyticsImpl"
        assert config.target_platform == TargetPlatform.JVM
        assert config.duplicate_parameter_policy == DuplicateParameterPolicy.FIRST_WINS
        assert config.output.mode == OutputMode.FORCE
        assert not config.formatter.enabled

    def test_from_dict(self):
        config = CodeGeneratorConfig.from_dict(
            {
                "namespace": "com.example",
                "target_platform": "js",
                "duplicate_parameter_policy": "error",
                "output": {"mode": "error"},
                "formatter": {"enabled": True, "line_length": 120},
                "unknown_option": 1,
            }
        )
        assert config.namespace == "com.example"
        assert config.target_platform == TargetPlatform.JS
        assert config.duplicate_parameter_policy == DuplicateParameterPolicy.ERROR
        assert config.output.mode == OutputMode.ERROR_IF_EXISTS
        assert config.formatter.line_length == 120
        assert not hasattr(config, "unknown_option")

    def test_to_dict_round_trip(self):
        config = CodeGeneratorConfig(namespace="a.b", target_platform=TargetPlatform.JS)
        assert CodeGeneratorConfig.from_dict(config.to_dict()) == config

    def test_invalid_enum_value(self):
        with pytest.raises(ValueError):
            CodeGeneratorConfig.from_dict({"target_platform": "wasm"})

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("namespace: com.example\nkotlin_runtime_package: org.acme.tracking\n")
        config = CodeGeneratorConfig.from_file(path)
        assert config.namespace == "com.example"
        assert config.kotlin_runtime_package == "org.acme.tracking"

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"python_runtime_module": "acme.tracking"}')
        assert CodeGeneratorConfig.from_file(path).python_runtime_module == "acme.tracking"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaNotFoundError):
            CodeGeneratorConfig.from_file(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- namespace\n")
        with pytest.raises(SchemaParseError, match="mapping"):
            CodeGeneratorConfig.from_file(path)

    def test_unknown_formatter_option(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("formatter:\n  enabled: true\n  width: 80\n")
        with pytest.raises(SchemaParseError, match="invalid config value") as exc_info:
            CodeGeneratorConfig.from_file(path)
        assert exc_info.value.path == str(path)

    def test_invalid_enum_in_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("duplicate_parameter_policy: last_wins\n")
        with pytest.raises(SchemaParseError, match="last_wins"):
            CodeGeneratorConfig.from_file(path)
