"""Tests for YAML calculator configuration."""

from pathlib import Path

import pytest

from shuntyard import Calculator, ConfigError
from shuntyard.config import CONFIG_ENV_VAR, CalculatorConfig, validate_config


def write_yaml(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "calc.yaml"
    path.write_text(content)
    return path


class TestFromDict:
    def test_empty(self):
        config = CalculatorConfig.from_dict(None)
        assert config == CalculatorConfig()

    def test_function_list(self):
        config = CalculatorConfig.from_dict({"functions": ["sin", "cos"]})
        assert config.functions == {"sin": None, "cos": None}

    def test_function_mapping(self):
        config = CalculatorConfig.from_dict({"functions": {"sin": 5, ">": None}})
        assert config.functions == {"sin": 5, ">": None}

    def test_constants_become_floats(self):
        config = CalculatorConfig.from_dict({"constants": {"myConst": 20}})
        assert config.constants == {"myConst": 20.0}

    def test_schema_errors(self):
        with pytest.raises(ConfigError) as exc_info:
            CalculatorConfig.from_dict({"constants": {"pi": "three"}, "colour": "red"})

        assert len(exc_info.value.issues) == 2
        assert any(issue.path == "constants/pi" for issue in exc_info.value.issues)

    def test_parenthesis_precedence_cannot_be_overridden(self):
        issues = validate_config({"operators": {"(": 3}})
        assert issues

    def test_negative_function_precedence_is_rejected(self):
        issues = validate_config({"functions": {"sin": -1}})
        assert issues


class TestBuildContext:
    def test_constants_and_functions(self):
        config = CalculatorConfig(
            constants={"myConst": 20.0},
            functions={"sin": None, ">": None},
        )
        calc = Calculator(config.build_context())

        assert calc.calculate("sin(0) > 0") == 0.0
        assert calc.calculate("myConst*2") == 40.0

    def test_config_constants_override_catalogue(self):
        config = CalculatorConfig(constants={"pi": 3.14}, functions={"pi": None})
        assert config.build_context().constants["pi"] == 3.14

    def test_operator_precedence_override(self):
        config = CalculatorConfig(operators={"+": 5})
        assert Calculator(config.build_context()).calculate("2*3+4") == 14.0

    def test_unknown_function(self):
        with pytest.raises(ConfigError, match="nope"):
            CalculatorConfig(functions={"nope": None}).build_context()

    def test_override_of_undefined_operator(self):
        with pytest.raises(ConfigError, match="%"):
            CalculatorConfig(operators={"%": 3}).build_context()


class TestFromYaml:
    def test_load(self, tmp_path):
        path = write_yaml(
            tmp_path,
            """
constants:
  myConst: 20
functions:
  sin: 4
  cos: null
operators:
  "^": 5
""",
        )
        config = CalculatorConfig.from_yaml(path)

        assert config.constants == {"myConst": 20.0}
        assert config.functions == {"sin": 4, "cos": None}
        assert config.operators == {"^": 5}

    def test_boolean_keys_become_strings(self, tmp_path):
        path = write_yaml(tmp_path, "constants:\n  on: 1\n")
        assert CalculatorConfig.from_yaml(path).constants == {"on": 1.0}

    def test_yes_no_keys_stay_names(self, tmp_path):
        path = write_yaml(tmp_path, "constants:\n  yes: 1\n  no: 2\n  true: 3\n  off: 4\n")
        assert CalculatorConfig.from_yaml(path).constants == {
            "yes": 1.0,
            "no": 2.0,
            "true": 3.0,
            "off": 4.0,
        }

    def test_empty_file(self, tmp_path):
        path = write_yaml(tmp_path, "")
        assert CalculatorConfig.from_yaml(path) == CalculatorConfig()

    def test_yaml_syntax_error(self, tmp_path):
        path = write_yaml(tmp_path, "constants: [unclosed\n")
        with pytest.raises(ConfigError, match="YAML parse error"):
            CalculatorConfig.from_yaml(path)

    def test_not_a_mapping(self, tmp_path):
        path = write_yaml(tmp_path, "- sin\n- cos\n")
        with pytest.raises(ConfigError, match="mapping"):
            CalculatorConfig.from_yaml(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            CalculatorConfig.from_yaml(tmp_path / "missing.yaml")


class TestFromEnv:
    def test_unset(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert CalculatorConfig.from_env() == CalculatorConfig()

    def test_points_at_file(self, tmp_path, monkeypatch):
        path = write_yaml(tmp_path, "constants:\n  x: 2\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert CalculatorConfig.from_env().constants == {"x": 2.0}
