import json

import pytest
from doclint_cli.config import DEFAULT_CONFIG_NAME, load_config
from doclint_linter.config import LintConfig
from doclint_linter.errors import ConfigParseError

CUSTOM = {"rules": {"headingCase": {"level": "error", "message": "Case!"}}, "format": "json"}


def test_builtin_default_when_nothing_found(tmp_path):
    assert load_config(None, cwd=tmp_path) == LintConfig.default()


def test_explicit_path_wins(tmp_path):
    explicit = tmp_path / "custom.json"
    explicit.write_text(json.dumps(CUSTOM), encoding="utf-8")
    (tmp_path / DEFAULT_CONFIG_NAME).write_text(json.dumps({"rules": {}}), encoding="utf-8")

    config = load_config(explicit, cwd=tmp_path)

    assert list(config.rules) == ["headingCase"]
    assert config.format == "json"


def test_missing_explicit_path_falls_through_to_discovered(tmp_path):
    (tmp_path / DEFAULT_CONFIG_NAME).write_text(json.dumps(CUSTOM), encoding="utf-8")

    config = load_config(tmp_path / "nope.json", cwd=tmp_path)

    assert list(config.rules) == ["headingCase"]


def test_missing_format_defaults_to_text(tmp_path):
    (tmp_path / DEFAULT_CONFIG_NAME).write_text(json.dumps({"rules": {}}), encoding="utf-8")

    assert load_config(None, cwd=tmp_path).format == "text"


def test_unknown_rule_entries_of_any_shape_are_kept(tmp_path):
    content = {
        "rules": {
            "spellCheck": {"dictionary": "en"},
            "futureRule": {"level": "hint", "message": "m"},
            "headingCase": {"level": "warning", "message": "Case!"},
        }
    }
    (tmp_path / DEFAULT_CONFIG_NAME).write_text(json.dumps(content), encoding="utf-8")

    config = load_config(None, cwd=tmp_path)

    assert list(config.rules) == ["spellCheck", "futureRule", "headingCase"]
    assert config.rules["spellCheck"] == {"dictionary": "en"}
    assert config.rules["headingCase"].message == "Case!"


@pytest.mark.parametrize(
    "content",
    [
        "{ broken",
        "[1, 2, 3]",
        json.dumps({"rules": {"headingCase": {"level": "loud", "message": "m"}}}),
        json.dumps({"rules": {"maxWordsInSentence": {"level": "error", "message": "m", "args": {"limit": "x"}}}}),
        json.dumps(
            {
                "rules": {
                    "headingCase": {"level": "warning", "message": "m"},
                    "heading-case": {"level": "error", "message": "m"},
                }
            }
        ),
    ],
)
def test_invalid_config_file(tmp_path, content):
    path = tmp_path / DEFAULT_CONFIG_NAME
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigParseError) as exc_info:
        load_config(None, cwd=tmp_path)

    assert exc_info.value.path == path
