from pathlib import Path

import pytest
from pydantic import ValidationError

from optgroups.config import loader
from optgroups.exceptions import MissingParameter

YAML_CONFIG = """
name: deploy
options:
  - flags: ["--verbose", "-v"]
    type: bool
    default: false
choices:
  - flags: ["--target"]
    required: true
    groups:
      - key: k8s
        name: Kubernetes
        options:
          - flags: ["--namespace"]
            required: true
      - key: vm
        options:
          - flags: ["--host"]
          - flags: ["--port"]
            type: int
            default: 22
"""

TOML_CONFIG = """
name = "deploy"

[[choices]]
flags = ["--target"]

[[choices.groups]]
key = "vm"

[[choices.groups.options]]
flags = ["--port"]
type = "int"
default = 22
"""


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


def test_load_yaml(tmp_path):
    command = loader(write(tmp_path, "deploy.yaml", YAML_CONFIG))
    assert command.name == "deploy"
    target = command.option_groups[0]
    assert list(target.groups) == ["k8s", "vm"]
    assert target.groups["vm"].name == "vm"

    result = command.parse(
        command.invocations_from([("--target", ["vm"]), ("--port", ["2222"])])
    )
    assert result["verbose"] is False
    assert result["target"].values() == {"host": None, "port": 2222}


def test_load_yaml_required_choice(tmp_path):
    command = loader(write(tmp_path, "deploy.yml", YAML_CONFIG))
    with pytest.raises(MissingParameter):
        command.parse({})


def test_load_toml(tmp_path):
    command = loader(write(tmp_path, "deploy.toml", TOML_CONFIG))
    assert command.parse({}) == {"target": None}


def test_unsupported_suffix(tmp_path):
    with pytest.raises(ValueError, match="Unsupported config format"):
        loader(write(tmp_path, "deploy.json", "{}"))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "nope.yaml")


def test_not_a_mapping(tmp_path):
    with pytest.raises(ValueError, match="must contain a mapping"):
        loader(write(tmp_path, "deploy.yaml", "- just\n- a list\n"))


def test_unknown_type_rejected(tmp_path):
    content = "name: x\noptions:\n  - flags: ['--n']\n    type: complex\n"
    with pytest.raises(ValidationError):
        loader(write(tmp_path, "x.yaml", content))


def test_choice_without_groups_rejected(tmp_path):
    content = "name: x\nchoices:\n  - flags: ['--mode']\n    groups: []\n"
    with pytest.raises(ValidationError):
        loader(write(tmp_path, "x.yaml", content))
