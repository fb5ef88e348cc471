import pytest

from optgroups import Command, Invocation, Option, OptionGroup
from optgroups.exceptions import (
    BadParameterValue,
    MissingParameter,
    NoSuchOption,
    RegistrationError,
)
from optgroups.parser import ChoiceGroup


def build_command():
    command = Command("deploy", help="Deploy things")
    command.add_option("-v", "--verbose", type=bool, default=False)
    vm = OptionGroup("VM")
    vm.add_option("--host", required=True)
    vm.add_option("--port", type=int, default=22)
    k8s = OptionGroup("Kubernetes")
    k8s.add_option("--namespace", required=True)
    target = command.add_group_choice(
        "--target", choices={"vm": vm, "k8s": k8s}, help="Where to deploy"
    )
    return command, target, vm, k8s


def test_str():
    command, _, _, _ = build_command()
    assert repr(command) == "Command(name='deploy', options=5, groups=1)"


def test_add_group_choice_returns_registered_binding():
    command, target, vm, k8s = build_command()
    assert isinstance(target, ChoiceGroup)
    assert target.option.help == "Where to deploy"
    assert command.get_option("--target") is target.option
    assert command.get_option("namespace") is k8s.options[0]
    assert command.get_option("--nope") is None


def test_parse_result():
    command, target, vm, _ = build_command()
    result = command.parse(
        command.invocations_from(
            [("--target", ["vm"]), ("--host", ["example.com"]), ("-v", ["true"])]
        )
    )
    assert result == {"verbose": True, "target": vm}
    assert vm.values() == {"host": "example.com", "port": 22}


def test_unchosen_group_requirements_not_enforced():
    command, target, _, k8s = build_command()
    command.parse(command.invocations_from([("--target", ["vm"]), ("--host", ["h"])]))
    assert target.chosen_group is not k8s


def test_no_choice_no_requirements():
    command, target, _, _ = build_command()
    assert command.parse() == {"verbose": False, "target": None}


def test_required_choice():
    command = Command("deploy")
    command.add_group_choice("--target", choices=[("vm", OptionGroup())], required=True)
    with pytest.raises(MissingParameter):
        command.parse({})


def test_ungrouped_finalize_errors_before_groups():
    command, target, _, _ = build_command()
    invocations = command.invocations_from([("--target", ["vm"]), ("-v", ["maybe"])])
    with pytest.raises(BadParameterValue):
        command.parse(invocations)
    assert target.chosen_group is None


def test_duplicate_flags_rejected():
    command = Command("tool")
    command.add_option("--name")
    group = OptionGroup()
    group.add_option("--name")
    with pytest.raises(RegistrationError, match="already used"):
        command.add_group_choice("--mode", choices={"a": group})
    assert [option.option_name for option in command.options] == ["--name"]
    assert command.option_groups == ()
    command.add_option("--mode")


def test_check_options_has_no_side_effects():
    command = Command("tool")
    command.add_option("-v", "--verbose", type=bool)
    with pytest.raises(RegistrationError, match="'-v'"):
        command.check_options([Option("--first"), Option("-v", "--version")])
    assert command.get_option("--first") is None
    with pytest.raises(RegistrationError, match="--level"):
        command.check_options([Option("--level"), Option("--level")])
    assert [option.option_name for option in command.options] == ["--verbose"]


def test_option_registered_once():
    command = Command("tool")
    option = command.add_option("--name")
    with pytest.raises(RegistrationError):
        command.register_option(option)


def test_invocations_from_groups_by_option():
    command, _, _, _ = build_command()
    invocations = command.invocations_from(
        [("--host", ["a"]), ("--target", ["vm"]), ("--host", ["b"])]
    )
    host = command.get_option("--host")
    assert invocations[host] == [Invocation("--host", ("a",)), Invocation("--host", ("b",))]


def test_invocations_from_unknown_flag():
    command, _, _, _ = build_command()
    with pytest.raises(NoSuchOption, match="No such option: --bogus"):
        command.invocations_from([("--bogus", ["1"])])


def test_context_path():
    parent = Command("cli")
    child = Command("deploy", parent=parent)
    assert child.make_context().command_path == "cli deploy"


def test_main_renders_usage_error(capsys):
    command, _, _, _ = build_command()
    with pytest.raises(SystemExit) as excinfo:
        command.main(command.invocations_from([("--target", ["baz"])]))
    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert "invalid choice: baz. (choose from vm, k8s)" in captured.err


def test_main_returns_result():
    command, _, vm, _ = build_command()
    result = command.main(
        command.invocations_from([("--target", ["vm"]), ("--host", ["h"])])
    )
    assert result["target"] is vm
