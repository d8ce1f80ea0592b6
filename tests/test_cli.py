"""Tests for climan.cli: entrypoint, argument parsing, and subcommands."""

import logging
import sys
import types

import pytest

from climan.args import CommandArgs
from climan.cli import main
from climan.config import DispatchConfig
from climan.dispatch.dispatcher import Dispatcher
from climan.dispatch.tree import PathTree
from climan.enums import Action, Resource


@pytest.fixture
def received(monkeypatch: pytest.MonkeyPatch) -> list[CommandArgs]:
    """Register a fake tool module and return the list its handlers append to."""
    calls: list[CommandArgs] = []

    dispatcher = Dispatcher()

    @dispatcher.operation(Action.ADD, Resource.NUMBERS)
    def add_numbers(args: CommandArgs) -> int:
        calls.append(args)
        return sum(int(v) for v in args.values)

    @dispatcher.operation(Action.GET, Resource.CAMERA)
    def get_camera(args: CommandArgs) -> None:
        calls.append(args)

    registry = PathTree()
    registry.set_function("layer.node", lambda: print("Hello from layer.node!"))

    mod = types.ModuleType("_climan_cli_tool")
    mod.dispatcher = dispatcher  # type: ignore[attr-defined]
    mod.registry = registry  # type: ignore[attr-defined]
    mod.strict = Dispatcher(DispatchConfig(strict=True))  # type: ignore[attr-defined]
    mod.strict_tree = PathTree(DispatchConfig(strict=True))  # type: ignore[attr-defined]
    mod.quiet = Dispatcher(DispatchConfig(echo_commands=False))  # type: ignore[attr-defined]
    mod.quiet.register_all(lambda args: "done")  # type: ignore[attr-defined]
    mod.empty = Dispatcher()  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_climan_cli_tool", mod)
    return calls


class TestCLIHelp:
    @pytest.mark.parametrize("command", [[], ["run"], ["exec"], ["call"], ["routes"]])
    def test_help_exits_zero(self, command: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([*command, "--help"])
        assert exc_info.value.code == 0

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "climan" in capsys.readouterr().out


class TestCLIMissingArgs:
    @pytest.mark.parametrize(
        "argv",
        [
            ["run"],
            ["run", "_climan_cli_tool"],
            ["run", "_climan_cli_tool", "add"],
            ["exec", "_climan_cli_tool"],
            ["call", "_climan_cli_tool"],
            ["routes"],
        ],
    )
    def test_exits_two(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2

    def test_unknown_action(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "_climan_cli_tool", "launch", "numbers"])
        assert exc_info.value.code == 2

    def test_unknown_log_level(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "chatty", "routes", "_climan_cli_tool"])
        assert exc_info.value.code == 2


class TestRun:
    def test_prints_echo_and_result(
        self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["run", "_climan_cli_tool", "add", "numbers", "2", "3"])

        assert capsys.readouterr().out.splitlines() == [
            "Running command with action: add, resource: numbers, values: ['2', '3']",
            "5",
        ]
        assert received == [CommandArgs(Action.ADD, Resource.NUMBERS, ("2", "3"))]

    def test_options_forwarded(self, received: list[CommandArgs]) -> None:
        main(
            [
                "run",
                "_climan_cli_tool:dispatcher",
                "get",
                "camera",
                "-d",
                "front",
                "-p",
                "2",
                "--skip",
                "4",
                "-v",
                "-o",
                "out.txt",
            ]
        )

        assert received == [
            CommandArgs(
                Action.GET,
                Resource.CAMERA,
                data="front",
                page=2,
                skip=4,
                verbose=True,
                output="out.txt",
            )
        ]

    def test_unset_options_are_none(self, received: list[CommandArgs]) -> None:
        main(["run", "_climan_cli_tool", "get", "camera"])

        args = received[0]
        assert args.verbose is None
        assert args.page is None
        assert args.data is None
        assert args.silent is False

    def test_negative_values(self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]) -> None:
        main(["run", "_climan_cli_tool", "add", "numbers", "10", "-3"])

        assert received[0].values == ("10", "-3")
        assert capsys.readouterr().out.splitlines()[-1] == "7"

    def test_silent(self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]) -> None:
        main(["run", "_climan_cli_tool", "add", "numbers", "1", "-s"])

        assert capsys.readouterr().out == ""
        assert received[0].silent is True

    def test_echo_disabled_by_config(
        self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["run", "_climan_cli_tool:quiet", "rotate", "stars"])

        assert capsys.readouterr().out == "done\n"

    def test_unregistered_pair_logs(
        self, received: list[CommandArgs], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="climan.dispatch"):
            main(["run", "_climan_cli_tool", "search", "moon"])

        assert "No function registered for search moon" in caplog.text
        assert received == []

    def test_strict_miss_exits_one(
        self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "_climan_cli_tool:strict", "search", "moon"])

        assert exc_info.value.code == 1
        assert "Error: No function registered for search moon" in capsys.readouterr().err

    def test_missing_module(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "nonexistent_module_xyz", "add", "numbers"])

        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_wrong_registry_type(
        self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "_climan_cli_tool:registry", "add", "numbers"])

        assert exc_info.value.code == 1
        assert "not a Dispatcher instance" in capsys.readouterr().err

    def test_bad_log_level_env(
        self, received: list[CommandArgs], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CLIMAN_LOG_LEVEL", "chatty")

        with pytest.raises(SystemExit) as exc_info:
            main(["run", "_climan_cli_tool", "add", "numbers"])
        assert exc_info.value.code == 1

    def test_log_level_flag_overrides_env(
        self,
        received: list[CommandArgs],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("CLIMAN_LOG_LEVEL", "chatty")

        main(["--log-level", "info", "run", "_climan_cli_tool", "add", "numbers", "4"])

        assert capsys.readouterr().out.splitlines()[-1] == "4"


class TestRunOptionPlacement:
    def test_option_before_values(
        self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["run", "_climan_cli_tool", "add", "numbers", "-p", "2", "1", "2", "3"])

        assert received[0].values == ("1", "2", "3")
        assert received[0].page == 2
        assert capsys.readouterr().out.splitlines()[-1] == "6"

    def test_flag_between_values(self, received: list[CommandArgs]) -> None:
        main(["run", "_climan_cli_tool", "add", "numbers", "1", "-v", "2"])

        assert received[0].values == ("1", "2")
        assert received[0].verbose is True

    def test_exec_flag_between_values(self, received: list[CommandArgs]) -> None:
        main(["exec", "_climan_cli_tool", "add numbers 5 --skip 1 6"])

        assert received[0].values == ("5", "6")
        assert received[0].skip == 1


class TestStrictFromEnv:
    @pytest.fixture(autouse=True)
    def _strict_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLIMAN_STRICT", "1")

    def test_run_miss_exits_one(
        self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "_climan_cli_tool", "search", "moon"])

        assert exc_info.value.code == 1
        assert "Error: No function registered for search moon" in capsys.readouterr().err

    def test_call_miss_exits_one(
        self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "_climan_cli_tool", "layer.other"])

        assert exc_info.value.code == 1
        assert "Function not found for path: layer.other" in capsys.readouterr().err

    def test_hits_still_run(
        self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["run", "_climan_cli_tool", "add", "numbers", "2", "2"])

        assert capsys.readouterr().out.splitlines()[-1] == "4"

    def test_unset_leaves_registry_lenient(
        self,
        received: list[CommandArgs],
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        monkeypatch.delenv("CLIMAN_STRICT")

        with caplog.at_level(logging.WARNING, logger="climan.dispatch"):
            main(["run", "_climan_cli_tool", "search", "moon"])

        assert "No function registered for search moon" in caplog.text


class TestExec:
    def test_command_string(
        self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["exec", "_climan_cli_tool", "add numbers 1 2 3"])

        assert capsys.readouterr().out.splitlines()[-1] == "6"
        assert received[0].values == ("1", "2", "3")

    def test_quoted_values(self, received: list[CommandArgs]) -> None:
        main(["exec", "_climan_cli_tool", "get camera -d 'rear view'"])

        assert received[0].data == "rear view"

    def test_bad_command_string(self, received: list[CommandArgs]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["exec", "_climan_cli_tool", "add planets"])
        assert exc_info.value.code == 2


class TestCall:
    def test_calls_handler(self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]) -> None:
        main(["call", "_climan_cli_tool", "layer.node"])

        assert capsys.readouterr().out == "Hello from layer.node!\n"

    def test_missing_path_logs(
        self, received: list[CommandArgs], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="climan.dispatch"):
            main(["call", "_climan_cli_tool:registry", "layer.other"])

        assert "Function not found for path: layer.other" in caplog.text

    def test_strict_miss_exits_one(
        self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "_climan_cli_tool:strict_tree", "x.y"])

        assert exc_info.value.code == 1
        assert "Function not found for path: x.y" in capsys.readouterr().err

    def test_dispatcher_rejected(
        self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "_climan_cli_tool:dispatcher", "layer.node"])

        assert exc_info.value.code == 1
        assert "not a PathTree instance" in capsys.readouterr().err


class TestRoutes:
    def test_dispatcher_table(
        self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["routes", "_climan_cli_tool"])

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["ACTION", "RESOURCE", "HANDLER"]
        assert set(lines[1]) == {"-"}
        assert lines[2].split()[:2] == ["add", "numbers"]
        assert lines[2].endswith("add_numbers")
        assert lines[3].split()[:2] == ["get", "camera"]

    def test_tree_table(self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_climan_cli_tool:registry"])

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["PATH", "HANDLER"]
        assert lines[2].startswith("layer.node")

    def test_empty(self, received: list[CommandArgs], capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_climan_cli_tool:empty"])

        assert capsys.readouterr().out == "No handlers registered.\n"
