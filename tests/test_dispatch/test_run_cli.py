import pytest

from argtree.command import category, leaf
from argtree.dispatcher import Dispatcher, run_cli
from argtree.exceptions import ConfigError
from argtree.spec import flag, option, required


def make_tree(handler=None):
    return category(
        "tool",
        [
            leaf("serve", [flag("daemon"), option("port", int, 8080)], handler),
            leaf("check", [required("config")]),
        ],
    )


def test_success_exit_code():
    assert run_cli(make_tree(), ["serve", "--port", "1"], {}) == 0


def test_handler_int_result_is_exit_code():
    assert run_cli(make_tree(lambda args, context: 3), ["serve"], {}) == 3


def test_handler_non_int_result_exits_zero():
    assert run_cli(make_tree(lambda args, context: "done"), ["serve"], {}) == 0
    assert run_cli(make_tree(lambda args, context: True), ["serve"], {}) == 0


def test_help_calls_renderer():
    seen = []
    code = run_cli(make_tree(), ["check", "--help"], {}, help_renderer=seen.append)
    assert code == 0
    assert len(seen) == 1
    assert seen[0].path == "check"
    assert seen[0].spec is not None


def test_help_without_renderer(capsys):
    assert run_cli(make_tree(), [], {}) == 0
    assert capsys.readouterr().out == ""


def test_parse_error_prints_message(capsys):
    code = run_cli(make_tree(), ["serve", "--prot", "1"], {})
    assert code == 2
    out = capsys.readouterr().out
    assert "error:" in out
    assert "Unknown flag ('--prot'). Did you mean 'port'?" in out


def test_unknown_command_exit_code(capsys):
    assert run_cli(make_tree(), ["deploy"], {}) == 2
    assert "Unknown command ('deploy')" in capsys.readouterr().out


def test_missing_required_exit_code(capsys):
    assert run_cli(make_tree(), ["check"], {}) == 2
    assert "Missing required argument ('config')" in capsys.readouterr().out


def test_message_with_markup_characters_is_escaped(capsys):
    assert run_cli(make_tree(), ["[bold]x"], {}) == 2
    assert "[bold]x" in capsys.readouterr().out


def test_construction_error_exit_code(capsys):
    assert run_cli("not a tree", [], {}) == 1  # type: ignore[arg-type]
    assert "CommandTreeError" in capsys.readouterr().out


def test_argtree_error_from_handler_exit_code():
    def handler(args, context):
        raise ConfigError("bad config")

    assert run_cli(make_tree(handler), ["serve"], {}) == 1


def test_keyboard_interrupt_exit_code():
    def handler(args, context):
        raise KeyboardInterrupt

    assert run_cli(make_tree(handler), ["serve"], {}) == 130


def test_other_handler_errors_propagate():
    def handler(args, context):
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        run_cli(make_tree(handler), ["serve"], {})


def test_result_renderer():
    seen = []
    run_cli(make_tree(), ["serve", "--daemon"], {}, result_renderer=seen.append)
    assert seen[0].path == "serve"
    assert seen[0].args.daemon is True


def test_accepts_dispatcher():
    assert run_cli(Dispatcher(make_tree()), ["serve"], {}) == 0


def test_argv_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["tool", "check", "--config", "a.conf"])
    seen = []
    assert run_cli(make_tree(), environment={}, result_renderer=seen.append) == 0
    assert seen[0].args.config == "a.conf"
