import pytest

from argtree.command import category, leaf
from argtree.context import InvocationContext
from argtree.dispatcher import DispatchResult, Dispatcher
from argtree.exceptions import (
    CommandTreeError,
    InvalidValueError,
    Location,
    MissingRequiredArgumentError,
    UnknownCommandError,
    UnknownFlagError,
)
from argtree.signals import HelpRequested
from argtree.spec import ParsedArguments, flag, option, required


@pytest.fixture
def calls():
    return []


@pytest.fixture
def tree(calls):
    def serve(args, context):
        calls.append(("serve", args, context))
        return "served"

    return category(
        "tool",
        [
            leaf("serve", [flag("daemon").short("d"), option("port", int, 8080)], serve),
            category(
                "db",
                [
                    category(
                        "migrate",
                        [leaf("up", [option("steps", "u32", 1)]), leaf("down")],
                        help="Schema migrations",
                    ),
                    leaf("seed", [required("file")], hidden=True),
                ],
            ),
        ],
    )


def test_nested_dispatch(tree):
    result = Dispatcher(tree).dispatch(["db", "migrate", "up", "--steps", "5"], {})
    assert isinstance(result, DispatchResult)
    assert result.path == "db migrate up"
    assert result.node.name == "up"
    assert result.args["steps"] == 5
    assert result.handled is False
    assert result.result is None


def test_handler_is_called(tree, calls):
    result = Dispatcher(tree).dispatch(["serve", "-d", "--port", "9000"], {})
    assert result.handled is True
    assert result.result == "served"
    assert len(calls) == 1
    name, args, context = calls[0]
    assert name == "serve"
    assert isinstance(args, ParsedArguments)
    assert args.as_dict() == {"daemon": True, "port": 9000}
    assert isinstance(context, InvocationContext)
    assert context.path == "serve"
    assert context.args is args
    assert context.tokens == ("-d", "--port", "9000")


def test_context_records_result_and_timing():
    seen = {}

    def handler(args, context):
        context.extra["key"] = "value"
        seen["context"] = context
        return 7

    Dispatcher(leaf("run", [], handler)).dispatch([], {})
    context = seen["context"]
    assert context.result == 7
    assert context.success
    assert context.status == "OK"
    assert context.duration is not None
    assert context.extra == {"key": "value"}
    assert "status=OK" in context.to_log_line()


def test_handler_errors_propagate_unchanged():
    seen = {}

    def handler(args, context):
        seen["context"] = context
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        Dispatcher(leaf("run", [], handler)).dispatch([], {})
    context = seen["context"]
    assert isinstance(context.exception, RuntimeError)
    assert context.status == "ERROR"


def test_empty_tokens_request_help_for_root(tree):
    with pytest.raises(HelpRequested) as excinfo:
        Dispatcher(tree).dispatch([], {})
    assert excinfo.value.node is tree
    assert excinfo.value.path == ""
    assert excinfo.value.spec is None


def test_category_without_subcommand_requests_help(tree):
    with pytest.raises(HelpRequested) as excinfo:
        Dispatcher(tree).dispatch(["db", "migrate"], {})
    assert excinfo.value.node.name == "migrate"
    assert excinfo.value.path == "db migrate"


@pytest.mark.parametrize("marker", ["--help", "-h"])
def test_help_at_category(tree, marker):
    with pytest.raises(HelpRequested) as excinfo:
        Dispatcher(tree).dispatch(["db", marker], {})
    assert excinfo.value.node.name == "db"
    assert excinfo.value.path == "db"


def test_help_at_leaf_skips_required_check(tree):
    with pytest.raises(HelpRequested) as excinfo:
        Dispatcher(tree).dispatch(["db", "seed", "--help"], {})
    signal = excinfo.value
    assert signal.node.name == "seed"
    assert signal.path == "db seed"
    assert signal.spec is signal.node.spec


def test_unknown_command(tree):
    with pytest.raises(UnknownCommandError) as excinfo:
        Dispatcher(tree).dispatch(["db", "migrat", "up"], {})
    error = excinfo.value
    assert error.token == "migrat"
    assert error.suggestion == "migrate"
    assert error.alternatives == ("migrate", "seed")
    assert error.path == "db"
    assert error.location == Location(1, 0)


def test_unknown_command_without_suggestion(tree):
    with pytest.raises(UnknownCommandError) as excinfo:
        Dispatcher(tree).dispatch(["deploy"], {})
    assert excinfo.value.suggestion is None
    assert excinfo.value.alternatives == ("serve", "db")


def test_flag_at_category_is_unknown_command(tree):
    with pytest.raises(UnknownCommandError):
        Dispatcher(tree).dispatch(["--daemon", "serve"], {})


def test_leaf_errors_carry_path_and_absolute_location(tree):
    dispatcher = Dispatcher(tree)
    with pytest.raises(UnknownFlagError) as excinfo:
        dispatcher.dispatch(["db", "migrate", "up", "--step", "5"], {})
    error = excinfo.value
    assert error.path == "db migrate up"
    assert error.suggestion == "steps"
    assert error.location == Location(3, 0)

    with pytest.raises(InvalidValueError) as excinfo:
        dispatcher.dispatch(["serve", "--port=abc"], {})
    assert excinfo.value.location == Location(1, 7)


def test_leaf_missing_required(tree):
    with pytest.raises(MissingRequiredArgumentError) as excinfo:
        Dispatcher(tree).dispatch(["db", "seed"], {})
    assert excinfo.value.path == "db seed"


def test_environment_reaches_leaf():
    root = category("tool", [leaf("serve", [option("port", int, 8080).env("APP_PORT")])])
    result = Dispatcher(root).dispatch(["serve"], {"APP_PORT": "9000"})
    assert result.args.port == 9000


def test_leaf_root():
    root = leaf("greet", [option("name", str, "World")])
    result = Dispatcher(root).dispatch(["--name", "Ada"], {})
    assert result.path == ""
    assert result.args.name == "Ada"
    with pytest.raises(HelpRequested) as excinfo:
        Dispatcher(root).dispatch(["-h"], {})
    assert excinfo.value.node is root


def test_dispatcher_is_reusable(tree):
    dispatcher = Dispatcher(tree)
    first = dispatcher.dispatch(["db", "migrate", "up"], {})
    second = dispatcher.dispatch(["db", "migrate", "up", "--steps", "3"], {})
    assert first.args.steps == 1
    assert second.args.steps == 3


def test_dispatcher_requires_node():
    with pytest.raises(CommandTreeError):
        Dispatcher("tool")  # type: ignore[arg-type]
