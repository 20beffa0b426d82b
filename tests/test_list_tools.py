import pytest

from mcp_inspector_tools.list_tools import cli
from mcp_inspector_tools.models import EarlyExit, ListOptions
from mcp_inspector_tools.parsing import ArgumentError


def test_parse_defaults_to_tools() -> None:
    options = cli.parse_args(["node", "build/index.js"])
    assert options == ListOptions(server_command=("node", "build/index.js"))
    assert options.method == "tools/list"


@pytest.mark.parametrize(
    "flags, method",
    [
        (["--resources"], "resources/list"),
        (["--prompts"], "prompts/list"),
        (["--resources", "--prompts"], "prompts/list"),
        (["--prompts", "--verbose", "--resources"], "resources/list"),
    ],
)
def test_parse_method_flags(flags, method) -> None:
    assert cli.parse_args([*flags, "node"]).method == method


def test_parse_method_flag_after_server_command_is_passed_through() -> None:
    options = cli.parse_args(["node", "index.js", "--resources"])
    assert options.method == "tools/list"
    assert options.server_command == ("node", "index.js", "--resources")


def test_parse_button_flag_is_unknown_here() -> None:
    options = cli.parse_args(["--button", "press", "node"])
    assert options.server_command == ("--button", "press", "node")


def test_parse_transport_without_value() -> None:
    with pytest.raises(ArgumentError, match="--transport requires a value"):
        cli.parse_args(["--transport"])


def test_parse_version() -> None:
    assert cli.parse_args(["--prompts", "-v"]) == EarlyExit(action="version")


def test_build_local_command_drops_transport() -> None:
    options = ListOptions(server_command=("node", "build/index.js"), transport="http")
    assert cli.build_inspector_command(options) == [
        "@modelcontextprotocol/inspector",
        "--cli",
        "node",
        "build/index.js",
        "--method",
        "tools/list",
    ]


def test_build_url_forwards_transport() -> None:
    options = ListOptions(server_command=("https://x.example.com",), transport="http", method="prompts/list")
    assert cli.build_inspector_command(options) == [
        "@modelcontextprotocol/inspector",
        "--cli",
        "https://x.example.com",
        "--transport",
        "http",
        "--method",
        "prompts/list",
    ]


def test_build_url_with_default_transport() -> None:
    options = ListOptions(server_command=("http://localhost:3000/sse",))
    assert "--transport" not in cli.build_inspector_command(options)


def test_build_is_deterministic() -> None:
    options = cli.parse_args(["--resources", "--transport", "http", "https://x.example.com"])
    assert cli.build_inspector_command(options) == cli.build_inspector_command(options)
    assert cli.build_inspector_command(options) is not cli.build_inspector_command(options)


def test_main_runs_inspector(fake_run) -> None:
    assert cli.main(["--resources", "python", "-m", "my_server"]) == 0
    [(cmd, _)] = fake_run.calls
    assert cmd == [
        "/usr/bin/npx",
        "@modelcontextprotocol/inspector",
        "--cli",
        "python",
        "-m",
        "my_server",
        "--method",
        "resources/list",
    ]


def test_main_verbose_echoes_command(fake_run, capsys) -> None:
    assert cli.main(["--verbose", "node", "index.js"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Running: npx @modelcontextprotocol/inspector --cli node index.js --method tools/list"
    assert lines[1] == "---"


def test_main_uses_env_configuration(fake_run, monkeypatch) -> None:
    monkeypatch.setenv("MCP_INSPECTOR_RUNNER", "bunx")
    monkeypatch.setenv("MCP_INSPECTOR_PACKAGE", "@modelcontextprotocol/inspector@0.16.0")
    assert cli.main(["node"]) == 0
    [(cmd, _)] = fake_run.calls
    assert cmd[:2] == ["/usr/bin/bunx", "@modelcontextprotocol/inspector@0.16.0"]


def test_main_launch_failure(fake_run, capsys) -> None:
    fake_run.error = FileNotFoundError(2, "No such file or directory", "npx")
    assert cli.main(["node"]) == 1
    assert "Error running inspector:" in capsys.readouterr().err


def test_main_invalid_log_level(fake_run, monkeypatch, capsys) -> None:
    monkeypatch.setenv("MCP_INSPECTOR_LOG_LEVEL", "chatty")
    assert cli.main(["node"]) == 1
    assert "unknown log level" in capsys.readouterr().err
    assert fake_run.calls == []


def test_main_interrupted(fake_run, capsys) -> None:
    fake_run.error = KeyboardInterrupt()
    assert cli.main(["node"]) == 130
    assert "Shutting down" in capsys.readouterr().err


def test_main_missing_server_command(fake_run, capsys) -> None:
    assert cli.main(["--prompts"]) == 1
    captured = capsys.readouterr()
    assert "No server command or URL provided" in captured.err
    assert "mcp-list-tools - List tools" in captured.out
    assert fake_run.calls == []


def test_version_ignores_invalid_log_level(monkeypatch, capsys) -> None:
    monkeypatch.setenv("MCP_INSPECTOR_LOG_LEVEL", "chatty")
    monkeypatch.setattr(cli, "get_version", lambda: "1.0.0")
    assert cli.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "mcp-list-tools v1.0.0"
