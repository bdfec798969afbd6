import json
from unittest.mock import MagicMock, patch

import pytest

from react_orchestrator.tools import (
    CalculatorTool,
    CodeWriterTool,
    DirectoryListerTool,
    FileReaderTool,
    SystemTool,
    Tool,
    WebScraperTool,
    WebSearchTool,
    default_tools,
)

# ---------------------------------------------------------------------------
# Calculator
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "args, expected",
    [("3 + 5", "8"), ("4 * 8", "32"), ("10 - 12", "-2"), ("7 / 2", "3.5"), ("1.5 * 2", "3")],
)
def test_calculator(args, expected):
    assert CalculatorTool().execute(args) == expected


@pytest.mark.parametrize("args", ["3 +", "3 ^ 5", "three + 5", "1 + 2 + 3"])
def test_calculator_rejects_bad_expressions(args):
    with pytest.raises(ValueError):
        CalculatorTool().execute(args)


def test_calculator_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        CalculatorTool().execute("1 / 0")


# ---------------------------------------------------------------------------
# Filesystem
# ---------------------------------------------------------------------------


def test_code_writer_round_trip(tmp_path):
    target = tmp_path / "generated" / "main.py"
    content = 'print("hello world")\n'
    args = f"{target} {json.dumps(content)}"

    result = CodeWriterTool().execute(args)

    assert result == f"Successfully wrote to {target}"
    assert target.read_text(encoding="utf-8") == content
    assert FileReaderTool().execute(f"  {target}\n") == content


@pytest.mark.parametrize("args", ["only-a-path", "out.txt not-json", "out.txt 42"])
def test_code_writer_invalid_args(tmp_path, monkeypatch, args):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValueError):
        CodeWriterTool().execute(args)


def test_file_reader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileReaderTool().execute(str(tmp_path / "nope.txt"))


def test_directory_lister(tmp_path):
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "sub").mkdir()

    assert DirectoryListerTool().execute(str(tmp_path)) == "a.txt\nb.txt\nsub"


# ---------------------------------------------------------------------------
# Process
# ---------------------------------------------------------------------------


def test_system_tool_success():
    assert "hello system" in SystemTool().execute("echo 'hello system'")


def test_system_tool_failure():
    with pytest.raises(RuntimeError, match="exit code"):
        SystemTool().execute("some_non_existent_command_for_tests")


# ---------------------------------------------------------------------------
# Network
# ---------------------------------------------------------------------------


@patch("httpx.get")
def test_web_scraper_extracts_body_text(mock_get):
    mock_get.return_value = MagicMock(
        text="<html><head><title>T</title></head><body><h1>Hello</h1><p>World</p></body></html>"
    )

    result = WebScraperTool().execute(" https://example.com ")

    assert result == "Hello\nWorld"
    assert mock_get.call_args.args[0] == "https://example.com"


@patch("httpx.get")
def test_web_scraper_without_body(mock_get):
    mock_get.return_value = MagicMock(text="<html><head><title>T</title></head></html>")
    assert WebScraperTool().execute("https://example.com") == ""


@patch("ddgs.DDGS")
def test_web_search_success(mock_ddgs_cls):
    mock_ddgs_cls.return_value.text.return_value = [
        {"title": "Result 1", "body": "Body 1", "href": "http://1.com"}
    ]

    result = WebSearchTool().execute("test")

    assert "Result 1" in result
    assert "Body 1" in result
    assert "http://1.com" in result


@patch("ddgs.DDGS")
def test_web_search_empty_query(mock_ddgs_cls):
    with pytest.raises(ValueError, match="No query"):
        WebSearchTool().execute("   ")
    mock_ddgs_cls.assert_not_called()


@patch("ddgs.DDGS")
def test_web_search_no_results(mock_ddgs_cls):
    mock_ddgs_cls.return_value.text.return_value = []
    assert WebSearchTool().execute("ghost") == "No results found."


@patch("ddgs.DDGS")
def test_web_search_failure_propagates(mock_ddgs_cls):
    mock_ddgs_cls.return_value.text.side_effect = Exception("Network timeout")
    with pytest.raises(Exception, match="Network timeout"):
        WebSearchTool().execute("crash")


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


def test_default_tools_satisfy_contract():
    tools = default_tools()
    names = [tool.name for tool in tools]

    assert len(set(names)) == len(names)
    assert "Finish" not in names
    assert all(isinstance(tool, Tool) for tool in tools)
