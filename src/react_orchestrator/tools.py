# tools.py
# Tool capability contract and the built-in tool implementations.
#
# The engine never calls these directly; it resolves them through a
# CapabilityRegistry. Each tool receives the raw, model-authored argument
# string and either returns output text or raises. Sandboxing is not done
# here; callers that need it must wrap or replace these tools.

import json
import os
import subprocess
from typing import Protocol, runtime_checkable


@runtime_checkable
class Tool(Protocol):
    """A named capability the model may invoke with an opaque argument string."""

    name: str
    description: str

    def execute(self, args: str) -> str: ...


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)


class CalculatorTool:
    name = "Calculator"
    description = 'Evaluates one binary expression "<left> <op> <right>" with op in + - * /.'

    _OPERATORS = {
        "+": lambda a, b: a + b,
        "-": lambda a, b: a - b,
        "*": lambda a, b: a * b,
        "/": lambda a, b: a / b,
    }

    def execute(self, args: str) -> str:
        parts = args.split()
        if len(parts) != 3:
            raise ValueError(f"Invalid expression: {args!r}. Expected '<left> <op> <right>'.")

        left, op, right = parts
        if op not in self._OPERATORS:
            raise ValueError(f"Unknown operator: {op}")
        return _format_number(self._OPERATORS[op](float(left), float(right)))


# ---------------------------------------------------------------------------
# Filesystem
# ---------------------------------------------------------------------------


class CodeWriterTool:
    name = "CodeWriter"
    description = 'Writes a file. Args: "<path> <json-encoded-content>".'

    def execute(self, args: str) -> str:
        parts = args.strip().split(" ", 1)
        if len(parts) != 2:
            raise ValueError("Invalid arguments. Expected: <path> <json-encoded-content>")

        path, content_json = parts
        content = json.loads(content_json)
        if not isinstance(content, str):
            raise ValueError("File content must be a JSON-encoded string.")

        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(content)
        return f"Successfully wrote to {path}"


class FileReaderTool:
    name = "FileReader"
    description = "Reads a text file. Args: the file path."

    def execute(self, args: str) -> str:
        with open(args.strip(), encoding="utf-8") as fh:
            return fh.read()


class DirectoryListerTool:
    name = "DirectoryLister"
    description = "Lists the entries of a directory, one per line. Args: the directory path."

    def execute(self, args: str) -> str:
        return "\n".join(sorted(os.listdir(args.strip())))


# ---------------------------------------------------------------------------
# Process
# ---------------------------------------------------------------------------


class SystemTool:
    name = "System"
    description = "Runs a shell command and returns stdout and stderr. Args: the command."

    def execute(self, args: str) -> str:
        completed = subprocess.run(args, shell=True, capture_output=True, text=True)
        output = f"{completed.stdout}\n{completed.stderr}"
        if completed.returncode != 0:
            raise RuntimeError(
                f"Command failed with exit code {completed.returncode}: {args}\nOutput:\n{output}"
            )
        return output


# ---------------------------------------------------------------------------
# Network
# ---------------------------------------------------------------------------


class WebScraperTool:
    name = "WebScraper"
    description = "Fetches a URL and returns the text of its <body>. Args: the URL."

    def __init__(self, timeout: float = 10.0) -> None:
        self._timeout = timeout

    def execute(self, args: str) -> str:
        import httpx
        from bs4 import BeautifulSoup

        response = httpx.get(args.strip(), timeout=self._timeout, follow_redirects=True)
        response.raise_for_status()

        body = BeautifulSoup(response.text, "html.parser").body
        if body is None:
            return ""
        return body.get_text("\n", strip=True)


class WebSearchTool:
    name = "WebSearch"
    description = "Searches the web and returns the top results. Args: the query."

    def __init__(self, max_results: int = 4) -> None:
        self._max_results = max_results

    def execute(self, args: str) -> str:
        from ddgs import DDGS

        query = args.strip()
        if not query:
            raise ValueError("No query provided.")

        # Coerce to a list so the search actually runs here
        results = list(DDGS().text(query, max_results=self._max_results))
        if not results:
            return "No results found."

        lines = []
        for r in results:
            lines.append(f"[{r.get('title', 'No Title')}]\n{r.get('body', '')}\nSource: {r.get('href', '')}")
        return "\n\n".join(lines)


def default_tools() -> list[Tool]:
    return [
        CalculatorTool(),
        CodeWriterTool(),
        FileReaderTool(),
        DirectoryListerTool(),
        SystemTool(),
        WebScraperTool(),
        WebSearchTool(),
    ]
