import json
import os

from click.testing import CliRunner

from outbound._cli import cli
from outbound._cli.cli_render import build_request


class TestRender:
    def test_render_headers(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            [
                "render",
                "GET",
                "http://x/y",
                "-H",
                "Accept: text/plain",
                "-H",
                "Accept: text/html",
            ],
        )

        assert result.exit_code == 0
        assert (
            result.output
            == "GET http://x/y HTTP/1.1\nAccept: text/plain\nAccept: text/html\n"
        )

    def test_render_text_body(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["render", "POST", "http://x/y", "-d", "hi", "--charset", "utf-8"]
        )

        assert result.exit_code == 0
        assert result.output == "POST http://x/y HTTP/1.1\n\nhi"

    def test_render_body_without_charset_is_binary(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "POST", "http://x/y", "-d", "hi"])

        assert result.exit_code == 0
        assert result.output == "POST http://x/y HTTP/1.1\n\nBinary data"

    def test_render_rejects_malformed_header(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "GET", "http://x/y", "-H", "Accept"])

        assert result.exit_code == 2
        assert "expected 'Name: value'" in result.output

    def test_render_rejects_unknown_charset(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["render", "POST", "http://x/y", "-d", "hi", "--charset", "nope"]
        )

        assert result.exit_code == 2

    def test_render_rejects_empty_method(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "", "http://x/y"])

        assert result.exit_code == 2
        assert "method of http://x/y" in result.output


class TestBuildRequest:
    def test_charset_without_data_is_dropped(self) -> None:
        request = build_request("GET", "http://x/y", (), None, "utf-8")

        assert request.body is None
        assert request.charset is None

    def test_charset_with_data_is_kept(self) -> None:
        request = build_request("POST", "http://x/y", (), "hi", "utf-8")

        assert request.body == b"hi"
        assert request.charset == "utf-8"

    def test_repeated_headers_are_grouped(self) -> None:
        request = build_request(
            "GET", "http://x/y", ("Accept: a", "X-Id: 1", "Accept: b"), None, None
        )

        assert dict(request.headers) == {"Accept": ("a", "b"), "X-Id": ("1",)}


class TestOptions:
    def test_defaults(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["options"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "connect_timeout_millis": 10000,
            "read_timeout_millis": 60000,
        }

    def test_env_file(self, runner: CliRunner, temp_dir: str) -> None:
        env_file = os.path.join(temp_dir, ".env")
        with open(env_file, "w") as f:
            f.write("OUTBOUND_READ_TIMEOUT_MILLIS=0\n")

        result = runner.invoke(cli, ["options", "--env-file", env_file])

        assert result.exit_code == 0
        assert json.loads(result.output)["read_timeout_millis"] == 0

    def test_invalid_configuration(self, runner: CliRunner, monkeypatch) -> None:
        monkeypatch.setenv("OUTBOUND_CONNECT_TIMEOUT_MILLIS", "-5")

        result = runner.invoke(cli, ["options"])

        assert result.exit_code == 1
        assert "Invalid timeout configuration" in result.output
