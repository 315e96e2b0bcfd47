"""
Tests for the hashmux CLI commands.

Uses Click's CliRunner against the main group, so bootstrap and
config discovery run exactly as they do from the console script.
"""

import hashlib
import json

import pytest
from click.testing import CliRunner

from hashmux.cli import cli

HELLO_MD5 = "5d41402abc4b2a76b9719d911017c592"
HELLO_SHA1 = "aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d"
HELLO_SHA256 = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"

# What the shell passes for argv bytes b"a\xff" under surrogateescape
RAW_ARG = "a\udcff"
RAW_ARG_BYTES = b"a\xff"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def hello_file(isolated_app):
    path = isolated_app / "hello.txt"
    path.write_bytes(b"hello")
    return path


class TestGroup:
    """Tests for the top-level group."""

    def test_no_subcommand_shows_help(self, runner):
        """Invoking without a command prints help and succeeds."""
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Commands:" in result.output

    def test_version(self, runner):
        """--version prints the program name."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "hashmux" in result.output

    def test_missing_config_file(self, runner):
        """An explicit --config that does not exist fails cleanly."""
        result = runner.invoke(cli, ["--config", "missing.toml", "list"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_invalid_config_value(self, runner, isolated_app):
        """A config value failing validation fails cleanly."""
        path = isolated_app / "bad.toml"
        path.write_text("[hash]\nchunk_size = -1\n")
        result = runner.invoke(cli, ["--config", str(path), "list"])
        assert result.exit_code == 1
        assert "Invalid hashmux configuration" in result.output


class TestListCommand:
    """Tests for 'hashmux list'."""

    def test_lists_defaults(self, runner):
        """Default algorithms appear in registration order."""
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert [line.split()[0] for line in lines] == ["md5", "sha1", "sha256"]
        assert lines[1].split() == ["sha1", "SHA-1", "40"]

    def test_lists_configured_extras(self, runner, isolated_app):
        """hash.extra algorithms are appended."""
        path = isolated_app / "extras.toml"
        path.write_text('[hash]\nextra = ["sha512", "blake3"]\n')
        result = runner.invoke(cli, ["--config", str(path), "list"])
        assert result.exit_code == 0
        names = [line.split()[0] for line in result.output.splitlines()]
        assert names == ["md5", "sha1", "sha256", "sha512", "blake3"]


class TestSumCommand:
    """Tests for 'hashmux sum'."""

    def test_default_algorithms_text(self, runner, hello_file):
        """Without -a the configured defaults are used."""
        result = runner.invoke(cli, ["sum", "hello.txt"])
        assert result.exit_code == 0
        assert result.output == (
            f"hello.txt\nmd5:{HELLO_MD5}\nsha1:{HELLO_SHA1}\nsha256:{HELLO_SHA256}\n"
        )

    def test_selected_algorithms(self, runner, hello_file):
        """-a picks algorithms by name or alias."""
        result = runner.invoke(cli, ["sum", "-a", "SHA-256", "hello.txt"])
        assert result.exit_code == 0
        assert result.output == f"hello.txt\nsha256:{HELLO_SHA256}\n"

    def test_multiple_files(self, runner, hello_file, isolated_app):
        """Blocks for several files are separated by a blank line."""
        (isolated_app / "empty.bin").write_bytes(b"")
        result = runner.invoke(cli, ["sum", "-a", "md5", "hello.txt", "empty.bin"])
        assert result.exit_code == 0
        assert result.output == (
            f"hello.txt\nmd5:{HELLO_MD5}\n\nempty.bin\nmd5:{hashlib.md5(b'').hexdigest()}\n"
        )

    def test_json_output(self, runner, hello_file):
        """--json emits a mapping of path to digests."""
        result = runner.invoke(cli, ["sum", "--json", "-a", "md5", "-a", "sha1", "hello.txt"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "hello.txt": {"md5": HELLO_MD5, "sha1": HELLO_SHA1}
        }

    def test_stdin(self, runner):
        """'-' reads standard input."""
        result = runner.invoke(cli, ["sum", "-a", "sha1", "-"], input=b"hello")
        assert result.exit_code == 0
        assert result.output == f"-\nsha1:{HELLO_SHA1}\n"

    def test_defaults_from_discovered_config(self, runner, hello_file, isolated_app):
        """hash.default from .hashmux/config.toml applies."""
        config_dir = isolated_app / ".hashmux"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text('[hash]\ndefault = ["sha256"]\n')
        result = runner.invoke(cli, ["sum", "hello.txt"])
        assert result.exit_code == 0
        assert result.output == f"hello.txt\nsha256:{HELLO_SHA256}\n"

    def test_unknown_algorithm(self, runner, hello_file):
        """An unregistered algorithm is a usage error."""
        result = runner.invoke(cli, ["sum", "-a", "sha512", "hello.txt"])
        assert result.exit_code == 2
        assert "unknown algorithm 'sha512'" in result.output

    def test_missing_file(self, runner):
        """A missing file is rejected by argument validation."""
        result = runner.invoke(cli, ["sum", "nope.bin"])
        assert result.exit_code == 2


class TestCheckCommand:
    """Tests for 'hashmux check'."""

    def test_match(self, runner, hello_file):
        """A matching digest prints OK."""
        result = runner.invoke(cli, ["check", "-a", "md5", "hello.txt", HELLO_MD5.upper()])
        assert result.exit_code == 0
        assert result.output == "hello.txt: OK\n"

    def test_mismatch(self, runner, hello_file):
        """A wrong digest prints FAILED and exits 1."""
        result = runner.invoke(cli, ["check", "-a", "sha1", "hello.txt", "0" * 40])
        assert result.exit_code == 1
        assert result.output == "hello.txt: FAILED (sha1)\n"

    def test_algorithm_required(self, runner, hello_file):
        """-a is mandatory."""
        result = runner.invoke(cli, ["check", "hello.txt", HELLO_MD5])
        assert result.exit_code == 2


class TestStringCommand:
    """Tests for 'hashmux string'."""

    def test_default_md5(self, runner):
        """Without -a the MD5 of the text is printed."""
        result = runner.invoke(cli, ["string", "hello"])
        assert result.exit_code == 0
        assert result.output == f"md5:{HELLO_MD5}\n"

    def test_selected_algorithms_sorted(self, runner):
        """Chosen algorithms are rendered sorted by name."""
        result = runner.invoke(cli, ["string", "-a", "sha1", "-a", "md5", "hello"])
        assert result.exit_code == 0
        assert result.output == f"md5:{HELLO_MD5}\nsha1:{HELLO_SHA1}\n"


class TestCliEdgeCases:
    """Inputs from the shell that need special handling."""

    def test_sum_repeated_path_listed_each_time(self, runner, hello_file):
        """Every FILE argument gets its own block, even when repeated."""
        result = runner.invoke(cli, ["sum", "-a", "md5", "hello.txt", "hello.txt"])
        assert result.exit_code == 0
        assert result.output == f"hello.txt\nmd5:{HELLO_MD5}\n\nhello.txt\nmd5:{HELLO_MD5}\n"

    def test_sum_defaults_from_environment(self, runner, hello_file, monkeypatch):
        """HASHMUX_HASH__DEFAULT picks the algorithms used without -a."""
        monkeypatch.setenv("HASHMUX_HASH__DEFAULT", "sha256")
        result = runner.invoke(cli, ["sum", "hello.txt"])
        assert result.exit_code == 0
        assert result.output == f"hello.txt\nsha256:{HELLO_SHA256}\n"

    def test_invalid_environment_value(self, runner, monkeypatch):
        """A bad environment value is reported without a traceback."""
        monkeypatch.setenv("HASHMUX_HASH", "not-json")
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 1
        assert "Invalid hashmux configuration" in result.output

    def test_string_with_undecodable_bytes(self, runner):
        """Surrogate-escaped argv bytes are hashed as the original bytes."""
        result = runner.invoke(cli, ["string", RAW_ARG])
        assert result.exit_code == 0
        assert result.output == f"md5:{hashlib.md5(RAW_ARG_BYTES).hexdigest()}\n"

    def test_string_with_undecodable_bytes_and_algorithms(self, runner):
        """The same bytes are used when algorithms are chosen."""
        result = runner.invoke(cli, ["string", "-a", "sha1", RAW_ARG])
        assert result.exit_code == 0
        assert result.output == f"sha1:{hashlib.sha1(RAW_ARG_BYTES).hexdigest()}\n"

    def test_string_with_unencodable_text(self, runner):
        """Text that maps to no bytes at all is a usage error."""
        result = runner.invoke(cli, ["string", "a\ud800"])
        assert result.exit_code == 2
        assert "cannot be encoded" in result.output
