"""Unit tests for the main entry point.

Tests the main() function including:
- CLI argument parsing
- Configuration loading with priority (CLI > env > config)
- Reading input from files and stdin
- Writing output to stdout and files
- Exit code handling
"""

import io
import json
from unittest.mock import patch

import pytest

from shuffle.config.environment import EnvironmentConfig
from shuffle.config.models import AppConfig, LoggingConfig, MeasurementConfig, TransformConfig
from shuffle.main import build_parser, build_request, load_runtime_config, main
from shuffle.reflow import CachingMeasurer, MonospaceMeasurer, ProportionalMeasurer


@pytest.fixture
def cli_env(tmp_path, clean_env, restore_root_logger):
    """Run the CLI from an empty directory with no .env or Shuffle variables."""
    clean_env.chdir(tmp_path)
    clean_env.setattr("shuffle.main.load_dotenv", lambda: False)
    return clean_env


class TestLoadRuntimeConfig:
    """Test suite for load_runtime_config helper."""

    def test_log_level_priority(self, tmp_path):
        """Test log level priority: CLI > env > config."""
        config_file = tmp_path / "config.yaml"

        with patch("shuffle.main.load_config") as mock_load:
            mock_app_config = AppConfig(logging=LoggingConfig(level="WARNING", format="key-value"))
            mock_env_config = EnvironmentConfig(log_level="INFO")
            mock_load.return_value = (mock_app_config, mock_env_config)

            # CLI override takes precedence
            _, env_config = load_runtime_config(config_file, "DEBUG")
            assert env_config.log_level == "DEBUG"

            # Env override takes precedence over config
            mock_env_config.log_level = "INFO"
            _, env_config = load_runtime_config(config_file, None)
            assert env_config.log_level == "INFO"

            # Config value used when no overrides
            mock_env_config.log_level = None
            _, env_config = load_runtime_config(config_file, None)
            assert env_config.log_level == "WARNING"

    def test_log_format_from_config_when_env_unset(self, tmp_path):
        with patch("shuffle.main.load_config") as mock_load:
            mock_load.return_value = (
                AppConfig(logging=LoggingConfig(format="json")),
                EnvironmentConfig(),
            )

            _, env_config = load_runtime_config(tmp_path / "config.yaml", None)

        assert env_config.log_format == "json"

    def test_log_format_env_wins(self, tmp_path):
        with patch("shuffle.main.load_config") as mock_load:
            mock_load.return_value = (
                AppConfig(logging=LoggingConfig(format="json")),
                EnvironmentConfig(log_format="key-value"),
            )

            _, env_config = load_runtime_config(tmp_path / "config.yaml", None)

        assert env_config.log_format == "key-value"

    def test_output_format_priority(self, tmp_path):
        """Test output format priority: CLI > SHUFFLE_FORMAT > config."""
        config_file = tmp_path / "config.yaml"

        with patch("shuffle.main.load_config") as mock_load:
            mock_load.side_effect = lambda _path: (
                AppConfig(transform=TransformConfig(format="html")),
                EnvironmentConfig(default_format="latex"),
            )

            app_config, _ = load_runtime_config(config_file, None, "json")
            assert app_config.transform.format == "json"

            app_config, _ = load_runtime_config(config_file, None)
            assert app_config.transform.format == "latex"

            mock_load.side_effect = lambda _path: (
                AppConfig(transform=TransformConfig(format="html")),
                EnvironmentConfig(),
            )
            app_config, _ = load_runtime_config(config_file, None)
            assert app_config.transform.format == "html"


class TestBuildRequest:
    """Test combining CLI flags with configuration."""

    def test_config_values_used_by_default(self):
        args = build_parser().parse_args([])
        app_config = AppConfig()

        request = build_request(args, app_config, "text")

        assert request.text == "text"
        assert request.format == "markdown"
        assert request.preserve_margins is True
        assert request.render_width == 1125
        assert request.font_size == 16
        assert request.horizontal_padding == 32
        assert request.compact is None
        assert isinstance(request.measurer, ProportionalMeasurer)

    def test_flags_override_config(self):
        args = build_parser().parse_args(
            [
                "--no-preserve-margins",
                "--width", "640",
                "--font-size", "20",
                "--padding", "10",
                "--measure", "monospace",
                "--pretty",
            ]
        )
        app_config = AppConfig(transform=TransformConfig(compact=True))

        request = build_request(args, app_config, "text")

        assert request.preserve_margins is False
        assert request.render_width == 640
        assert request.font_size == 20
        assert request.horizontal_padding == 10
        assert request.compact is False
        assert isinstance(request.measurer, MonospaceMeasurer)

    def test_cached_measurer_from_config(self):
        args = build_parser().parse_args([])
        app_config = AppConfig(measurement=MeasurementConfig(cache=True))

        request = build_request(args, app_config, "text")

        assert isinstance(request.measurer, CachingMeasurer)

    def test_compact_and_pretty_are_exclusive(self, capsys):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--compact", "--pretty"])


class TestMain:
    """Test suite for main() entry point."""

    def test_file_to_file(self, tmp_path, cli_env):
        """Test reading a file and writing the export to another file."""
        source = tmp_path / "entry.txt"
        source.write_text("Hello world\n\n\n\nThis is Shuffle.", encoding="utf-8")
        destination = tmp_path / "exports" / "entry.tex"

        exit_code = main(
            [str(source), "--format", "latex", "--no-preserve-margins", "--output", str(destination)]
        )

        assert exit_code == 0
        assert destination.read_text(encoding="utf-8") == (
            "\\begin{document}\nHello world\n\nThis is Shuffle.\n\\end{document}"
        )

    def test_stdin_to_stdout(self, cli_env, capsys):
        """Test reading stdin and printing the export."""
        cli_env.setattr("sys.stdin", io.StringIO("a\nb"))

        exit_code = main(["--format", "json", "--no-preserve-margins"])

        assert exit_code == 0
        assert capsys.readouterr().out == '{"content":"a\\nb"}'

    def test_stdout_and_file_receive_same_output(self, tmp_path, cli_env, capsys):
        """Test stdout gets exactly what --output writes, with no extra newline."""
        source = tmp_path / "entry.txt"
        source.write_text("first\nsecond", encoding="utf-8")
        destination = tmp_path / "entry.md"
        args = [str(source), "--format", "markdown", "--no-preserve-margins"]

        assert main(args) == 0
        stdout = capsys.readouterr().out
        assert main(args + ["--output", str(destination)]) == 0

        assert stdout == "first  \nsecond  "
        assert destination.read_text(encoding="utf-8") == stdout

    def test_dash_reads_stdin(self, cli_env, capsys):
        cli_env.setattr("sys.stdin", io.StringIO("a\nb"))

        exit_code = main(["-", "--format", "html"])

        assert exit_code == 0
        # Reflow turns each logical line into its own paragraph
        assert capsys.readouterr().out == "<div>a<br><br>b</div>"

    def test_reflow_with_monospace_measurer(self, tmp_path, cli_env, capsys):
        """Test on-screen wrapping is reproduced from the CLI width and font size."""
        source = tmp_path / "entry.txt"
        source.write_text("the quick brown fox jumps over the lazy dog", encoding="utf-8")

        # (300 - 32) / (0.6 * 16) leaves room for 27 characters per line
        exit_code = main(
            [str(source), "--format", "html", "--width", "300", "--font-size", "16", "--measure", "monospace"]
        )

        assert exit_code == 0
        assert capsys.readouterr().out == "<div>the quick brown fox jumps<br>over the lazy dog</div>"

    def test_compact_flag(self, tmp_path, cli_env, capsys):
        source = tmp_path / "entry.txt"
        source.write_text("one\ntwo", encoding="utf-8")

        exit_code = main([str(source), "--format", "json-separated", "--compact"])

        assert exit_code == 0
        assert capsys.readouterr().out == '{"line 1":"one","line 2":"two"}'

    def test_format_from_environment(self, tmp_path, cli_env, capsys):
        """Test SHUFFLE_FORMAT applies when --format is not given."""
        cli_env.setenv("SHUFFLE_FORMAT", "html")
        source = tmp_path / "entry.txt"
        source.write_text("x", encoding="utf-8")

        assert main([str(source)]) == 0
        assert capsys.readouterr().out == "<div>x</div>"

    def test_config_file_settings(self, tmp_path, cli_env, capsys):
        """Test transform defaults come from the config file."""
        config_file = tmp_path / "shuffle.yaml"
        config_file.write_text("transform:\n  format: json\n  preserve_margins: false\n")
        source = tmp_path / "entry.txt"
        source.write_text("x", encoding="utf-8")

        assert main([str(source), "--config", str(config_file)]) == 0
        assert json.loads(capsys.readouterr().out) == {"content": "x"}

    def test_missing_config_file(self, tmp_path, cli_env, capsys):
        """Test that an explicit missing config file exits with 1."""
        exit_code = main(["--config", str(tmp_path / "missing.yaml")])

        assert exit_code == 1
        assert "Configuration Error" in capsys.readouterr().err

    def test_invalid_environment(self, tmp_path, cli_env, capsys):
        cli_env.setenv("LOG_LEVEL", "LOUD")

        assert main([str(tmp_path / "entry.txt")]) == 1
        assert "LOG_LEVEL" in capsys.readouterr().err

    def test_missing_input_file(self, tmp_path, cli_env, capsys):
        """Test that an unreadable input exits with 1."""
        exit_code = main([str(tmp_path / "missing.txt")])

        assert exit_code == 1
        assert "I/O error" in capsys.readouterr().err

    def test_keyboard_interrupt(self, tmp_path, cli_env, capsys):
        source = tmp_path / "entry.txt"
        source.write_text("x", encoding="utf-8")

        with patch("shuffle.main.read_input", side_effect=KeyboardInterrupt):
            exit_code = main([str(source)])

        assert exit_code == 130

    def test_invalid_format_flag(self, cli_env):
        with pytest.raises(SystemExit) as exc_info:
            main(["--format", "rtf"])

        assert exc_info.value.code == 2


class TestCheckConfig:
    """Test --check-config mode."""

    def test_valid_config(self, tmp_path, cli_env, capsys):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("render:\n  width: 900\n")

        assert main(["--check-config", "--config", str(config_file)]) == 0
        assert "is valid" in capsys.readouterr().out

    def test_invalid_config(self, tmp_path, cli_env, capsys):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("render:\n  width: 90\n")

        assert main(["--check-config", "--config", str(config_file)]) == 1
        assert "validation failed" in capsys.readouterr().out

    def test_requires_config_path(self, cli_env, capsys):
        assert main(["--check-config"]) == 2
        assert "--check-config requires --config" in capsys.readouterr().err
