"""
CLI Behavior Tests

Verifies that command-line interface behaves correctly,
parses arguments properly, and produces expected outputs.

Test data and expected values are defined in tests/test_config.py.
Update that file to change test parameters without modifying this script.
"""

import json

import pytest
from unittest.mock import patch, Mock

from ideagen.exceptions import GenerationError
from ideagen.models.idea import IdeaDraft
from ideagen.services.idea_generator import IdeaGenerator
from main import create_parser, generate_once, main

# Import externalized test configuration
from tests.test_config import EXPECTED, MESSAGES, get_idea_payload


EXIT_OK = EXPECTED["cli"]["exit_code_success"]
EXIT_FAIL = EXPECTED["cli"]["exit_code_failure"]
EXIT_ARGPARSE = EXPECTED["cli"]["exit_code_argparse_error"]


@pytest.fixture
def cli_generator():
    """A mock generator returning the first sample idea."""
    generator = Mock(spec=IdeaGenerator)
    generator.generate.return_value = IdeaDraft.from_dict(get_idea_payload(0))
    return generator


@pytest.mark.cli_behavior
class TestArgumentParsing:
    """Tests for correct argument parsing."""

    def test_defaults(self):
        """
        GIVEN: CLI invoked with no arguments
        WHEN: Arguments are parsed
        THEN: Server options are left for config to fill in
        """
        args = create_parser().parse_args([])

        assert args.host is None
        assert args.port is None
        assert args.generate is None
        assert args.verbose is False
        assert args.show_config is False

    def test_port_parsed_as_integer(self):
        """
        GIVEN: CLI invoked with --port 8080
        WHEN: Arguments are parsed
        THEN: port is integer 8080
        """
        args = create_parser().parse_args(["--port", "8080"])

        assert args.port == 8080
        assert isinstance(args.port, int)

    def test_short_flags(self):
        """
        GIVEN: CLI invoked with -p, -g and -v
        WHEN: Arguments are parsed
        THEN: Each short flag maps to its long option
        """
        args = create_parser().parse_args(["-p", "9000", "-g", "pets", "-v"])

        assert args.port == 9000
        assert args.generate == "pets"
        assert args.verbose is True

    def test_host_parsed(self):
        args = create_parser().parse_args(["--host", "127.0.0.1"])

        assert args.host == "127.0.0.1"


@pytest.mark.cli_behavior
class TestInvalidArguments:
    """Tests for handling of invalid arguments."""

    def test_non_integer_port_rejected(self):
        """
        GIVEN: CLI invoked with --port abc
        WHEN: Arguments are parsed
        THEN: argparse exits with its usage error code
        """
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--port", "abc"])

        assert exc_info.value.code == EXIT_ARGPARSE

    def test_unknown_flag_rejected(self):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--dry-run"])

        assert exc_info.value.code == EXIT_ARGPARSE

    def test_generate_requires_topic_value(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--generate"])


@pytest.mark.cli_behavior
class TestHelpOutput:
    """Tests for help text."""

    def test_help_lists_options(self, capsys):
        """
        GIVEN: CLI invoked with --help
        WHEN: Help is printed
        THEN: All main options are documented and exit code is 0
        """
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--help"])

        assert exc_info.value.code == EXIT_OK
        output = capsys.readouterr().out
        for flag in MESSAGES["cli_help"].values():
            assert flag in output, f"Help should mention {flag}"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])

        assert exc_info.value.code == EXIT_OK
        assert "1.0.0" in capsys.readouterr().out


@pytest.mark.cli_behavior
class TestShowConfig:
    """Tests for --show-config."""

    def test_show_config_valid(self, capsys):
        with patch("main.validate_config", return_value=[]):
            exit_code = main(["--show-config"])

        assert exit_code == EXIT_OK
        assert "Configuration valid" in capsys.readouterr().out

    def test_show_config_invalid(self, capsys):
        """
        GIVEN: Configuration has problems
        WHEN: --show-config is used
        THEN: Problems are listed and exit code is 1
        """
        problems = ["PORT must be between 1 and 65535, got 0"]
        with patch("main.validate_config", return_value=problems):
            exit_code = main(["--show-config"])

        assert exit_code == EXIT_FAIL
        assert problems[0] in capsys.readouterr().out

    def test_show_config_does_not_start_server(self):
        with patch("main.validate_config", return_value=[]), \
             patch("web.app.serve") as mock_serve:
            main(["--show-config"])

        mock_serve.assert_not_called()


@pytest.mark.cli_behavior
class TestGenerateOnce:
    """Tests for --generate."""

    def test_prints_idea_as_json(self, capsys, cli_generator):
        """
        GIVEN: A working generator
        WHEN: generate_once() is called with a topic
        THEN: The idea is printed as JSON and exit code is 0
        """
        exit_code = generate_once("  pets  ", generator=cli_generator)

        assert exit_code == EXIT_OK
        cli_generator.generate.assert_called_once_with("  pets  ")
        printed = json.loads(capsys.readouterr().out)
        assert printed["name"] == "PawPal"
        assert len(printed["features"]) == EXPECTED["generation"]["feature_count"]
        assert "locationRationale" in printed

    @pytest.mark.parametrize("topic", ["", "   "])
    def test_blank_topic_fails(self, capsys, cli_generator, topic):
        exit_code = generate_once(topic, generator=cli_generator)

        assert exit_code == EXIT_FAIL
        assert MESSAGES["api"]["topic_required"] in capsys.readouterr().out
        cli_generator.generate.assert_not_called()

    def test_generation_error_fails(self, capsys, cli_generator):
        cli_generator.generate.side_effect = GenerationError(
            "Failed to generate startup idea: API error (401): bad key"
        )

        exit_code = generate_once("pets", generator=cli_generator)

        assert exit_code == EXIT_FAIL
        assert "API error (401)" in capsys.readouterr().out

    def test_main_generate_flag(self, capsys, cli_generator):
        with patch("main.IdeaGenerator", return_value=cli_generator), \
             patch("web.app.serve") as mock_serve:
            exit_code = main(["--generate", "pets"])

        assert exit_code == EXIT_OK
        mock_serve.assert_not_called()
        assert json.loads(capsys.readouterr().out)["topic"] == "pets"


@pytest.mark.cli_behavior
class TestServe:
    """Tests for the default server mode."""

    def test_runs_server_with_cli_overrides(self):
        with patch("main.validate_config", return_value=[]), \
             patch("web.app.serve") as mock_serve:
            exit_code = main(["--host", "127.0.0.1", "--port", "8080"])

        assert exit_code == EXIT_OK
        mock_serve.assert_called_once_with(host="127.0.0.1", port=8080)

    def test_invalid_production_config_refuses_to_start(self, capsys):
        """
        GIVEN: Production mode with an invalid configuration
        WHEN: The server is started
        THEN: Exit code is 1 and the server never runs
        """
        with patch("main.validate_config", return_value=["OPENAI_API_KEY is required in production"]), \
             patch("main.is_production", return_value=True), \
             patch("web.app.serve") as mock_serve:
            exit_code = main([])

        assert exit_code == EXIT_FAIL
        mock_serve.assert_not_called()
        assert "OPENAI_API_KEY" in capsys.readouterr().out

    def test_invalid_development_config_still_starts(self):
        with patch("main.validate_config", return_value=["PORT must be between 1 and 65535, got 0"]), \
             patch("main.is_production", return_value=False), \
             patch("web.app.serve") as mock_serve:
            exit_code = main([])

        assert exit_code == EXIT_OK
        mock_serve.assert_called_once()

    def test_keyboard_interrupt(self):
        with patch("main.validate_config", return_value=[]), \
             patch("web.app.serve", side_effect=KeyboardInterrupt):
            exit_code = main([])

        assert exit_code == 130
