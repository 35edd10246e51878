"""
test_options.py - Testes da maquina de estados de opcoes
"""

import dataclasses

import pytest

from zepton.errors import (
    ConfigConflict,
    FileExtensionError,
    FileOrderError,
    UnknownFlag,
    UsageError,
)
from zepton.model.results import ProcessStatus
from zepton.options import Action, CompilerOptions, VerbosityMode, parse_arguments


class TestParseArguments:
    def test_defaults(self):
        options = parse_arguments(["hi.zep"])

        assert options.verbosity is VerbosityMode.FULL
        assert options.files == ("hi.zep",)
        assert options.action is Action.COMPILE
        assert options.compile_options() == ["-g"]

    def test_toggles(self):
        options = parse_arguments(["-echo", "-time", "-final", "-echo", "hi.zep"])

        assert options.echo and options.time and options.final
        assert options.compile_options() == ["-g:none"]

    @pytest.mark.parametrize(
        "flag, mode",
        [("-brief", VerbosityMode.BRIEF), ("-hush", VerbosityMode.HUSH), ("-mute", VerbosityMode.MUTE)],
    )
    def test_verbosity_selectors(self, flag, mode):
        assert parse_arguments([flag, "hi.zep"]).verbosity is mode

    def test_same_verbosity_twice_is_idempotent(self):
        assert parse_arguments(["-hush", "-hush", "hi.zep"]).verbosity is VerbosityMode.HUSH

    def test_javac_passthrough(self):
        options = parse_arguments(
            ["-brief", "-javac", "-Xlint:all", "-d", "out", "-brief", "a.zep", "b.zep"]
        )

        assert options.javac_args == ("-Xlint:all", "-d", "out", "-brief")
        assert options.files == ("a.zep", "b.zep")
        assert options.compile_options() == ["-Xlint:all", "-d", "out", "-brief", "-g"]

    def test_options_are_immutable(self):
        options = parse_arguments(["hi.zep"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.final = True


class TestShortCircuit:
    @pytest.mark.parametrize("flag", ["-help", "-?"])
    def test_help(self, flag):
        assert parse_arguments(["-time", flag, "-bogus"]).action is Action.HELP

    @pytest.mark.parametrize("flag", ["-info", "-v"])
    def test_info(self, flag):
        assert parse_arguments([flag]).action is Action.INFO

    def test_error_before_help_wins(self):
        with pytest.raises(UnknownFlag):
            parse_arguments(["-bogus", "-help"])


class TestProblems:
    @pytest.mark.parametrize(
        "tokens",
        [
            ["-brief", "-hush", "a.zep"],
            ["-brief", "-mute", "a.zep"],
            ["-hush", "-brief", "a.zep"],
            ["-hush", "-mute", "a.zep"],
            ["-mute", "-brief", "a.zep"],
            ["-mute", "-hush", "a.zep"],
        ],
    )
    def test_verbosity_conflict(self, tokens):
        with pytest.raises(ConfigConflict) as exc_info:
            parse_arguments(tokens)

        assert tokens[1] in str(exc_info.value)
        assert exc_info.value.status is ProcessStatus.PROBLEM

    def test_no_tokens(self):
        with pytest.raises(UsageError, match="No compiler options or files given"):
            parse_arguments([])

    @pytest.mark.parametrize("tokens", [["-time"], ["-javac", "-cp", "lib"]])
    def test_no_files(self, tokens):
        with pytest.raises(UsageError, match="No source files given"):
            parse_arguments(tokens)

    @pytest.mark.parametrize("tokens", [["-javac", "a.zep"], ["-javac"], ["-final", "-javac", "a.zep", "b.zep"]])
    def test_javac_without_passthrough(self, tokens):
        with pytest.raises(UsageError, match="'-javac' must be followed by at least one compiler option"):
            parse_arguments(tokens)

    def test_unknown_flag(self):
        with pytest.raises(UnknownFlag, match="'-bogus' is not recognized"):
            parse_arguments(["-bogus", "a.zep"])

    def test_flag_after_files(self):
        with pytest.raises(FileOrderError, match="'-time' must precede"):
            parse_arguments(["a.zep", "-time"])

    @pytest.mark.parametrize("tokens", [["a.txt"], ["a.zep", "b.java"]])
    def test_wrong_extension(self, tokens):
        with pytest.raises(FileExtensionError, match="does not have '.zep' extension"):
            parse_arguments(tokens)


def test_compile_options_has_exactly_one_debug_flag():
    options = CompilerOptions(javac_args=("-g:source",), final=True)
    assert options.compile_options() == ["-g:source", "-g:none"]
