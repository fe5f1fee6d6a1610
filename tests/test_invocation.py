"""Tests for easy_cli.core.invocation — argv and eval-text rendering."""

from __future__ import annotations

from pathlib import Path

import pytest

from easy_cli.core.invocation import (
    ArgumentValue,
    Invocation,
    OptionValue,
    build_script_argv,
    render_echo_script,
    render_eval_script,
)
from easy_cli.core.models import CommandArgument, CommandDescription, CommandOption, ScriptCommand


def _script(*subs: str, path: str = "/tmp/foo.sh") -> ScriptCommand:
    return ScriptCommand(
        path=Path(path),
        command=CommandDescription(
            name="foo",
            sub_commands=tuple(CommandDescription(name=sub) for sub in subs),
        ),
    )


def _flag(name: str, value: bool) -> OptionValue:
    return OptionValue(CommandOption(name), value)


def _param(name: str, value: str | None) -> OptionValue:
    return OptionValue(CommandOption(name, has_parameter=True), value)


def _args(name: str, *values: str, variadic: bool = False) -> ArgumentValue:
    return ArgumentValue(CommandArgument(name, variadic=variadic), values)


# ---------------------------------------------------------------------------
# Option rendering
# ---------------------------------------------------------------------------

class TestOptionValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (_flag("f", True), "true"),
            (_flag("f", False), "false"),
            (_param("p", "value"), "value"),
            (_param("p", None), ""),
        ],
    )
    def test_render(self, value: OptionValue, expected: str) -> None:
        assert value.render() == expected


class TestInvocationLeaf:
    def test_root_is_leaf_without_sub_path(self) -> None:
        assert Invocation(script=_script()).leaf.name == "foo"

    def test_follows_sub_path(self) -> None:
        assert Invocation(script=_script("bar"), sub_path=("bar",)).leaf.name == "bar"

    def test_unknown_sub_path(self) -> None:
        with pytest.raises(KeyError):
            Invocation(script=_script(), sub_path=("nope",)).leaf


# ---------------------------------------------------------------------------
# Executed mode
# ---------------------------------------------------------------------------

class TestBuildScriptArgv:
    def test_sub_then_options_then_arguments(self) -> None:
        invocation = Invocation(
            script=_script("one"),
            sub_path=("one",),
            options=(_flag("option", True),),
            arguments=(_args("Message", "hello"),),
        )
        assert build_script_argv(invocation) == ["one", "true", "hello"]

    def test_variadic_values_are_spread(self) -> None:
        invocation = Invocation(
            script=_script(),
            arguments=(_args("first", "a"), _args("rest", "b", "c", variadic=True)),
        )
        assert build_script_argv(invocation) == ["a", "b", "c"]

    def test_missing_optional_argument_adds_nothing(self) -> None:
        invocation = Invocation(script=_script(), arguments=(_args("maybe"),))
        assert build_script_argv(invocation) == []

    def test_unset_option_still_occupies_a_slot(self) -> None:
        invocation = Invocation(
            script=_script(),
            options=(_flag("a", False), _param("b", None)),
            arguments=(_args("x", "1"),),
        )
        assert build_script_argv(invocation) == ["false", "", "1"]


# ---------------------------------------------------------------------------
# Evaluated mode
# ---------------------------------------------------------------------------

class TestRenderEvalScript:
    def test_embedded_sub_command(self) -> None:
        invocation = Invocation(
            script=_script("bar"),
            sub_path=("bar",),
            arguments=(_args("arg1", "arg1Val"),),
        )
        assert render_eval_script(invocation) == (
            "#eval\n"
            "typeset -A cli_args\n"
            "cli_args=(arg1 arg1Val)\n"
            "typeset -A cli_opts\n"
            "cli_opts=()\n"
            "source /tmp/foo.sh\n"
            "bar\n"
        )

    def test_root_command_has_no_trailing_name(self) -> None:
        invocation = Invocation(script=_script(), options=(_flag("verbose", True),))
        assert render_eval_script(invocation) == (
            "#eval\n"
            "typeset -A cli_args\n"
            "cli_args=()\n"
            "typeset -A cli_opts\n"
            "cli_opts=(verbose true)\n"
            "source /tmp/foo.sh\n"
        )

    def test_values_are_quoted(self) -> None:
        invocation = Invocation(
            script=_script(path="/tmp/my scripts/foo.sh"),
            options=(_param("out", None),),
            arguments=(_args("msg", "hello world"),),
        )
        text = render_eval_script(invocation)

        assert "cli_args=(msg 'hello world')\n" in text
        assert "cli_opts=(out '')\n" in text
        assert "source '/tmp/my scripts/foo.sh'\n" in text

    def test_variadic_values_are_comma_joined(self) -> None:
        invocation = Invocation(
            script=_script(),
            arguments=(_args("files", "a.txt", "b.txt", variadic=True),),
        )
        assert "cli_args=(files a.txt,b.txt)\n" in render_eval_script(invocation)

    def test_only_last_sub_name_is_emitted(self) -> None:
        script = ScriptCommand(
            path=Path("/tmp/foo.sh"),
            command=CommandDescription(
                name="foo",
                sub_commands=(
                    CommandDescription(name="a", sub_commands=(CommandDescription(name="b"),)),
                ),
            ),
        )
        text = render_eval_script(Invocation(script=script, sub_path=("a", "b")))
        assert text.endswith("source /tmp/foo.sh\nb\n")


class TestRenderEchoScript:
    def test_single_echo_line(self) -> None:
        assert render_echo_script("usage: cli\n") == "echo 'usage: cli'\n"

    def test_multiline_text_is_one_quoted_word(self) -> None:
        assert render_echo_script("a\nb\n") == "echo 'a\nb'\n"

    def test_single_quotes_are_escaped(self) -> None:
        assert render_echo_script("it's") == "echo 'it'\"'\"'s'\n"
