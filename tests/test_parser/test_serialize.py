"""Tests for rendering an AST back to script text."""

from pathlib import Path

import pytest

from minitcl.ast import to_script
from minitcl.parser import parse

FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestToScript:
    """to_script() output."""

    def test_simple_command(self):
        assert to_script(parse("set x 5")) == "set x 5"

    def test_variables_are_braced(self):
        assert to_script(parse("puts a$b")) == "puts a${b}"

    def test_quoted_escapes_stay_encoded(self):
        assert to_script(parse(r'puts "a\n\"b\""')) == r'puts "a\n\"b\""'

    def test_group_is_flattened(self):
        assert to_script(parse("demo {\n  a\n  b\n}")) == "demo a b"

    def test_semicolon_word_is_regrouped(self):
        assert to_script(parse("demo {a;b}")) == "demo {a;b}"

    def test_substitution(self):
        assert to_script(parse("set x [get y]")) == "set x [get y]"

    def test_empty_script(self):
        assert to_script([]) == ""


class TestReparse:
    """Parsing the rendered text yields the same AST."""

    @pytest.mark.parametrize(
        "script",
        [
            "hello { world }",
            'puts "Hello, world"',
            "set example indirect\nset indirect found\nget ${example}",
            'puts a"b""c" $x${y z}',
            r'set subdir [ replace $version \..* "" ]',
            "puts [a [b {c;d}] ${e}f]",
            'demo { "x y" $z } ; next',
            'puts ""',
        ],
    )
    def test_round_trip(self, script):
        commands = parse(script)
        assert parse(to_script(commands)) == commands

    def test_package_script(self):
        commands = parse((FIXTURES / "pkg.tcl").read_text())
        assert parse(to_script(commands)) == commands
