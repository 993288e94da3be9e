"""Tests for the Tcl facade."""

import io

import pytest

from minitcl import (
    CommandRegistry,
    ConversionError,
    ExecutionLimitError,
    ExecutionLimits,
    ParseError,
    Tcl,
    TclError,
    UnknownCommandError,
)


class TestRun:
    """Tcl.run()."""

    def test_set_and_puts(self):
        stdout = io.StringIO()
        tcl = Tcl(stdout=stdout)
        assert tcl.run("set x 5\nputs $x") == ""
        assert stdout.getvalue() == "5\n"

    def test_parse_error_raises(self):
        with pytest.raises(ParseError):
            Tcl().run("hello { world")

    def test_eval_error_raises(self):
        with pytest.raises(UnknownCommandError):
            Tcl().run("nope")

    def test_errors_share_a_base_class(self):
        with pytest.raises(TclError):
            Tcl().run('puts "\\x"')

    def test_initial_variables(self):
        tcl = Tcl(variables={"who": "world"})
        assert tcl.run("get who") == "world"

    def test_custom_command(self):
        tcl = Tcl()
        tcl.register(lambda variables, args: args[0].upper(), name="upper")
        assert tcl.run("upper hello") == "HELLO"

    def test_custom_dispatcher(self):
        registry = CommandRegistry()
        registry.register(lambda variables, args: "-".join(args), name="join")
        tcl = Tcl(commands=registry)
        assert tcl.run("join a b c") == "a-b-c"
        with pytest.raises(UnknownCommandError):
            tcl.run("set x 1")

    def test_register_needs_registry(self):
        class Dispatcher:
            def eval(self, variables, name, args):
                return name

        tcl = Tcl(commands=Dispatcher())
        assert tcl.run("anything goes") == "anything"
        with pytest.raises(TypeError):
            tcl.register(lambda variables, args: "", name="x")

    def test_limits(self):
        tcl = Tcl(limits=ExecutionLimits(max_substitution_depth=1))
        assert tcl.run("set a 1\nget [get a]") == ""
        with pytest.raises(ExecutionLimitError):
            tcl.run("get [get [get a]]")

    def test_many_commands(self):
        script = "\n".join(f"set v{i} {i}" for i in range(10001)) + "\nget v10000"
        assert Tcl().run(script) == "10000"

    def test_parse_only(self):
        assert len(Tcl().parse("a\nb\nc")) == 3


class TestExec:
    """Tcl.exec() reports failures instead of raising."""

    def test_success(self):
        result = Tcl().exec("set x 5\nputs $x\nget x")
        assert result.result == "5"
        assert result.stdout == "5\n"
        assert result.stderr == ""
        assert result.exit_code == 0
        assert result.variables == {"x": "5"}

    def test_parse_error(self):
        result = Tcl().exec('puts "unterminated')
        assert result.exit_code == 2
        assert result.stderr.startswith("Error: Parse error at line 1, column 6")

    def test_eval_error_keeps_partial_output(self):
        result = Tcl().exec("set a 1\nputs partial\nfrobnicate\nputs never")
        assert result.exit_code == 1
        assert result.stdout == "partial\n"
        assert result.stderr == "Error: Unknown command 'frobnicate'\n"
        assert result.variables == {"a": "1"}

    def test_output_is_per_call(self):
        tcl = Tcl()
        tcl.exec("puts one")
        assert tcl.exec("puts two").stdout == "two\n"

    def test_handler_conversion_error(self):
        def incr(variables, args):
            try:
                value = int(variables.get(args[0], "0"))
            except ValueError:
                raise ConversionError(variables[args[0]], "expected an integer")
            variables[args[0]] = str(value + 1)
            return variables[args[0]]

        tcl = Tcl()
        tcl.register(incr)
        assert tcl.run("incr n\nincr n") == "2"
        result = tcl.exec("set n abc\nincr n")
        assert result.exit_code == 1
        assert result.stderr == "Error: Unable to convert 'abc': expected an integer\n"

    def test_empty_script(self):
        result = Tcl().exec("")
        assert result.result == ""
        assert result.exit_code == 0


class TestReset:
    """Tcl.reset()."""

    def test_restores_initial_variables(self):
        tcl = Tcl(variables={"a": "1"})
        tcl.run("set a 2\nset b 3")
        tcl.reset()
        assert tcl.variables == {"a": "1"}
