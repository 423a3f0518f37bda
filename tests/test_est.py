import io

import pytest

from protoscheme.errors import InterpreterException
from protoscheme.est import EOFObject, EstType, Function, Macros, Port, SpecialForm
from protoscheme.syntax import DumpVisitor, Nil, NodeType, Number


def test_est_types_follow_syntax_types():
    assert EstType.FUNCTION == NodeType.NEXT
    assert list(EstType) == sorted(EstType)
    assert EOFObject().type == EstType.EOF_OBJECT


def test_function_call_passes_arguments_through():
    marker = object()
    func = Function(lambda args, interp: (args, interp))
    args = Number(1)
    assert func.call(args, marker) == (args, marker)
    assert func.type == EstType.FUNCTION


def test_macros_apply():
    macro = Macros(lambda args: Nil() if args == Number(2) else args)
    assert macro.apply(Number(2)) == Nil()
    assert macro.type == EstType.MACROS


def test_special_form_apply():
    marker = object()
    form = SpecialForm(lambda args, interp: (interp, args))
    assert form.apply(Nil(), marker) == (marker, Nil())
    assert form.type == EstType.SPECIAL_FORM


def test_accept_dispatches_to_known_visitor():
    class Visitor:
        def visit_function(self, node):
            return ("function", node)

    func = Function(lambda args, interp: args)
    assert func.accept(Visitor()) == ("function", func)


def test_accept_rejects_syntax_only_visitor():
    with pytest.raises(TypeError):
        Function(lambda args, interp: args).accept(DumpVisitor())


def test_read_char_skips_whitespace_and_reports_eof():
    port = Port(io.StringIO(" a\n b"), readable=True)
    assert port.eof() is False
    assert port.read_char() == "a"
    assert port.read_char() == "b"
    assert port.read_char() == ""
    assert port.eof() is True


def test_write_char():
    stream = io.StringIO()
    port = Port(stream, writable=True)
    port.write_char("x")
    port.write_char("y")
    assert stream.getvalue() == "xy"
    assert port.type == EstType.PORT


def test_wrong_direction_raises():
    with pytest.raises(InterpreterException):
        Port(io.StringIO("a"), readable=True).write_char("b")
    with pytest.raises(InterpreterException):
        Port(io.StringIO(), writable=True).read_char()


def test_no_flags_is_invalid(tmp_path):
    with pytest.raises(ValueError):
        Port(io.StringIO())
    with pytest.raises(ValueError):
        Port.from_file(str(tmp_path / "f.txt"), False, False)


def test_file_port_round_trip(tmp_path):
    path = tmp_path / "chars.txt"
    out = Port.from_file(str(path), readable=False, writable=True)
    out.write_char("q")
    out.close()
    port = Port.from_file(str(path))
    assert port.read_char() == "q"
    port.close()
    with pytest.raises(InterpreterException):
        port.close()


def test_stream_port_cannot_be_closed():
    with pytest.raises(InterpreterException):
        Port(io.StringIO(), writable=True).close()