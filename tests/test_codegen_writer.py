import io

import pytest

from cratekit.codegen_writer import Codegen, emit, emit_lines, scoped, with_codegen


def test_emit_inside_scope():
    buf = io.StringIO()

    def body():
        emit("fn main() {")
        emit("    let x = {};", 42)
        emit("}")
        emit()

    g = scoped(Codegen(buf), body)
    assert buf.getvalue() == "fn main() {\n    let x = 42;\n}\n\n"
    assert isinstance(g, Codegen)


def test_single_argument_keeps_braces():
    buf = io.StringIO()
    scoped(Codegen(buf), lambda: emit("impl X {}"))
    assert buf.getvalue() == "impl X {}\n"


def test_emit_lines():
    buf = io.StringIO()
    scoped(Codegen(buf), lambda: emit_lines("a", "b", "c"))
    assert buf.getvalue() == "a\nb\nc\n"


def test_out_of_scope_raises():
    with pytest.raises(RuntimeError, match="not in scope"):
        emit("x")
    with pytest.raises(RuntimeError):
        with_codegen(lambda g: g)


def test_nested_scopes_restore_previous():
    outer_buf, inner_buf = io.StringIO(), io.StringIO()

    def outer():
        emit("outer-1")
        scoped(Codegen(inner_buf), lambda: emit("inner"))
        emit("outer-2")

    scoped(Codegen(outer_buf), outer)
    assert outer_buf.getvalue() == "outer-1\nouter-2\n"
    assert inner_buf.getvalue() == "inner\n"


def test_scope_restored_after_error():
    def failing():
        raise KeyError("boom")

    with pytest.raises(KeyError):
        scoped(Codegen(io.StringIO()), failing)
    with pytest.raises(RuntimeError):
        emit("after")


def test_with_codegen_returns_value():
    g = Codegen(io.StringIO())
    seen = []
    scoped(g, lambda: seen.append(with_codegen(lambda cur: cur)))
    assert seen == [g]


def test_create_file(tmp_path):
    path = tmp_path / "out.rs"
    g = Codegen.create_file(str(path))
    scoped(g, lambda: emit_lines("pub use libc::c_int;"))
    g.flush()
    g.close()
    assert path.read_text(encoding="utf-8") == "pub use libc::c_int;\n"


def test_write_returns_count():
    buf = io.StringIO()
    g = Codegen(buf)
    assert g.write("abc") == 3
    assert buf.getvalue() == "abc"