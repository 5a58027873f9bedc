from __future__ import annotations

import io

import pytest

from cex_trace.ir import Cube, var2lit
from cex_trace.renderer import BitVectorRenderer
from cex_trace.tables import PlacementTable


def _renderer(entries, inst_len, n_insts, n_pis=None):
    placement = PlacementTable(entries, inst_len=inst_len, n_insts=n_insts)
    return BitVectorRenderer(placement, n_pis if n_pis is not None else len(entries))


def test_single_bit_msb_first():
    r = _renderer([None, None, 1], inst_len=4, n_insts=1)
    out = r.render(Cube([var2lit(2)]))
    assert out.concrete == ["0010"]
    assert out.generalized == ["xx1x"]


def test_no_placed_literal():
    r = _renderer([None, None, 0, 1], inst_len=4, n_insts=2)
    out = r.render(Cube([var2lit(0), var2lit(1, compl=True)]))
    assert out.concrete == ["0000", "0000"]
    assert out.generalized == ["xxxx", "xxxx"]


def test_unmapped_declared_pi_is_ignored():
    r = _renderer([None, 3, 0], inst_len=4, n_insts=1)
    base = r.render(Cube([var2lit(1)]))
    with_unmapped = r.render(Cube([var2lit(0), var2lit(1)]))
    assert base == with_unmapped
    assert base.concrete == ["1000"]


def test_synthetic_ids_are_ignored():
    # PI 3 有映射，但超出声明的 PI 数
    r = _renderer([None, 0, 1, 2], inst_len=4, n_insts=1, n_pis=3)
    out = r.render(Cube([var2lit(3), var2lit(1)]))
    assert out.concrete == ["0001"]
    assert out.generalized == ["xxx1"]


def test_state_segment_is_not_rendered():
    r = _renderer([0, 1], inst_len=2, n_insts=1)
    out = r.render(Cube([var2lit(0), var2lit(1)], n_lits=1))
    assert out.concrete == ["10"]


def test_concrete_and_generalized_agree_on_written_bits():
    r = _renderer([4, 0, 7, 2, 5], inst_len=4, n_insts=2)
    out = r.render(Cube([var2lit(0), var2lit(1, compl=True), var2lit(2)]))
    concrete = "".join(out.concrete)
    generalized = "".join(out.generalized)
    for c, g in zip(concrete, generalized):
        if g == "x":
            assert c == "0"
        else:
            assert c == g
    assert out.concrete == ["0000", "1001"]
    assert out.generalized == ["xxx0", "1xx1"]


def test_write_layout():
    r = _renderer([None, 0, 5], inst_len=4, n_insts=2)
    sink = io.StringIO()
    r.write(Cube([var2lit(1), var2lit(2, compl=True)]), sink, seq_no=3)
    assert sink.getvalue() == (
        "3-th Unsafe Program\n"
        "Concrete one:\n"
        "0001\n"
        "0000\n"
        "Generalized one:\n"
        "xxx1\n"
        "xx0x\n"
    )


def test_write_requires_sink():
    r = _renderer([0], inst_len=1, n_insts=1)
    with pytest.raises(ValueError):
        r.write(Cube([var2lit(0)]), None, seq_no=1)


def test_render_does_not_mutate_frame():
    r = _renderer([0, 1], inst_len=2, n_insts=1)
    frame = Cube([var2lit(0), var2lit(1, compl=True)])
    r.render(frame)
    assert frame.lits == [0, 3]
