from __future__ import annotations

from pathlib import Path

import pytest

from cex_trace.mapping import InstMapQuery
from cex_trace.tables import (
    PlacementTable,
    RegisterTables,
    load_placement_table,
    load_register_tables,
)


def test_placement_lookup():
    t = PlacementTable([None, 3, 0], inst_len=2, n_insts=2)
    assert len(t) == 3
    assert t.total_bits == 4
    assert t[0] is None
    assert t[1] == 3
    assert t.lookup(7) is None
    assert t.num_mapped() == 2
    with pytest.raises(IndexError):
        t[3]


def test_placement_out_of_range():
    with pytest.raises(ValueError):
        PlacementTable([0, 4], inst_len=2, n_insts=2)
    with pytest.raises(ValueError):
        PlacementTable([-1], inst_len=2, n_insts=2)


def test_placement_slots_are_unique():
    with pytest.raises(ValueError):
        PlacementTable([1, None, 1], inst_len=2, n_insts=1)


def test_placement_shape():
    with pytest.raises(ValueError):
        PlacementTable([], inst_len=0, n_insts=1)


def test_register_tables_size_mismatch():
    with pytest.raises(ValueError):
        RegisterTables([0, 1], [2], [0, 0])


def test_load_placement_list(tmp_path: Path):
    p = tmp_path / "imem.yml"
    p.write_text("placement: [null, null, 0, 1]\n")
    t = load_placement_table(p, inst_len=2, n_insts=1)
    assert [t[i] for i in range(4)] == [None, None, 0, 1]


def test_load_placement_mapping(tmp_path: Path):
    p = tmp_path / "imem.yml"
    p.write_text("n_pis: 6\nplacement:\n  2: 1\n  4: 0\n")
    t = load_placement_table(p, inst_len=2, n_insts=1)
    assert len(t) == 6
    assert t[2] == 1
    assert t[4] == 0
    assert t[5] is None


def test_load_placement_errors(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_placement_table(tmp_path / "missing.yml", inst_len=1, n_insts=1)
    p = tmp_path / "bad.yml"
    p.write_text("other: 1\n")
    with pytest.raises(ValueError):
        load_placement_table(p, inst_len=1, n_insts=1)


def test_load_register_tables(tmp_path: Path):
    p = tmp_path / "regs.yml"
    p.write_text(
        "registers:\n"
        "  - {inst: 0, pi: 5, copy: 0}\n"
        "  - {inst: null, pi: 7, copy: 1}\n"
        "  - {inst: 3, pi: 2}\n"
    )
    regs = load_register_tables(p)
    assert len(regs) == 3
    assert regs.reg2inst == (0, None, 3)
    assert regs.reg2pi == (5, 7, 2)
    assert regs.reg2copy == (0, 1, 0)


def test_register_tables_reject_negative_ids():
    with pytest.raises(ValueError):
        RegisterTables([-1], [0], [0])
    with pytest.raises(ValueError):
        RegisterTables([0], [-2], [0])
    with pytest.raises(ValueError):
        RegisterTables([0], [0], [-3])


def test_load_register_tables_legacy_unaddressable(tmp_path: Path):
    # -1 是旧格式里的“不可寻址”
    p = tmp_path / "regs.yml"
    p.write_text(
        "registers:\n"
        "  - {inst: -1, pi: 0, copy: 0}\n"
        "  - {inst: '2', pi: 1, copy: 1}\n"
    )
    regs = load_register_tables(p)
    assert regs.reg2inst == (None, 2)

    placement = PlacementTable([0, 1], inst_len=2, n_insts=1)
    q = InstMapQuery(placement, regs)
    assert not q.is_reg_inst(0)
    assert q.is_reg_inst(1)


def test_load_register_tables_errors(tmp_path: Path):
    p = tmp_path / "regs.yml"
    p.write_text("registers:\n  - {inst: 99, pi: 42, copy: -3}\n")
    with pytest.raises(ValueError, match="regs.yml"):
        load_register_tables(p)

    p.write_text("registers: [4]\n")
    with pytest.raises(ValueError, match="regs.yml"):
        load_register_tables(p)


def test_load_placement_key_out_of_range(tmp_path: Path):
    p = tmp_path / "imem.yml"
    p.write_text("n_pis: 2\nplacement:\n  5: 0\n")
    with pytest.raises(ValueError, match="imem.yml"):
        load_placement_table(p, inst_len=2, n_insts=1)
