# cex_trace/tables.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import yaml


class PlacementTable:
    """
    PI 变量 id → 指令存储 bit-vector 中的位置。
      - None 表示该 PI 不映射到 imem（控制 / reset 输入）
      - 构建后不可变
    """

    def __init__(self, entries: Sequence[Optional[int]], inst_len: int, n_insts: int):
        if inst_len <= 0 or n_insts <= 0:
            raise ValueError(f"invalid imem shape: inst_len={inst_len}, n_insts={n_insts}")
        self.inst_len = inst_len
        self.n_insts = n_insts
        self._entries = tuple(entries)

        owner: Dict[int, int] = {}
        for pi, idx in enumerate(self._entries):
            if idx is None:
                continue
            if not 0 <= idx < self.total_bits:
                raise ValueError(
                    f"placement of PI {pi} out of range: {idx} (total_bits={self.total_bits})"
                )
            if idx in owner:
                raise ValueError(
                    f"PI {pi} and PI {owner[idx]} share imem slot {idx}"
                )
            owner[idx] = pi

    @property
    def total_bits(self) -> int:
        return self.inst_len * self.n_insts

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, pi: int) -> Optional[int]:
        if not 0 <= pi < len(self._entries):
            raise IndexError(f"PI id out of range: {pi}")
        return self._entries[pi]

    def lookup(self, var: int) -> Optional[int]:
        """越界的变量 id 视为未映射（渲染时用）。"""
        if 0 <= var < len(self._entries):
            return self._entries[var]
        return None

    def num_mapped(self) -> int:
        return sum(1 for e in self._entries if e is not None)


class RegisterTables:
    """寄存器 → (所属指令 / 关联 PI / 展开副本号)。"""

    def __init__(self,
                 reg2inst: Sequence[Optional[int]],
                 reg2pi: Sequence[int],
                 reg2copy: Sequence[int]):
        if not len(reg2inst) == len(reg2pi) == len(reg2copy):
            raise ValueError(
                f"register tables size mismatch: inst={len(reg2inst)}, "
                f"pi={len(reg2pi)}, copy={len(reg2copy)}"
            )
        for reg, (inst, pi, copy) in enumerate(zip(reg2inst, reg2pi, reg2copy)):
            if inst is not None and inst < 0:
                raise ValueError(f"register {reg}: negative instruction id {inst}, use None")
            if pi < 0:
                raise ValueError(f"register {reg}: negative PI id {pi}")
            if copy < 0:
                raise ValueError(f"register {reg}: negative copy index {copy}")
        self.reg2inst = tuple(reg2inst)
        self.reg2pi = tuple(reg2pi)
        self.reg2copy = tuple(reg2copy)

    def __len__(self) -> int:
        return len(self.reg2inst)


# ---------- YAML 加载 ---------- #

def _read_yaml(path: Union[str, Path]) -> Any:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"table file not found: {path}")
    with open(path) as f:
        return yaml.safe_load(f)


def load_placement_table(path: Union[str, Path], inst_len: int, n_insts: int) -> PlacementTable:
    """
    两种格式：
      placement: [null, null, 0, 1, ...]     # 按 PI id 索引
    或
      n_pis: 16
      placement: {2: 0, 3: 1, ...}           # 只写有映射的 PI
    """
    raw = _read_yaml(path)
    if not isinstance(raw, dict) or "placement" not in raw:
        raise ValueError(f"{path}: missing 'placement' section")
    placement = raw["placement"]

    if isinstance(placement, list):
        entries: List[Optional[int]] = list(placement)
    elif isinstance(placement, dict):
        n_pis = raw.get("n_pis")
        if n_pis is None:
            n_pis = max((int(k) for k in placement), default=-1) + 1
        entries = [None] * int(n_pis)
        for k, v in placement.items():
            if not 0 <= int(k) < len(entries):
                raise ValueError(f"{path}: PI id {k} out of range (n_pis={len(entries)})")
            entries[int(k)] = v
    else:
        raise ValueError(f"{path}: 'placement' must be a list or a mapping")

    table = PlacementTable(entries, inst_len=inst_len, n_insts=n_insts)
    print(f"[TABLE] placement: {len(table)} PIs, {table.num_mapped()} mapped to imem")
    return table


def load_register_tables(path: Union[str, Path]) -> RegisterTables:
    """
    registers:
      - {inst: 0, pi: 5, copy: 0}
      - {inst: null, pi: 7, copy: 1}
    """
    raw = _read_yaml(path)
    regs = raw.get("registers") if isinstance(raw, dict) else None
    if not isinstance(regs, list):
        raise ValueError(f"{path}: missing 'registers' list")

    reg2inst: List[Optional[int]] = []
    reg2pi: List[int] = []
    reg2copy: List[int] = []
    for i, r in enumerate(regs):
        if not isinstance(r, dict) or "pi" not in r:
            raise ValueError(f"{path}: register entry {i} must be a mapping with 'pi'")
        inst = r.get("inst")
        # 兼容 -1 表示不可寻址
        if inst is not None and int(inst) < 0:
            inst = None
        reg2inst.append(None if inst is None else int(inst))
        reg2pi.append(int(r["pi"]))
        reg2copy.append(int(r.get("copy", 0)))

    try:
        tables = RegisterTables(reg2inst, reg2pi, reg2copy)
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from e
    print(f"[TABLE] registers: {len(tables)} entries")
    return tables
