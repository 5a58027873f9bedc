# cex_trace/mapping.py

from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from .ir import lit2var, lit_is_compl
from .tables import PlacementTable, RegisterTables
from .trace_types import ExtractedProgram


# (lit, pi, value, inst, bit)
LitRow = Tuple[int, int, int, int, int]


class InstMapQuery:
    """
    寄存器 / PI 与指令之间的 O(1) 查询：
      - 所属指令 id
      - 在指令内的 bit 位置
      - 寄存器的展开副本号
    越界 id 属于调用方编程错误，直接抛异常。
    """

    def __init__(self, placement: PlacementTable, regs: Optional[RegisterTables] = None):
        self.placement = placement
        self.regs = regs if regs is not None else RegisterTables([], [], [])
        self.inst_len = placement.inst_len

    # ===== 内部检查 =====================================================

    def _check_reg(self, reg_id: int) -> None:
        if not 0 <= reg_id < len(self.regs):
            raise IndexError(f"register id out of range: {reg_id}")

    def _imem_index(self, pi_id: int) -> int:
        idx = self.placement[pi_id]
        if idx is None:
            raise ValueError(f"PI {pi_id} is not mapped to instruction memory")
        return idx

    # ===== 寄存器 ======================================================

    def reg_inst_id(self, reg_id: int) -> Optional[int]:
        self._check_reg(reg_id)
        return self.regs.reg2inst[reg_id]

    def reg_inst_bit(self, reg_id: int) -> int:
        self._check_reg(reg_id)
        return self._imem_index(self.regs.reg2pi[reg_id]) % self.inst_len

    def is_reg_inst(self, reg_id: int) -> bool:
        return self.reg_inst_id(reg_id) is not None

    def reg_copy(self, reg_id: int) -> int:
        self._check_reg(reg_id)
        return self.regs.reg2copy[reg_id]

    # ===== PI ==========================================================

    def pi_inst_id(self, pi_id: int) -> int:
        # imem 下标除以指令宽度即为指令 id
        return self._imem_index(pi_id) // self.inst_len

    def pi_inst_bit(self, pi_id: int) -> int:
        return self._imem_index(pi_id) % self.inst_len

    # ===== 调试辅助 ====================================================

    def describe_lits(self, lits: Iterable[int], n_pis: int) -> List[LitRow]:
        """只保留映射到 imem 的声明 PI，返回 (lit, pi, value, inst, bit)。"""
        rows: List[LitRow] = []
        for lit in lits:
            pi = lit2var(lit)
            if pi >= n_pis or self.placement.lookup(pi) is None:
                continue
            value = 0 if lit_is_compl(lit) else 1
            rows.append((lit, pi, value, self.pi_inst_id(pi), self.pi_inst_bit(pi)))
        return rows

    def pretty_print_program(self, program: ExtractedProgram, n_pis: int) -> None:
        """按指令分组打印程序字面量，方便人工检查。"""
        rows = self.describe_lits(program.lits, n_pis)
        if not rows:
            print("[EXTRACT] Empty program.")
            return

        by_inst: Dict[int, List[LitRow]] = defaultdict(list)
        for row in rows:
            by_inst[row[3]].append(row)

        print(f"[EXTRACT] start_frame={program.start_frame} lits={len(rows)}")
        for inst in sorted(by_inst):
            bits = sorted(by_inst[inst], key=lambda r: r[4], reverse=True)
            bit_str = " ".join(f"b{r[4]}={r[2]}" for r in bits)
            print(f"  inst {inst:4d}  {bit_str}")
