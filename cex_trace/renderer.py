# cex_trace/renderer.py
from typing import List, Optional, TextIO

from .ir import Cube, lit2var, lit_is_compl
from .tables import PlacementTable
from .trace_types import Rendering


class BitVectorRenderer:
    """
    把一帧的输入字面量渲染成指令存储视图：
      - Concrete:    未赋值位默认 '0'
      - Generalized: 未赋值位记为 'x'（不关心）
    每条指令一行，最高位在前。
    """

    def __init__(self, placement: PlacementTable, n_pis: int):
        self.placement = placement
        self.n_pis = n_pis
        self.inst_len = placement.inst_len
        self.n_insts = placement.n_insts

    @property
    def total_bits(self) -> int:
        return self.inst_len * self.n_insts

    def _placed_bits(self, frame: Cube):
        for lit in frame.input_lits:
            pi = lit2var(lit)
            # id >= n_pis 的是寄存器副本等合成变量，不是真正的 PI
            if pi >= self.n_pis:
                continue
            idx = self.placement.lookup(pi)
            if idx is None:
                continue
            yield idx, "0" if lit_is_compl(lit) else "1"

    def _rows(self, bits: List[str]) -> List[str]:
        rows = []
        for i in range(self.n_insts):
            word = bits[i * self.inst_len:(i + 1) * self.inst_len]
            rows.append("".join(reversed(word)))
        return rows

    def render(self, frame: Cube) -> Rendering:
        if self.total_bits <= 0:
            raise ValueError(f"total_bits must be positive, got {self.total_bits}")

        concrete = ["0"] * self.total_bits
        generalized = ["x"] * self.total_bits
        for idx, val in self._placed_bits(frame):
            concrete[idx] = val
            generalized[idx] = val

        return Rendering(
            concrete=self._rows(concrete),
            generalized=self._rows(generalized),
        )

    def write(self, frame: Cube, sink: Optional[TextIO], seq_no: int) -> Rendering:
        if sink is None:
            raise ValueError("output sink is required")

        rendering = self.render(frame)
        sink.write(f"{seq_no}-th Unsafe Program\n")
        sink.write("Concrete one:\n")
        for row in rendering.concrete:
            sink.write(row + "\n")
        sink.write("Generalized one:\n")
        for row in rendering.generalized:
            sink.write(row + "\n")
        return rendering
