# cex_trace/frontend/toy_frontend.py
from typing import List
from .base import FrontendBase
from ..ir import Cube, ObligationChain, var2lit


class ToyFrontend(FrontendBase):
    """
    Toy 前端：不读文件，只构造一条玩具反例链，用于调通全流程。
      frame 0: 无 reset，PI 0 = 1
      frame 1: reset 拉高，第一个映射 PI = 1，第二个 = 0
      frame 2: 无 reset
    期望起始帧为 1。
    """

    def load_chains(self) -> List[ObligationChain]:
        reset = self.cfg.reset_var
        pis = [pi for pi in range(self.cfg.n_pis) if pi != reset]
        if len(pis) < 2:
            raise ValueError(f"toy frontend needs two non-reset PIs, got n_pis={self.cfg.n_pis}")
        first, second = pis[0], pis[1]

        frames = [
            Cube([var2lit(0), var2lit(first)], n_lits=1),
            Cube([var2lit(1), var2lit(reset), var2lit(first), var2lit(second, compl=True)], n_lits=1),
            Cube([var2lit(2), var2lit(reset, compl=True)], n_lits=1),
        ]
        return [ObligationChain(frames)]
