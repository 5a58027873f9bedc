# cex_trace/resolver.py
from typing import Optional

from .ir import ObligationChain, lit2var, lit_is_compl
from .trace_types import ResolvedFrame


class StartFrameResolver:
    """
    找出攻击程序真正的起始帧：
      - 完整遍历一次反例链（不提前退出）
      - 某帧输入段里 reset 变量为正 → 记为候选，后出现的覆盖先出现的
      - 全链都没有 reset → 整条链视为一个连续程序，取第 0 帧
    """

    def __init__(self, reset_var: int):
        if reset_var < 0:
            raise ValueError(f"invalid reset variable id: {reset_var}")
        self.reset_var = reset_var

    def asserts_reset(self, lits) -> bool:
        return any(
            lit2var(lit) == self.reset_var and not lit_is_compl(lit)
            for lit in lits
        )

    def resolve(self, chain: ObligationChain) -> ResolvedFrame:
        if len(chain) == 0:
            raise ValueError("cannot resolve start frame of an empty chain")

        resolved: Optional[ResolvedFrame] = None
        for idx, frame in enumerate(chain):
            if self.asserts_reset(frame.input_lits):
                resolved = ResolvedFrame(start_frame=idx, frame=frame)

        if resolved is None:
            resolved = ResolvedFrame(start_frame=0, frame=chain[0])
        return resolved
