# cex_trace/ir.py
from dataclasses import dataclass, field
from typing import Iterator, List


# 字面量编码与 AIGER/ABC 一致：lit = 2 * var + compl

def var2lit(var: int, compl: bool = False) -> int:
    if var < 0:
        raise ValueError(f"negative variable id: {var}")
    return 2 * var + int(bool(compl))


def lit2var(lit: int) -> int:
    if lit < 0:
        raise ValueError(f"negative literal: {lit}")
    return lit >> 1


def lit_is_compl(lit: int) -> bool:
    if lit < 0:
        raise ValueError(f"negative literal: {lit}")
    return bool(lit & 1)


def lit_not(lit: int) -> int:
    if lit < 0:
        raise ValueError(f"negative literal: {lit}")
    return lit ^ 1


@dataclass
class Cube:
    """
    一个时间帧的赋值集合：
      - lits[:n_lits]          状态 / latch 字面量
      - lits[n_lits:n_total]   输入 (PI) 字面量
    """
    lits: List[int]
    n_lits: int = 0

    def __post_init__(self):
        self.lits = list(self.lits)
        if not 0 <= self.n_lits <= len(self.lits):
            raise ValueError(
                f"invalid cube: n_lits={self.n_lits}, n_total={len(self.lits)}"
            )

    @property
    def n_total(self) -> int:
        return len(self.lits)

    @property
    def state_lits(self) -> List[int]:
        return self.lits[:self.n_lits]

    @property
    def input_lits(self) -> List[int]:
        return self.lits[self.n_lits:]


@dataclass
class ObligationChain:
    """反例链：frames[0] 为最早发现的帧，只读。"""
    frames: List[Cube] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.frames)

    def __getitem__(self, idx: int) -> Cube:
        return self.frames[idx]

    def __iter__(self) -> Iterator[Cube]:
        return iter(self.frames)
