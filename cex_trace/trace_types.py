# cex_trace/trace_types.py
from dataclasses import dataclass
from typing import Any, Dict, List

from .ir import Cube, lit_not


@dataclass
class ResolvedFrame:
    start_frame: int
    frame: Cube


@dataclass
class Rendering:
    concrete: List[str]
    generalized: List[str]


@dataclass
class ExtractedProgram:
    cube: Cube
    start_frame: int

    @property
    def lits(self) -> List[int]:
        return self.cube.input_lits

    def to_blocking_clause(self) -> List[int]:
        # 程序 cube 取反即为 blocking clause
        return [lit_not(lit) for lit in self.lits]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "start_frame": self.start_frame,
            "lits": list(self.lits),
            "blocking_clause": self.to_blocking_clause(),
        }
