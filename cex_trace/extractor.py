# cex_trace/extractor.py
from .ir import Cube, ObligationChain, lit2var, lit_is_compl
from .resolver import StartFrameResolver
from .tables import PlacementTable
from .trace_types import ExtractedProgram, ResolvedFrame


class ProgramExtractor:
    """
    从反例链中抽取最小可回放程序：
      1) StartFrameResolver 定位起始帧
      2) 只保留有 imem 映射、且是声明 PI 的输入字面量
      3) 保留下来的 reset 字面量必须为正
    """

    def __init__(self, placement: PlacementTable, n_pis: int, resolver: StartFrameResolver):
        self.placement = placement
        self.n_pis = n_pis
        self.resolver = resolver
        self.start_frame = 0

    def _keep(self, lit: int) -> bool:
        pi = lit2var(lit)
        return pi < self.n_pis and self.placement.lookup(pi) is not None

    def extract(self, chain: ObligationChain) -> ExtractedProgram:
        return self.extract_resolved(self.resolver.resolve(chain))

    def extract_resolved(self, resolved: ResolvedFrame) -> ExtractedProgram:
        """已经定位好起始帧时直接用，避免重复遍历反例链。"""
        kept = [lit for lit in resolved.frame.input_lits if self._keep(lit)]

        reset_var = self.resolver.reset_var
        for lit in kept:
            if lit2var(lit) == reset_var and lit_is_compl(lit):
                raise RuntimeError(
                    f"complemented reset literal {lit} kept in frame {resolved.start_frame}"
                )

        self.start_frame = resolved.start_frame
        return ExtractedProgram(cube=Cube(kept, n_lits=0), start_frame=resolved.start_frame)
