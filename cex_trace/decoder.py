# cex_trace/decoder.py
from typing import List, Optional

from .config import Config, load_config
from .frontend import ToyFrontend, YamlFrontend
from .ir import ObligationChain
from .tables import PlacementTable, RegisterTables, load_placement_table, load_register_tables
from .mapping import InstMapQuery
from .resolver import StartFrameResolver
from .renderer import BitVectorRenderer
from .extractor import ProgramExtractor
from .report import UnsafeProgramLogger
from .trace_types import ExtractedProgram


class TraceDecoder:
    def __init__(self, cfg: Config,
                 placement: Optional[PlacementTable] = None,
                 regs: Optional[RegisterTables] = None):
        self.cfg = cfg
        if placement is None:
            placement = load_placement_table(cfg.placement_file, cfg.inst_len, cfg.n_insts)
        if regs is None and cfg.registers_file:
            regs = load_register_tables(cfg.registers_file)
        self.placement = placement
        self.query = InstMapQuery(placement, regs)
        self.resolver = StartFrameResolver(cfg.reset_var)
        self.renderer = BitVectorRenderer(placement, cfg.n_pis)
        self.extractor = ProgramExtractor(placement, cfg.n_pis, self.resolver)
        self.logger = UnsafeProgramLogger(self.renderer, self.query)

    @classmethod
    def from_file(cls, config_path: str) -> "TraceDecoder":
        cfg = load_config(config_path)
        return cls(cfg)

    def load_chains(self) -> List[ObligationChain]:
        # 1) 选择前端
        if self.cfg.frontend == "toy":
            fe = ToyFrontend(self.cfg)
        else:
            fe = YamlFrontend(self.cfg)
        return fe.load_chains()

    def decode(self, chain: ObligationChain, sink) -> ExtractedProgram:
        """对一条反例链：定位起始帧 → 渲染 → 抽取程序。"""
        resolved = self.resolver.resolve(chain)
        program = self.extractor.extract_resolved(resolved)
        self.logger.log(resolved.frame, program, sink)
        print(f"[CEX] program #{self.logger.n_blocked}: chain length={len(chain)}, "
              f"start_frame={program.start_frame}, lits={len(program.lits)}")
        return program

    def run(self, out_prefix: Optional[str] = None) -> List[ExtractedProgram]:
        out_prefix = out_prefix or self.cfg.out_prefix
        chains = self.load_chains()

        programs: List[ExtractedProgram] = []
        with open(out_prefix + ".unsafe.txt", "w") as sink:
            for chain in chains:
                program = self.decode(chain, sink)
                self.query.pretty_print_program(program, self.cfg.n_pis)
                programs.append(program)

        self.logger.dump_json(out_prefix + ".programs.json")
        self.logger.dump_csv(out_prefix + ".programs.csv")

        print(f"[INFO] Unsafe programs decoded: {len(programs)}")
        return programs
