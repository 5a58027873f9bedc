# cex_trace/cli.py
import argparse
from .decoder import TraceDecoder

def main():
    parser = argparse.ArgumentParser(description="Contract counterexample trace decoder")
    parser.add_argument("-c", "--config", required=True, help="YAML config file")
    parser.add_argument("-o", "--out-prefix", default=None, help="Output prefix (overrides config)")
    args = parser.parse_args()

    decoder = TraceDecoder.from_file(args.config)
    decoder.run(out_prefix=args.out_prefix)

if __name__ == "__main__":
    main()
