"""ULID generator - Entry Point."""

import argparse
import json
import sys

from config import load_config
from core.errors import UlidError
from core.generator import UlidGenerator
from core.ulid import Ulid, generate_ulid
from internal.logging import LogLevel, StructuredLogger, get_logger
from utils.bench import run_benchmarks
from utils.crash import configure as configure_crash, install_crash_handler


def _cmd_new(args, config):
    log = get_logger()
    count = args.count if args.count is not None else config.generator.count
    monotonic = config.generator.monotonic and not args.no_monotonic

    generator = UlidGenerator() if monotonic else None
    try:
        for _ in range(count):
            if generator:
                print(generator.generate(args.timestamp))
            elif args.timestamp is not None:
                print(generate_ulid(clock=lambda: args.timestamp).encode())
            else:
                print(generate_ulid().encode())
    except UlidError as exc:
        log.error("generate failed", error=exc, **exc.context)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    log.debug("generated", count=count, monotonic=monotonic)
    return 0


def _cmd_inspect(args, config):
    status = 0
    for value in args.ulids:
        try:
            print(json.dumps(Ulid.decode(value).to_dict()))
        except UlidError as exc:
            get_logger().debug("inspect failed", error=exc, value=value, **exc.context)
            print(f"error: {value!r}: {exc}", file=sys.stderr)
            status = 1
    return status


def _cmd_bench(args, config):
    iterations = args.iterations or config.bench.iterations
    for result in run_benchmarks(iterations):
        print(f"{result['name']:<20} {result['iterations']:>10} ops "
              f"{result['seconds']:>10.4f}s {result['ops_per_sec']:>14,.0f} ops/s")
    return 0


def _log_level(value):
    try:
        return LogLevel.parse(value)
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown log level: {value!r}") from None


def build_parser():
    p = argparse.ArgumentParser(prog="ulidgen", description="Generate and inspect ULIDs.")
    p.add_argument("--config", help="Path to config JSON (default: config.json beside this module)")
    p.add_argument("--log-level", type=_log_level, help="DEBUG, INFO, WARN or ERROR (overrides config)")

    sub = p.add_subparsers(dest="cmd", required=True)

    p_new = sub.add_parser("new", help="Print new ULIDs, one per line.")
    p_new.add_argument("-n", "--count", type=int, help="How many to generate (default from config)")
    p_new.add_argument("--timestamp", type=int, help="Milliseconds since Unix epoch (default: now)")
    p_new.add_argument("--no-monotonic", action="store_true", help="Redraw randomness for every ULID.")
    p_new.set_defaults(func=_cmd_new)

    p_inspect = sub.add_parser("inspect", help="Decode ULIDs and print their parts as JSON.")
    p_inspect.add_argument("ulids", nargs="+")
    p_inspect.set_defaults(func=_cmd_inspect)

    p_bench = sub.add_parser("bench", help="Time generation and parsing.")
    p_bench.add_argument("-n", "--iterations", type=int, help="Calls per case (default from config)")
    p_bench.set_defaults(func=_cmd_bench)
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    configure_crash(config.logging.crash_file)

    level = args.log_level
    if level is None:
        try:
            level = LogLevel.parse(config.logging.level)
        except KeyError:
            print(f"error: unknown log level in config: {config.logging.level!r}", file=sys.stderr)
            return 2
    StructuredLogger.configure(min_level=level)
    get_logger().debug("ulidgen start", cmd=args.cmd)
    return int(args.func(args, config))


def run():
    install_crash_handler()
    sys.exit(main())


if __name__ == "__main__":
    run()
