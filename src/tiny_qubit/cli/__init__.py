"""
Command-line interface for tiny-qubit.

Usage:
    tiny-qubit run --gate h --seed 42
    tiny-qubit run --gate p --param 1.57 --shots 1000 --bloch
    tiny-qubit run --initial 1 0 1 0 --gate h --draw 0.3
    tiny-qubit gates
    tiny-qubit info
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional

from tiny_qubit.core import Complex
from tiny_qubit.errors import QubitError

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_run(args) -> int:
    """Prepare a qubit, apply one gate, measure it."""
    from ..experiment import ExperimentConfig, run_experiment
    from ..random_source import SequenceRandomSource
    from ..visualization import format_qubit, show_bloch, show_counts

    if args.initial is not None:
        re0, im0, re1, im1 = args.initial
        initial = (Complex(re0, im0), Complex(re1, im1))
    else:
        initial = (Complex(1.0, 0.0), Complex(0.0, 0.0))

    config = ExperimentConfig(
        gate=args.gate,
        params=tuple(args.param or ()),
        initial=initial,
        shots=args.shots,
        seed=args.seed,
        strict=args.strict,
    )
    source = SequenceRandomSource([args.draw]) if args.draw is not None else None
    result = run_experiment(config, source)

    print("Initial Qubit State:")
    print(format_qubit(result.initial))
    print(f"\nAfter {result.gate.name} Gate:")
    print(format_qubit(result.transformed))
    if args.bloch:
        print()
        print(show_bloch(result.transformed))
    print(f"\nMeasurement Result: |{result.outcome}⟩")

    if result.counts:
        print()
        print(show_counts(result.counts))
    return 0


def cmd_gates(args) -> int:
    """List the named gates."""
    from ..gates import GATE_REGISTRY

    print("Available gates:")
    for name, info in GATE_REGISTRY.items():
        params = f" ({info['n_params']} param)" if info["n_params"] else ""
        print(f"  {name:3s} {info['description']}{params}")
    return 0


def cmd_info(args) -> int:
    """Show tiny-qubit information."""
    from .. import __version__

    print(f"""
tiny-qubit v{__version__}
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

A single-qubit simulation kernel.

Features:
  • Normalized two-amplitude state with explicit complex arithmetic
  • 2x2 gates applied by matrix-vector product
  • Born-rule measurement with an injectable random source

Usage:
  tiny-qubit run --gate h --seed 42
  tiny-qubit run --gate x --shots 1000
  tiny-qubit gates
""")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tiny-qubit',
        description='Simulate a single qubit: prepare, apply a gate, measure'
    )
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase log verbosity (-v info, -vv debug)')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Run command
    run_parser = subparsers.add_parser('run', help='Apply a gate and measure')
    run_parser.add_argument('--gate', default='h', help='Gate name (default: h)')
    run_parser.add_argument('--param', type=float, action='append',
                            help='Gate parameter (repeat for several)')
    run_parser.add_argument('--initial', type=float, nargs=4,
                            metavar=('RE0', 'IM0', 'RE1', 'IM1'),
                            help='Initial amplitudes (normalized automatically)')
    run_parser.add_argument('--shots', type=int, default=0,
                            help='Additional measurements for a histogram')
    run_parser.add_argument('--seed', type=int, help='Random seed')
    run_parser.add_argument('--draw', type=float,
                            help='Force the measurement draw, in [0, 1)')
    run_parser.add_argument('--strict', action='store_true',
                            help='Reject non-unitary gates')
    run_parser.add_argument('--bloch', action='store_true',
                            help='Show the transformed state on the Bloch sphere')
    run_parser.set_defaults(func=cmd_run)

    # Gates command
    gates_parser = subparsers.add_parser('gates', help='List available gates')
    gates_parser.set_defaults(func=cmd_gates)

    # Info command
    info_parser = subparsers.add_parser('info', help='Show tiny-qubit info')
    info_parser.set_defaults(func=cmd_info)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    _configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == 'run' and args.draw is not None and args.shots:
        parser.error('--draw forces a single draw and cannot be combined with --shots')

    try:
        return args.func(args)
    except (QubitError, ValueError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
