"""
Command line runner for the spherical toolkit.

Sub-commands:
1. demo               - print a few sample conversions
2. angular-distance   - signed shortest rotation between two angles
3. to-math/from-math  - convert azimuths between compass and math conventions
4. octant             - name the compass octant of an azimuth
5. root               - find the first root of a named function in a range

Usage:
    python -m spherical_toolkit.runner demo

    # Angles in degrees instead of radians
    python -m spherical_toolkit.runner angular-distance 181 2 --degrees

    # Octant labels from a YAML config (e.g. localized tokens)
    python -m spherical_toolkit.runner --config config/french.yaml octant 270 --degrees
"""
import argparse
import math
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from spherical_toolkit.core import (
    angular_distance,
    bilerp,
    find_root,
    from_math,
    haversin,
    lerp,
    to_math,
    to_meter,
    to_octant_str,
    to_rad,
)
from spherical_toolkit.utils.config import ToolkitConfig, get_default_config, load_config
from spherical_toolkit.utils.exceptions import NoBracketError, SphericalToolkitError
from spherical_toolkit.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

FUNCTIONS: Dict[str, Callable[[float], float]] = {
    'sin': math.sin,
    'cos': math.cos,
    'tan': math.tan,
}

# Largest |f(root)| accepted as a root when eps is small
ROOT_RESIDUAL_TOLERANCE = 1e-6


def run_demo(config: ToolkitConfig) -> List[float]:
    """Sample values for each conversion, in a fixed order."""
    radius = config.sphere_radius_m
    return [
        to_rad(1000.0, radius),
        to_meter(math.pi, radius),
        float(haversin(2.0)),
        lerp(0.5, 0.0, 3.0),
        bilerp(0.0, 1.0, 2.0, 3.0, 1.0, 1.0),
        angular_distance(math.pi / 2, 0.0),
    ]


def solve(
    f: Callable[[float], float],
    min_x: float,
    max_x: float,
    dx: float,
    eps: float,
) -> float:
    """
    Find the first root of f and confirm f actually vanishes there.

    A sign change across a discontinuity (e.g. a pole of tan) brackets
    no root, so results whose residual exceeds max(1e-6, 10 * eps) are
    rejected.

    Raises:
        NoBracketError: If no root is found, or the bracket held a jump
    """
    root = find_root(f, min_x, max_x, dx, eps)
    residual = abs(f(root))
    if not residual <= max(ROOT_RESIDUAL_TOLERANCE, 10 * eps):
        logger.warning("sign_change_without_root", x=root, residual=residual)
        raise NoBracketError(
            f"Sign change at x={root!r} is a discontinuity, f(x)={residual!r}",
            x1=root,
            x2=root,
        )
    return root


def _angle_arg(value: float, degrees: bool) -> float:
    return math.radians(value) if degrees else value


def _angle_out(value: float, degrees: bool) -> float:
    return math.degrees(value) if degrees else value


def dispatch(args: argparse.Namespace, config: ToolkitConfig):
    """
    Run the selected sub-command.

    Returns:
        The command result (a number, a label, or a list of numbers)

    Raises:
        SphericalToolkitError: Propagated from the core functions
    """
    degrees = getattr(args, 'degrees', False)

    if args.command == 'demo':
        return run_demo(config)

    if args.command == 'angular-distance':
        d = angular_distance(_angle_arg(args.a1, degrees), _angle_arg(args.a2, degrees))
        return _angle_out(d, degrees)

    if args.command in ('to-math', 'from-math'):
        convert = to_math if args.command == 'to-math' else from_math
        return _angle_out(convert(_angle_arg(args.azimuth, degrees)), degrees)

    if args.command == 'octant':
        tokens = config.compass
        return to_octant_str(
            _angle_arg(args.azimuth, degrees),
            tokens.north, tokens.east, tokens.south, tokens.west,
        )

    if args.command == 'root':
        dx = args.dx if args.dx is not None else config.solver.scan_step
        eps = args.eps if args.eps is not None else config.solver.eps
        return solve(FUNCTIONS[args.function], args.min_x, args.max_x, dx, eps)

    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='spherical-toolkit',
        description='Spherical toolkit - angles, azimuths and root finding',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  spherical-toolkit demo
  spherical-toolkit angular-distance 0 181 --degrees
  spherical-toolkit octant 135 --degrees
  spherical-toolkit root sin 1 4 --dx 1
        """
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='YAML configuration file (default: built-in defaults)'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (default: WARNING)'
    )
    parser.add_argument(
        '--json-logs',
        action='store_true',
        help='Emit logs as JSON lines'
    )

    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('demo', help='Print sample conversions')

    p = sub.add_parser('angular-distance', help='Signed shortest rotation from A1 to A2')
    p.add_argument('a1', type=float)
    p.add_argument('a2', type=float)
    p.add_argument('--degrees', action='store_true', help='Angles are in degrees')

    for name, help_text in (
        ('to-math', 'Convert a compass azimuth to the math convention'),
        ('from-math', 'Convert a math-convention angle to a compass azimuth'),
        ('octant', 'Name the compass octant of an azimuth'),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument('azimuth', type=float)
        p.add_argument('--degrees', action='store_true', help='Azimuth is in degrees')

    p = sub.add_parser('root', help='First root of FUNCTION in [MIN_X, MAX_X)')
    p.add_argument('function', choices=sorted(FUNCTIONS))
    p.add_argument('min_x', type=float)
    p.add_argument('max_x', type=float)
    p.add_argument('--dx', type=float, default=None, help='Scan step (default: from config)')
    p.add_argument('--eps', type=float, default=None, help='Root tolerance (default: from config)')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(log_level=args.log_level, json_output=args.json_logs)

    try:
        config = load_config(args.config) if args.config else get_default_config()
        result = dispatch(args, config)
    except (SphericalToolkitError, FileNotFoundError) as e:
        logger.error("Command failed", command=args.command, error=str(e))
        return 1

    if isinstance(result, list):
        for value in result:
            print(value)
    else:
        print(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
