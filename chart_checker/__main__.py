"""chart-checker — verify the inlined chart assets of a generated index.html.

Usage: uv run chart-checker [--root PATH] [--json] [--env-file PATH]

With no arguments, checks ./index.html and the base64 assets it references,
prints a verdict and exits 0 on success or 1 on any failure.

Environment variables / .env loading:
  CHART_CHECKER_ROOT sets the project root when --root is not given.
  OS environment variables are always used first.
  If a variable is not set, chart-checker looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from chart_checker.core.env import ROOT_ENV_VAR, load_env, resolve_root
from chart_checker.core.report import format_failure, format_json, format_text
from chart_checker.core.types import ChartCheckError
from chart_checker.validator import validate_project


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  chart-checker\n'
        '  chart-checker --root ./site\n'
        '  chart-checker --json\n'
        f'  {ROOT_ENV_VAR}=./site chart-checker\n'
    )
    parser = argparse.ArgumentParser(
        prog='chart-checker',
        description='Verify that index.html embeds its three charts as lazy-loaded base64 PNG assets.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '-r',
        '--root',
        metavar='PATH',
        default=None,
        help=f'Project root containing index.html (default: ${ROOT_ENV_VAR} or cwd)',
    )
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before resolving the root — OS env vars always win
    env_path, applied = load_env(env_file=args.env_file)
    if ROOT_ENV_VAR in applied:
        print(f'chart-checker: loaded {env_path}', file=sys.stderr)

    root = resolve_root(args.root)
    try:
        report = validate_project(root)
    except ChartCheckError as exc:
        print(format_failure(str(exc)), file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    elif report.ok:
        print(format_text(report))
    else:
        print(format_text(report), file=sys.stderr)

    if not report.ok:
        sys.exit(1)


if __name__ == '__main__':
    main()
