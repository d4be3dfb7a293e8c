"""rt-canvas — Render a demo scene onto a canvas and export it as plain PPM.

Usage: rt-canvas <scene> <width> <height> [options] > out.ppm

Scenes are auto-discovered from rt_canvas/scenes/.
Each scene module's docstring is its documentation.
Run `rt-canvas help <scene>` for full module docs.

The PPM text goes to stdout; logs go to stderr.

Settings come from environment variables; --log-level and --log-file override them:
  RT_CANVAS_LOG_LEVEL   DEBUG, INFO, WARNING (default), ERROR
  RT_CANVAS_LOG_FILE    also write logs to this file
"""

import argparse
import logging
import sys

from rt_canvas import registry
from rt_canvas.core.env import load_settings
from rt_canvas.core.errors import CanvasError
from rt_canvas.core.log import setup_logging
from rt_canvas.core.ppm import canvas_to_ppm
from rt_canvas.core.report import format_json, format_text, summarize
from rt_canvas.core.tuples import colour

logger = logging.getLogger('rt_canvas.cli')

DEFAULT_COLOUR = (1.0, 0.8, 0.6)


def _build_parser() -> argparse.ArgumentParser:
    scenes = registry.all_scenes()

    epilog = (
        'Examples:\n'
        '  rt-canvas blank 5 3\n'
        '  rt-canvas fill 10 2 --colour 1 0.8 0.6\n'
        '  rt-canvas gradient 64 8 -c 0 0.5 1 > ramp.ppm\n'
        '  rt-canvas projectile 900 550 --format json\n'
        '  rt-canvas help projectile\n'
    )
    parser = argparse.ArgumentParser(
        prog='rt-canvas',
        description='Render a demo scene onto a canvas and export it as plain PPM.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        default=None,
        help='DEBUG, INFO, WARNING or ERROR (default: $RT_CANVAS_LOG_LEVEL or WARNING)',
    )
    parser.add_argument(
        '--log-file',
        metavar='PATH',
        default=None,
        help='Also write logs to PATH (default: $RT_CANVAS_LOG_FILE)',
    )
    sub = parser.add_subparsers(dest='scene', help='Scene to render')

    for name, scene in sorted(scenes.items()):
        p = sub.add_parser(name, help=scene.summary)
        p.add_argument('width', type=int, help='Canvas width in pixels')
        p.add_argument('height', type=int, help='Canvas height in pixels')
        p.add_argument(
            '-c',
            '--colour',
            type=float,
            nargs=3,
            default=DEFAULT_COLOUR,
            metavar=('R', 'G', 'B'),
            help='Drawing colour, channels 0..1 (default: 1 0.8 0.6)',
        )
        p.add_argument(
            '-f',
            '--format',
            choices=('ppm', 'text', 'json'),
            default='ppm',
            help='ppm prints the image; text/json print a summary (default: ppm)',
        )

    help_parser = sub.add_parser('help', help='Print full docs for a scene')
    help_parser.add_argument('command', nargs='?', help='Scene name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a scene."""
    scenes = registry.all_scenes()

    if command is None:
        print('Available scenes:\n')
        for name, scene in sorted(scenes.items()):
            print(f'  {name:<12} {scene.summary}')
        print('\nRun: rt-canvas help <scene> for full docs.')
        return

    if command not in scenes:
        print(f'Unknown scene: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(scenes))}', file=sys.stderr)
        sys.exit(1)

    doc = scenes[command].doc
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings().with_overrides(args.log_level, args.log_file)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)
    setup_logging(settings.log_level, settings.log_file)

    if not args.scene:
        parser.print_help()
        sys.exit(1)

    if args.scene == 'help':
        _print_help(args.command)
        return

    args.colour = colour(*args.colour)
    scene = registry.get(args.scene)
    try:
        c = scene.render(args.width, args.height, args)
    except CanvasError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)
    logger.info('Rendered %s at %dx%d', scene.name, c.width, c.height)

    ppm = canvas_to_ppm(c)
    if args.format == 'ppm':
        sys.stdout.write(ppm)
    elif args.format == 'json':
        print(format_json(summarize(scene.name, c, ppm)))
    else:
        print(format_text(summarize(scene.name, c, ppm)))


if __name__ == '__main__':
    main()
