import argparse
import logging
import os
import sys

from convex_hull_graham import HullBuilder
from geometry import Point, HullError, InvalidInput

logger = logging.getLogger('convex_hull')

DEMO_POINTS = [
    (3, 3), (3, -3), (-3, 3), (-3, -3),
    (1, -1), (-1, 1), (2, -2), (3, -1),
    (4, 4), (-7, 5), (4, 2), (10, 10), (3, -1), (3, -6),
    (-1, -8), (-8, -5), (16, 17), (17, 17),
]


def load_points(filename: str) -> list[Point]:
    """
    Read points from a text file: the number of points on the first line,
    then one point per line as two integers separated by whitespace.
    """
    points = []
    with open(filename, 'r', encoding='utf-8') as f:
        try:
            lines = f.readlines()
        except UnicodeDecodeError as e:
            raise InvalidInput(f'{filename}: not a UTF-8 text file ({e.reason})') from None

    header = lines[0].strip() if lines else ''
    try:
        n = int(header)
    except ValueError:
        raise InvalidInput(f'{filename}: expected the number of points, got {header!r}') from None

    for line_no, line in enumerate(lines[1:], start=2):
        line = line.strip()
        if not line:
            continue
        try:
            x, y = map(int, line.split())
        except ValueError:
            raise InvalidInput(f'{filename}:{line_no}: expected two integers, got {line!r}') from None
        points.append(Point(x, y))

    if len(points) != n:
        raise InvalidInput(f'{filename}: header declares {n} points, found {len(points)}')
    return points


def format_hull(hull: list[Point]) -> str:
    lines = ['Convex Hull:']
    lines.extend(f'{pt.x} {pt.y}' for pt in hull)
    return '\n'.join(lines) + '\n'


def save_hull(filename: str, hull: list[Point]):
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(format_hull(hull))


def show_plot(points: list[Point], hull: list[Point], filename: str | None = None):
    import matplotlib
    if filename is not None:
        matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    from visualization import plot_result

    fig = plot_result(points, hull)
    if filename is None:
        plt.show()
    else:
        fig.savefig(filename)
        logger.info('Plot saved to %s', os.path.basename(filename))
    plt.close(fig)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Convex hull of a set of integer points.')
    parser.add_argument('points_file', nargs='?',
                        help='file with the number of points followed by "x y" lines '
                             '(built-in demo points if omitted)')
    parser.add_argument('-o', '--output', help='also write the hull to this file')
    parser.add_argument('--bits', type=int, default=None,
                        help='check that arithmetic fits into a signed integer of this width')
    parser.add_argument('--plot', action='store_true', help='show points and hull')
    parser.add_argument('--save-plot', metavar='FILE', help='save the plot to FILE instead of showing it')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')

    args = parser.parse_args(argv)
    if args.bits is not None and args.bits < 2:
        parser.error(f'--bits must be at least 2, got {args.bits}')
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        if args.points_file:
            points = load_points(args.points_file)
            logger.info('Loaded %d points from %s', len(points), os.path.basename(args.points_file))
        else:
            points = [Point(x, y) for x, y in DEMO_POINTS]

        hull = HullBuilder(bits=args.bits).compute_hull(points)
        sys.stdout.write(format_hull(hull))

        if args.output:
            save_hull(args.output, hull)
            logger.info('Hull saved to %s', os.path.basename(args.output))
        if args.plot or args.save_plot:
            show_plot(points, hull, filename=args.save_plot)
    except (HullError, OSError) as e:
        logger.error('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
