import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry import Point


def plot_points(points: list[Point], ax: Axes | None = None):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y, s=10)
    else:
        ax.scatter(x, y, s=10)


def plot_hull(hull: list[Point], ax: Axes | None = None, color: str = 'r'):
    """
    Plot hull as a closed polygon with highlighted vertices.
    """
    if ax is None:
        ax = plt.gca()

    closed = hull + hull[:1]
    xs = [p.x for p in closed]
    ys = [p.y for p in closed]
    ax.plot(xs, ys, c=color)
    ax.scatter(xs[:-1], ys[:-1], c=color, s=20)
    for i, pt in enumerate(hull):
        ax.annotate(str(i), (pt.x, pt.y), textcoords='offset points', xytext=(4, 4))


def plot_result(points: list[Point], hull: list[Point]):
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_points(points, ax=ax)
    plot_hull(hull, ax=ax)
    ax.set_aspect('equal')
    ax.grid()
    ax.set_title(f'Convex hull: {len(hull)} of {len(points)} points')
    return fig
