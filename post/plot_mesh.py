# -*- coding: utf-8 -*-
# Earclip/post/plot_mesh.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/8/2026

Purpose
-------
Quick visualization of an ear-clipping result using matplotlib.

Main Tasks
----------
    1) Pick a headless-safe backend when no display is available.
    2) Plot the polygon outline and the triangle wireframes (`plot_triangulation`),
       optionally shading triangles and labelling them in clipping order.
"""

import os
import numpy as np


def _get_pyplot():
    """
    Import matplotlib.pyplot with a headless-safe backend if needed.

    Raises
    ------
    RuntimeError
        If matplotlib cannot be imported.
    """
    try:
        import matplotlib
        # Choose Agg when DISPLAY is not set to avoid GUI backend errors in headless/CI.
        if not os.environ.get("DISPLAY"):
            matplotlib.use("Agg")  # must be set before importing pyplot
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError("matplotlib is required for plotting: {}".format(e))


def plot_triangulation(
    vertices,
    triangles,
    show=True,
    save_path=None,
    *,
    ax=None,
    fill=True,
    label_order=False,
    linewidth=0.8,
):
    """
    Plot a polygon and its triangulation.

    Parameters
    ----------
    vertices : array-like
        (N,2) polygon vertices (implicitly closed).
    triangles : array-like
        (T,3,2) triangle coordinates as returned by `mesh.api.triangulate`, or (T,3)
        indices into `vertices` as returned by `triangulate_indices`.
    show : bool, optional
        Whether to display the figure (ignored on a non-GUI backend). Default True.
    save_path : str, optional
        If given, save the figure (PNG) to this path.
    ax : matplotlib.axes.Axes, optional
        Existing Axes to draw on; if None, a figure is created.
    fill : bool, optional
        Shade triangles with a light fill. Default True.
    label_order : bool, optional
        Write the clipping order index at each triangle centroid. Default False.
    linewidth : float, optional
        Line width for triangle edges. Default 0.8.

    Returns
    -------
    matplotlib.axes.Axes
        The Axes drawn on.
    """
    plt = _get_pyplot()
    from matplotlib.collections import LineCollection, PolyCollection

    P = np.asarray(vertices, dtype=float)
    T = np.asarray(triangles)
    if T.ndim == 2 and T.shape[-1] == 3 and np.issubdtype(T.dtype, np.integer):
        T = P[T]
    T = np.asarray(T, dtype=float).reshape(-1, 3, 2)

    created_fig = False
    if ax is None:
        fig = plt.figure(figsize=(7, 7))
        ax = fig.add_subplot(111)
        created_fig = True

    if fill and len(T):
        ax.add_collection(PolyCollection(T, facecolors="tab:blue", alpha=0.15, edgecolors="none"))

    # Edge segments for a LineCollection (faster than per-polygon plot calls)
    segs = []
    for k in range(3):
        segs.extend(np.stack([T[:, k], T[:, (k + 1) % 3]], axis=1))
    if segs:
        ax.add_collection(LineCollection(segs, linewidths=linewidth, colors="tab:blue"))

    closed = np.vstack((P, P[:1])) if len(P) else P
    ax.plot(closed[:, 0], closed[:, 1], color="k", lw=1.5)
    ax.scatter(P[:, 0], P[:, 1], s=10, color="k", zorder=3)

    if label_order:
        for i, c in enumerate(T.mean(axis=1)):
            ax.text(c[0], c[1], str(i), ha="center", va="center", fontsize=8)

    ax.set_aspect("equal", adjustable="datalim")
    ax.autoscale_view()
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title("Ear clipping: {} triangles".format(len(T)))

    if save_path:
        ax.figure.savefig(save_path, dpi=300, bbox_inches="tight")

    if created_fig:
        backend = plt.get_backend().lower()
        if show and not backend.startswith("agg"):
            plt.show()
        else:
            plt.close(ax.figure)
    return ax
