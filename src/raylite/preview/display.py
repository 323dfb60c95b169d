"""Matplotlib-based preview of rendered canvases.

Example:
    >>> from raylite.preview.display import show_preview
    >>> from raylite.scene.scenes import room_scene
    >>>
    >>> world, camera = room_scene(200, 100, 1.0)
    >>> show_preview(camera.render(world), title="Room")
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from raylite.preview.canvas import Canvas


def apply_gamma(
    image: npt.NDArray[np.float64],
    gamma: float = 2.2,
) -> npt.NDArray[np.float64]:
    """Clamp a linear image to [0, 1] and gamma encode it.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma value; 1.0 only clamps.

    Returns:
        The encoded image, in [0, 1].
    """
    # Clamp first so negative channels cannot produce NaN
    result = np.clip(image, 0.0, 1.0)
    if gamma == 1.0:
        return result
    return np.power(result, 1.0 / gamma)


def show_preview(
    canvas: Canvas,
    *,
    gamma: float = 2.2,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Display a canvas in a Matplotlib window.

    Args:
        canvas: The rendered canvas.
        gamma: Display gamma (default 2.2 for sRGB monitors).
        title: Figure title; defaults to the image size.
        figsize: Figure size in inches (width, height).
        block: Whether to block until the window is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(apply_gamma(canvas.to_numpy(), gamma))
    ax.axis("off")
    ax.set_title(title if title is not None else f"Render Preview - {canvas.width}x{canvas.height}")

    plt.tight_layout()
    plt.show(block=block)
