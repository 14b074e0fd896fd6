"""2D renderer using matplotlib."""

import os
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.offsetbox import AnnotationBbox, OffsetImage
from typing import List, Optional, Tuple
from nbody_sim.physics.universe import Universe
from nbody_sim.render.base import Renderer

# Time delay for animation in seconds
FRAME_DELAY = 0.01
BACKGROUND_IMAGE = "starfield.jpg"


class Renderer2D(Renderer):
    """2D renderer using matplotlib.

    The view is fixed to [-R, R] in both axes, where R is the universe
    radius. Bodies are drawn on a dark background with their labels. If
    ``image_dir`` is given, a body whose label names an image file there is
    drawn as that sprite, and ``starfield.jpg`` from the same directory
    becomes the background.
    """

    def __init__(
        self,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        frame_delay: float = FRAME_DELAY,
        render_every: int = 1,
        show_labels: bool = True,
        interactive: bool = True,
        image_dir: Optional[str] = None,
        background: str = BACKGROUND_IMAGE,
        sprite_zoom: float = 0.5,
    ):
        """Initialize 2D renderer.

        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            frame_delay: Pause after each frame in seconds
            render_every: Draw only every k-th call to ``render``
            show_labels: Annotate bodies with their labels
            interactive: Show a window; if False, draw off-screen only
            image_dir: Directory holding label sprites and the background
            background: Background image file name inside ``image_dir``
            sprite_zoom: Scale factor applied to sprites
        """
        self.figsize = figsize
        self.dpi = dpi
        self.frame_delay = frame_delay
        self.render_every = max(1, int(render_every))
        self.show_labels = show_labels
        self.interactive = interactive
        self.image_dir = image_dir
        self.background = background
        self.sprite_zoom = sprite_zoom

        self.fig: Optional[Figure] = None
        self.ax = None
        self.scatter = None
        self.annotations = []
        self.sprites: List[Optional[AnnotationBbox]] = []
        self.initialized = False
        self.closed = False
        self.frame_count = 0

    def _image_path(self, name: str) -> Optional[str]:
        if self.image_dir is None:
            return None
        path = os.path.join(self.image_dir, name)
        return path if os.path.isfile(path) else None

    def _initialize(self, universe: Universe):
        """Create the figure on the first frame."""
        if self.initialized:
            return
        self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        self.ax.set_aspect('equal')
        self.ax.set_facecolor('black')
        radius = universe.radius if universe.radius > 0 else 1.0
        self.ax.set_xlim(-radius, radius)
        self.ax.set_ylim(-radius, radius)
        self.ax.set_xticks([])
        self.ax.set_yticks([])
        self.ax.set_title('N-body Simulation')

        background = self._image_path(self.background)
        if background is not None:
            self.ax.imshow(plt.imread(background), extent=(-radius, radius, -radius, radius),
                           zorder=0)
            # imshow resets the limits to the image extent
            self.ax.set_xlim(-radius, radius)
            self.ax.set_ylim(-radius, radius)

        masses = universe.masses
        # Log-scaled marker sizes so a star and a planet are both visible
        log_m = np.log10(masses)
        span = log_m.max() - log_m.min()
        if span > 0:
            sizes = 10 + 90 * (log_m - log_m.min()) / span
        else:
            sizes = np.full(len(masses), 40.0)
        self.scatter = self.ax.scatter(
            universe.positions[:, 0], universe.positions[:, 1],
            s=sizes, c='white', edgecolors='none', zorder=1
        )

        self.sprites = []
        for label, position in zip(universe.labels, universe.positions):
            path = self._image_path(label)
            if path is None:
                self.sprites.append(None)
                continue
            sprite = AnnotationBbox(OffsetImage(plt.imread(path), zoom=self.sprite_zoom),
                                    tuple(position), frameon=False, zorder=2)
            self.ax.add_artist(sprite)
            self.sprites.append(sprite)

        if self.show_labels:
            self.annotations = [
                self.ax.annotate(label, xy=tuple(position), color='lightgray', fontsize=8,
                                 xytext=(4, 4), textcoords='offset points')
                for label, position in zip(universe.labels, universe.positions)
            ]
        if self.interactive:
            plt.show(block=False)
        self.initialized = True

    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None:
            return False
        if not plt.fignum_exists(self.fig.number):
            self.fig = None
            self.ax = None
            self.closed = True
            return False
        return True

    def render(self, universe: Universe):
        """Render current frame.

        Once the window has been closed nothing is drawn again; the
        simulation driving this renderer keeps running.
        """
        if self.closed:
            return
        if self.initialized and not self._is_figure_open():
            return

        self.frame_count += 1
        if self.initialized and (self.frame_count - 1) % self.render_every != 0:
            return

        self._initialize(universe)
        self.scatter.set_offsets(universe.positions)
        for sprite, position in zip(self.sprites, universe.positions):
            if sprite is not None:
                sprite.xy = tuple(position)
                sprite.xybox = tuple(position)
        for annotation, position in zip(self.annotations, universe.positions):
            annotation.xy = tuple(position)

        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(self.frame_delay)
        else:
            self.fig.canvas.draw()

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
        self.fig = None
        self.ax = None
        self.scatter = None
        self.annotations = []
        self.sprites = []
        self.closed = True
