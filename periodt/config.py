"""
Periodt Configuration

Layout and rendering parameters. Defaults reproduce the classic
periodic-table silhouette.
"""
from dataclasses import dataclass
from typing import Literal, Optional, Tuple


SizingStrategy = Literal['fraction', 'sqrt']


@dataclass
class LayoutConfig:
    """
    Layout pipeline configuration

    Controls grid sizing, the stepped "wings" of the silhouette and the
    post-placement compaction.
    """

    # ============================================================
    # GRID SIZING
    # ============================================================
    sizing: SizingStrategy = 'fraction'
    """Dimension strategy: 'fraction' (N/5 x N/13 with 10x3 floor) or 'sqrt'"""

    ensure_capacity: bool = True
    """Grow rows until the mask has at least one active cell per item"""

    # ============================================================
    # SILHOUETTE
    # ============================================================
    wing_steps: Tuple[Tuple[int, int], ...] = ((2, 2), (2, 4), (5, 5))
    """(left, right) active cell counts for each stepped top row"""

    # ============================================================
    # ORDERING
    # ============================================================
    randomize: bool = False
    """Shuffle group order (groups move as whole blocks)"""

    seed: Optional[int] = None
    """Seed for the group-order generator (None = fresh entropy)"""

    # ============================================================
    # COMPACTION
    # ============================================================
    trim_trailing: bool = False
    """Drop trailing columns that are filler in every row"""

    def __post_init__(self) -> None:
        if self.sizing not in ('fraction', 'sqrt'):
            raise ValueError(f"Unknown sizing strategy: {self.sizing!r}")
        for left, right in self.wing_steps:
            if left < 0 or right < 0:
                raise ValueError(f"Wing step counts must be non-negative, got {(left, right)}")

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def compact(cls) -> 'LayoutConfig':
        """
        Square-ish grid with empty trailing columns removed

        Example:
            >>> config = LayoutConfig.compact()
            >>> engine = LayoutEngine(config)
        """
        return cls(sizing='sqrt', trim_trailing=True)

    @classmethod
    def shuffled(cls, seed: Optional[int] = None) -> 'LayoutConfig':
        """Classic sizing with randomized group order"""
        return cls(randomize=True, seed=seed)


@dataclass
class RenderConfig:
    """
    Text and figure rendering parameters
    """

    # ============================================================
    # TEXT
    # ============================================================
    cell_width: int = 3
    """Characters per cell in text output"""

    # ============================================================
    # FIGURE
    # ============================================================
    tile_size: float = 0.6
    """Figure inches per grid cell"""

    tile_gap: float = 0.06
    """Gap between tiles (fraction of a cell)"""

    colormap: str = 'tab20'
    """Qualitative matplotlib colormap, one colour per key"""

    label_fontsize: int = 10
    """Font size for tile labels"""

    filler_color: str = '#f2f2f2'
    """Colour of active cells left empty"""

    show_filler: bool = False
    """Draw empty active cells as pale tiles"""

    dpi: int = 150
    """DPI for saved figures"""

    def __post_init__(self) -> None:
        if self.cell_width < 1:
            raise ValueError(f"cell_width must be >= 1, got {self.cell_width}")

    @classmethod
    def presentation(cls) -> 'RenderConfig':
        """
        Larger tiles and fonts for screen viewing

        Example:
            >>> config = RenderConfig.presentation()
        """
        config = cls()
        config.tile_size = 0.9
        config.label_fontsize = 14
        config.show_filler = True
        config.dpi = 200
        return config
