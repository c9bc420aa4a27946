"""Common Conway's Game of Life patterns."""

from typing import Dict, List, Optional, Tuple

from .board import Board, Cell


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Cell], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def apply_to_board(
        self, board: Board, offset_x: int = 0, offset_y: int = 0, clear: bool = True
    ) -> None:
        """Apply this pattern to a board.

        Args:
            board: Target board
            offset_x: Horizontal offset
            offset_y: Vertical offset
            clear: Whether to clear the board first
        """
        if clear:
            board.clear()
        for x, y in self.cells:
            try:
                board.set(x + offset_x, y + offset_y, True)
            except IndexError:
                # Skip cells that fall outside board bounds
                pass

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size.

        Returns:
            Tuple of (width, height)
        """
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def translated(self, dx: int, dy: int) -> "Pattern":
        """Return a copy of this pattern moved by (dx, dy)."""
        return Pattern(self.name, [(x + dx, y + dy) for x, y in self.cells], self.description)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates normalized to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description)

        min_x, min_y, _, _ = self.get_bounding_box()
        return self.translated(-min_x, -min_y)

    def __eq__(self, other: object) -> bool:
        """Patterns are equal when they cover the same cells."""
        if not isinstance(other, Pattern):
            return NotImplemented
        return set(self.cells) == set(other.cells)

    @classmethod
    def from_board(cls, board: Board, name: str, description: str = "") -> "Pattern":
        """Create pattern from the living cells of a board.

        Args:
            board: Source board
            name: Pattern name
            description: Optional description

        Returns:
            New Pattern instance
        """
        return cls(name, sorted(board.iterate_live_cells()), description)


class PatternLibrary:
    """Manages a collection of patterns."""

    CATEGORIES: Dict[str, List[str]] = {
        "Still Life": ["Block", "Beehive"],
        "Oscillators": ["Blinker", "Toad", "Beacon"],
        "Spaceships": ["Glider", "Lightweight Spaceship"],
        "Methuselahs": ["R-pentomino", "Diehard", "Acorn"],
    }

    def __init__(self) -> None:
        """Initialize pattern library with the built-in patterns."""
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(
            Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block")
        )

        self.add_pattern(
            Pattern(
                "Beehive",
                [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)],
                "Beehive still life",
            )
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern(
                "Toad",
                [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)],
                "Period-2 oscillator",
            )
        )

        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)],
                "Period-2 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [(0, 0), (1, 0), (2, 0), (2, 1), (1, 2)],
                "Smallest spaceship, period-4, travels up and to the right",
            )
        )

        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (3, 0), (4, 1), (0, 2), (4, 2), (1, 3), (2, 3), (3, 3), (4, 3)],
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )

        self.add_pattern(
            Pattern(
                "Diehard",
                [(6, 0), (0, 1), (1, 1), (1, 2), (5, 2), (6, 2), (7, 2)],
                "Dies after exactly 130 generations",
            )
        )

        self.add_pattern(
            Pattern(
                "Acorn",
                [(0, 0), (1, 0), (1, 2), (3, 1), (4, 0), (5, 0), (6, 0)],
                "Takes 5206 generations to stabilize at 633 cells",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories = {cat: list(names) for cat, names in self.CATEGORIES.items()}
        categories["Custom"] = []

        all_builtin = set()
        for cat_patterns in self.CATEGORIES.values():
            all_builtin.update(cat_patterns)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        # Remove empty categories
        return {cat: patterns for cat, patterns in categories.items() if patterns}
