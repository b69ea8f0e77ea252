"""Grid rendering as text with optional Rich markup.

Each cell is three characters wide:
- ' # ' = wall
- ' . ' = empty tile
- ' x ' = destroyed city (ruin)
- ' P ' = your city
- ' C ' = computer city
The cursor cell is wrapped in brackets, e.g. '[P]'.
"""

from rich.markup import escape

from ..models import Cell, CityOwner, GameSession, Position

CELL_STYLES = {
    "wall": "grey70",
    "empty": "grey50",
    "ruin": "dark_red",
    "player": "cyan",
    "computer": "red",
}

CURSOR_STYLE = "bold blue on white"


class MapRenderer:
    """Renders the grid with coordinate labels and the cursor."""

    def render(self, session: GameSession, markup: bool = True) -> str:
        """Render the whole grid.

        Args:
            session: Session to render
            markup: If True, wrap cells in Rich style tags; otherwise plain text

        Returns:
            Multi-line string with a column header and numbered rows
        """
        size = session.grid.size
        header = "   " + "".join(f"{x:^3d}" for x in range(size))
        lines = [header]
        for y, row in enumerate(session.grid.cells):
            cells = [
                self._render_cell(cell, Position(x, y) == session.cursor, markup)
                for x, cell in enumerate(row)
            ]
            lines.append(f"{y:2d} " + "".join(cells))
        return "\n".join(lines)

    def _render_cell(self, cell: Cell, is_cursor: bool, markup: bool) -> str:
        """Render a single 3-character cell."""
        kind = self.cell_kind(cell)
        symbol = _SYMBOLS[kind]

        if is_cursor:
            text = f"[{symbol}]"
            if markup:
                return f"[{CURSOR_STYLE}]{escape(text)}[/]"
            return text

        text = f" {symbol} "
        if markup:
            return f"[{CELL_STYLES[kind]}]{escape(text)}[/]"
        return text

    @staticmethod
    def cell_kind(cell: Cell) -> str:
        """Classify a cell as wall, empty, ruin, player or computer."""
        if cell.blocked:
            return "wall"
        if cell.city is None:
            return "empty"
        if cell.city.owner is CityOwner.DESTROYED:
            return "ruin"
        if cell.city.owner is CityOwner.PLAYER:
            return "player"
        return "computer"


_SYMBOLS = {
    "wall": "#",
    "empty": ".",
    "ruin": "x",
    "player": "P",
    "computer": "C",
}
