"""Tkinter GUI frontend for Conway's Game of Life."""

import argparse
import tkinter as tk
from typing import Optional

from ..core.board import Board
from ..core.config import BOARD_KINDS, create_board, is_bounded
from ..core.game import GameOfLife

BACKGROUND = "#000000"
CELL_COLOR = "#FFFFFF"


class TkinterGameOfLifeGUI:
    """Tkinter-based GUI for Conway's Game of Life.

    Keys: Space runs/pauses, S steps once, C clears, R fills randomly
    (bounded boards only), Escape quits. Left click brings a cell to life,
    right click kills it.
    """

    def __init__(
        self,
        master: tk.Tk,
        board: Optional[Board] = None,
        cols: int = 50,
        rows: int = 50,
        canvas_width: int = 500,
        canvas_height: int = 500,
        step_time_ms: int = 200,
        frame_rate: int = 60,
    ) -> None:
        """Initialize the GUI.

        Args:
            master: Root Tkinter window
            board: Board to display (defaults to an unbounded sparse board)
            cols: Number of visible columns
            rows: Number of visible rows
            canvas_width: Canvas width in pixels
            canvas_height: Canvas height in pixels
            step_time_ms: Minimum time between generations while running
            frame_rate: Redraw rate in frames per second

        Raises:
            ValueError: If the visible area has no columns or rows
        """
        self.master = master
        self.master.title("lifeboard")

        if board is not None and is_bounded(board):
            cols, rows = board.shape
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Visible area must be positive, got {cols}x{rows}")
        self.board = board if board is not None else create_board("sparse")
        self.game = GameOfLife(self.board)

        # Display parameters
        self.cols = cols
        self.rows = rows
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.cell_width = max(canvas_width // cols, 1)
        self.cell_height = max(canvas_height // rows, 1)

        # GUI state
        self.running = False
        self.simulate = False
        self.step_time_ms = step_time_ms
        self.update_interval = 1000 // frame_rate
        self.last_step_time = 0

        self.setup_ui()

    def setup_ui(self) -> None:
        """Set up the canvas and input bindings."""
        self.canvas = tk.Canvas(
            self.master,
            width=self.canvas_width,
            height=self.canvas_height,
            bg=BACKGROUND,
            highlightthickness=0,
        )
        self.canvas.pack()
        self.canvas.bind("<Button-1>", self.on_left_click)
        self.canvas.bind("<Button-3>", self.on_right_click)
        self.master.bind("<Key>", self.on_key)

    def cell_at(self, canvas_x: int, canvas_y: int) -> tuple:
        """Map canvas pixel coordinates to a cell."""
        return (canvas_x // self.cell_width, canvas_y // self.cell_height)

    def set_cell_at_position(self, canvas_x: int, canvas_y: int, alive: bool) -> None:
        """Set the cell under a canvas position."""
        x, y = self.cell_at(canvas_x, canvas_y)
        if 0 <= x < self.cols and 0 <= y < self.rows:
            self.board.set(x, y, alive)
            self.redraw()

    def on_left_click(self, event: tk.Event) -> None:
        """Bring the clicked cell to life."""
        self.set_cell_at_position(event.x, event.y, True)

    def on_right_click(self, event: tk.Event) -> None:
        """Kill the clicked cell."""
        self.set_cell_at_position(event.x, event.y, False)

    def on_key(self, event: tk.Event) -> None:
        """Handle key presses."""
        key = event.keysym.lower()
        if key == "space":
            self.toggle_simulation()
        elif key == "s":
            self.step()
        elif key == "c":
            self.clear()
        elif key == "r":
            self.randomize()
        elif key == "escape":
            self.quit()

    def toggle_simulation(self) -> None:
        """Toggle continuous stepping."""
        self.simulate = not self.simulate

    def step(self) -> None:
        """Advance one generation and redraw."""
        self.game.step()
        self.redraw()

    def clear(self) -> None:
        """Kill every cell."""
        self.game.reset()
        self.redraw()

    def randomize(self) -> None:
        """Fill a bounded board randomly; unbounded boards ignore this."""
        if not is_bounded(self.board):
            return
        self.board.randomize()
        self.redraw()

    def quit(self) -> None:
        """Stop the update loop and close the window."""
        self.running = False
        self.master.destroy()

    def redraw(self) -> None:
        """Redraw all visible living cells."""
        self.canvas.delete("all")
        for x, y in self.board.iterate_live_cells():
            if not (0 <= x < self.cols and 0 <= y < self.rows):
                continue
            x1 = x * self.cell_width
            y1 = y * self.cell_height
            self.canvas.create_rectangle(
                x1, y1, x1 + self.cell_width, y1 + self.cell_height, fill=CELL_COLOR, outline=""
            )

    def start(self) -> None:
        """Start the update loop."""
        self.running = True
        self.redraw()
        self.update_loop()

    def update_loop(self) -> None:
        """Main update loop."""
        if not self.running:
            return

        current_time = self.master.tk.call("clock", "milliseconds")
        if self.simulate and current_time - self.last_step_time >= self.step_time_ms:
            self.step()
            self.last_step_time = current_time

        self.master.after(self.update_interval, self.update_loop)


def main(argv: Optional[list] = None) -> None:
    """Main entry point for the Tkinter GUI."""
    parser = argparse.ArgumentParser(description="Interactive Game of Life board")
    parser.add_argument("-b", "--board", default="sparse", choices=list(BOARD_KINDS), help="Board engine to use")
    parser.add_argument("-W", "--width", type=int, default=50, help="Board width in cells (default: 50)")
    parser.add_argument("-H", "--height", type=int, default=50, help="Board height in cells (default: 50)")
    parser.add_argument("--step-time", type=int, default=200, help="Milliseconds between generations (default: 200)")
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    if args.step_time <= 0:
        parser.error("step time must be positive")

    if args.board == "sparse":
        board = create_board(args.board)
    else:
        board = create_board(args.board, args.width, args.height)

    root = tk.Tk()
    root.resizable(False, False)

    app = TkinterGameOfLifeGUI(root, board, cols=args.width, rows=args.height, step_time_ms=args.step_time)
    app.start()

    root.mainloop()


if __name__ == "__main__":
    main()
