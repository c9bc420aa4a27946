#!/usr/bin/env python3
"""
Example usage of the lifeboard package.
"""

from lifeboard import DenseCachedBoard, GameOfLife, PatternLibrary, SparseCachedBoard


def main():
    """Demonstrate programmatic usage of the lifeboard package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    # A glider on a small bounded board
    board = DenseCachedBoard(12, 12)
    game = GameOfLife(board)
    glider.apply_to_board(board, offset_x=2, offset_y=8)

    print("Initial state:")
    print(board)
    print(f"Population: {game.population}")
    print()

    for _ in range(8):
        game.step()
        print(f"Generation {game.generation}:")
        print(board)
        print()

    # The acorn needs room to grow, so use the unbounded board
    acorn = SparseCachedBoard()
    library.get_pattern("Acorn").apply_to_board(acorn)
    game = GameOfLife(acorn)
    game.run(5206)

    print("Acorn statistics after 5206 generations:")
    for key, value in game.get_statistics().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
