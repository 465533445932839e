"""
Engine configuration for Minimax TicTacToe.
Board geometry, scoring and display settings in one place.
"""


class EngineConfig:
    """
    Configuration class for the game engine.
    Components take an instance of this and fall back to the defaults.
    """
    
    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, flattened row by row
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, index = row * 3 + col
    
    # ==================== SEARCH SETTINGS ====================
    # Score of a win found at depth 0.
    # White wins score WIN_SCORE - depth, Black wins -WIN_SCORE + depth,
    # everything else scores the depth itself.
    WIN_SCORE = 99
    
    # ==================== CELL ENCODING ====================
    # Integer codes used by the embedding call (flat array of 9 ints)
    EMPTY_CODE = 0
    WHITE_CODE = 1
    BLACK_CODE = 2
    
    # ==================== DISPLAY SETTINGS ====================
    # Characters used when the board is printed on the console.
    # Empty cells show their own index.
    WHITE_SYMBOL = "o"
    BLACK_SYMBOL = "x"
    SEPARATOR = "------------"
    
    # ==================== DEBUG SETTINGS ====================
    # Print how many positions the search scored for each move
    DEBUG_MODE = False
