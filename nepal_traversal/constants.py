from nepal_traversal.types import Difficulty

# Puzzle generation
MAX_PUZZLE_GENERATION_ATTEMPTS = 1000
MIN_INTERMEDIATE_DISTRICTS = 1
MAX_INTERMEDIATE_DISTRICTS = 10  # recommended maximum, larger puzzles only warn

# Intermediate-count bands (inclusive) per named difficulty
DIFFICULTY_BANDS = {
    Difficulty.EASY: (0, 2),
    Difficulty.MEDIUM: (3, 5),
    Difficulty.HARD: (6, 10),
}

# Guess feedback
FEEDBACK_BFS_MAX_DEPTH = 4
NEAR_DISTANCE = 1
MEDIUM_DISTANCE = 2

# Input handling
MAX_INPUT_LENGTH = 100
SUGGESTION_LIMIT = 8
SUGGESTION_MIN_CHARS = 3

# Logging
DEFAULT_LOG_LEVEL = "INFO"
