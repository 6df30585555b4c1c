"""Remote puzzle service access."""

from sudokudj.remote.client import PuzzleServiceClient, PuzzleServiceError

__all__ = ["PuzzleServiceClient", "PuzzleServiceError"]
