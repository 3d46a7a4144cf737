"""An undirected graph stored as an adjacency matrix."""

from dsalab.errors import InvalidPositionError

__all__ = ["Graph"]

MAX_VERTICES = 20


class Graph:
    """An undirected graph over vertices 0 .. vertices-1."""

    def __init__(self, vertices: int) -> None:
        if not 0 <= vertices <= MAX_VERTICES:
            raise ValueError(
                f"number of vertices must be between 0 and {MAX_VERTICES}: {vertices}"
            )
        self.vertices = vertices
        self._matrix = [[0] * vertices for _ in range(vertices)]

    def _valid(self, i: int, j: int) -> bool:
        return 0 <= i < self.vertices and 0 <= j < self.vertices

    def _check(self, i: int, j: int) -> None:
        if not self._valid(i, j):
            raise InvalidPositionError(f"Invalid Vertex Index! ({i}, {j})")

    def add_edge(self, i: int, j: int) -> None:
        """Connect vertices ``i`` and ``j``; raise InvalidPositionError if either is invalid."""
        self._check(i, j)
        self._matrix[i][j] = 1
        self._matrix[j][i] = 1

    def remove_edge(self, i: int, j: int) -> None:
        """Disconnect vertices ``i`` and ``j``; invalid indices are ignored."""
        if not self._valid(i, j):
            return
        self._matrix[i][j] = 0
        self._matrix[j][i] = 0

    def has_edge(self, i: int, j: int) -> bool:
        """Return True if vertices ``i`` and ``j`` are connected."""
        self._check(i, j)
        return self._matrix[i][j] == 1

    @property
    def matrix(self) -> tuple[tuple[int, ...], ...]:
        """A read-only copy of the adjacency matrix."""
        return tuple(tuple(row) for row in self._matrix)

    def render(self) -> str:
        """Return the adjacency matrix as text with row and column labels."""
        header = "   " + " ".join(str(i) for i in range(self.vertices))
        rows = [
            f"{i}: " + " ".join(str(cell) for cell in row)
            for i, row in enumerate(self._matrix)
        ]
        return "\n".join([header, *rows])

    def __repr__(self) -> str:
        return f"Graph({self.vertices})"