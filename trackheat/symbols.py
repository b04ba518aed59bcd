"""Count-to-symbol scale for rendering a grid."""

from typing import List, Sequence, Union

from .config import validate_scale
from .grid import Grid


def symbol_tier(count: int, tiers: int, bucket_size: int) -> int:
    """Index of the tier a count falls into.

    Tier k covers counts [k*N, (k+1)*N - 1]; the last tier is open-ended.
    """
    return min(count // bucket_size, tiers - 1)


def symbol_for_count(count: int, alphabet: Union[str, Sequence[str]], bucket_size: int) -> str:
    """Pick the symbol for one cell count."""
    validate_scale(alphabet, bucket_size)
    return alphabet[symbol_tier(count, len(alphabet), bucket_size)]


def map_symbols(grid: Grid, alphabet: Union[str, Sequence[str]], bucket_size: int) -> List[List[str]]:
    """Map every cell of a grid to a symbol.

    Args:
        grid: Populated count grid
        alphabet: Symbols ordered sparsest to densest
        bucket_size: Number of counts per symbol step

    Returns:
        Rows of symbols with the same dimensions as the grid.
    """
    validate_scale(alphabet, bucket_size)
    tiers = len(alphabet)
    return [
        [alphabet[symbol_tier(count, tiers, bucket_size)] for count in row]
        for row in grid.to_rows()
    ]
