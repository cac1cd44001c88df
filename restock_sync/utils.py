from typing import Sequence, TypeVar

T = TypeVar("T")


def chunked(items: Sequence[T], size: int) -> list[list[T]]:
    """
    Splits a sequence into consecutive batches of at most `size` items.
    Shopify caps both search terms and mutation inputs per call, so every
    batched request goes through here.
    """
    if size < 1:
        raise ValueError(f"Batch size must be at least 1, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]
