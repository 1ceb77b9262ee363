import hypothesis.strategies


def tap_counts(
    min_value: int = 1,
    max_value: int = 256,
) -> hypothesis.strategies.SearchStrategy[int]:
    """Strategy for filter tap counts."""
    return hypothesis.strategies.integers(
        min_value=min_value, max_value=max_value
    )
