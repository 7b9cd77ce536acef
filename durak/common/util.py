from typing import Hashable, Iterable, List, Mapping, Optional


def calculate_chi_square(
    observed_values: List[float], expected_values: List[float]
) -> float:
    """
    Calculate the chi-square statistic given lists of observed and expected values.

    :param observed_values: A list of observed values
    :param expected_values: A list of expected values
    :return: The calculated chi-square statistic
    :raises ValueError: If the observed_values and expected_values lists do not have the same length
    """
    if len(observed_values) != len(expected_values):
        raise ValueError("Observed and expected value lists must have the same length.")

    return sum((o - e) ** 2 / e for o, e in zip(observed_values, expected_values))


def chi_square_uniform(
    counts: Mapping[Hashable, int], categories: Optional[Iterable[Hashable]] = None
) -> float:
    """
    Chi-square statistic of observed category counts against a uniform distribution.

    :param counts: Observed count per category
    :param categories: All possible categories; those missing from `counts` count as zero.
                       Defaults to the keys of `counts`.
    :return: The chi-square statistic
    """
    keys = list(categories) if categories is not None else list(counts)
    if not keys:
        raise ValueError("At least one category is required.")
    observed = [counts.get(key, 0) for key in keys]
    expected = [sum(observed) / len(keys)] * len(keys)
    return calculate_chi_square(observed, expected)
