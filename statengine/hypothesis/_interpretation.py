"""
English interpretation sentences for test decisions.
"""

from __future__ import annotations

# Null hypothesis relation for each alternative
_NULL_RELATION = {"two.sided": "=", "less": ">=", "greater": "<="}


def _lead(alpha: float, significant: bool, null: str) -> str:
    verb = "reject" if significant else "accept"
    return f"At significance level alpha={alpha:g}, {verb} the null hypothesis H0: {null}."


def one_sample_mean(
    alpha: float, significant: bool, alternative: str,
    sample_mean: float, null_mean: float,
) -> str:
    """Sentence for z and one-sample t tests."""
    null = f"mu {_NULL_RELATION[alternative]} {null_mean:g}"
    if alternative == "two.sided":
        detail = (
            f"The sample mean {sample_mean:.4f} "
            f"{'differs' if significant else 'does not differ'} significantly "
            f"from the hypothesized mean {null_mean:g}."
        )
    else:
        direction = "less" if alternative == "less" else "greater"
        detail = (
            f"The sample mean {sample_mean:.4f} is "
            f"{'' if significant else 'not '}significantly {direction} "
            f"than the hypothesized mean {null_mean:g}."
        )
    return f"{_lead(alpha, significant, null)} {detail}"


def two_sample_mean(
    alpha: float, significant: bool, alternative: str,
    mean_a: float, mean_b: float,
) -> str:
    null = f"mu1 {_NULL_RELATION[alternative]} mu2"
    if alternative == "two.sided":
        detail = (
            f"The group means {mean_a:.4f} and {mean_b:.4f} "
            f"{'differ' if significant else 'do not differ'} significantly."
        )
    else:
        direction = "less" if alternative == "less" else "greater"
        detail = (
            f"The first group mean {mean_a:.4f} is "
            f"{'' if significant else 'not '}significantly {direction} "
            f"than the second group mean {mean_b:.4f}."
        )
    return f"{_lead(alpha, significant, null)} {detail}"


def goodness_of_fit(alpha: float, significant: bool) -> str:
    null = "the data follow the expected distribution"
    detail = (
        "The observed counts do not fit the expected distribution."
        if significant
        else "The observed counts fit the expected distribution."
    )
    return f"{_lead(alpha, significant, null)} {detail}"


def normality(alpha: float, significant: bool) -> str:
    null = "the data are normally distributed"
    detail = (
        "The data are not consistent with a normal distribution."
        if significant
        else "The data are consistent with a normal distribution."
    )
    return f"{_lead(alpha, significant, null)} {detail}"
