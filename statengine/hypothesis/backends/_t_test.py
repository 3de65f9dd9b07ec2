"""
Student's t-tests: one-sample and pooled-variance two-sample.

Both accept 'two.sided', 'less' and 'greater'. Constant data never
reaches here; the design rejects it before any statistic is formed.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from statengine.descriptive import _moments
from statengine.distributions import critical_value, p_value, t_critical
from statengine.hypothesis import _interpretation
from statengine.hypothesis._common import (
    TTestParams,
    TwoSampleTTestParams,
    conclusion_for,
)

if TYPE_CHECKING:
    from statengine.hypothesis.design import HypothesisDesign

LARGE_DF = 30


def t_one_sample(design: HypothesisDesign) -> tuple[TTestParams, list[str]]:
    """One-sample t-test: H0: mean(x) = mu."""
    x = design.x
    mu = design.mu
    alpha = design.alpha
    alternative = design.alternative
    warnings_list: list[str] = []

    n = len(x)
    mean_x = _moments.mean(x)
    sd_x = _moments.sample_sd(x)
    se = sd_x / math.sqrt(n)
    df = float(n - 1)

    t_stat = (mean_x - mu) / se
    p = p_value(t_stat, 't', alternative, df=df)
    margin = _t_margin(se, df, alpha, alternative)
    significant = p < alpha
    _note_large_df(df, warnings_list)

    return TTestParams(
        statistic=t_stat,
        p_value=p,
        critical_value=critical_value(alpha, 't', alternative, df=df),
        df=df,
        sample_size=n,
        sample_mean=mean_x,
        sample_sd=sd_x,
        confidence_interval=(mean_x - margin, mean_x + margin),
        alpha=alpha,
        alternative=alternative,
        conclusion=conclusion_for(significant),
        interpretation=_interpretation.one_sample_mean(
            alpha, significant, alternative, mean_x, mu,
        ),
        null_mean=mu,
    ), warnings_list


def t_two_sample(design: HypothesisDesign) -> tuple[TwoSampleTTestParams, list[str]]:
    """Pooled-variance two-sample t-test: H0: mean(a) = mean(b)."""
    a = design.x
    b = design.y
    alpha = design.alpha
    alternative = design.alternative
    warnings_list: list[str] = []

    n1, n2 = len(a), len(b)
    mean1, mean2 = _moments.mean(a), _moments.mean(b)
    var1, var2 = _moments.sample_variance(a), _moments.sample_variance(b)
    diff = mean1 - mean2

    df = float(n1 + n2 - 2)
    pooled_sd = math.sqrt(((n1 - 1) * var1 + (n2 - 1) * var2) / df)
    se = pooled_sd * math.sqrt(1.0 / n1 + 1.0 / n2)

    t_stat = diff / se
    p = p_value(t_stat, 't', alternative, df=df)
    margin = _t_margin(se, df, alpha, alternative)
    significant = p < alpha
    _note_large_df(df, warnings_list)

    return TwoSampleTTestParams(
        statistic=t_stat,
        p_value=p,
        critical_value=critical_value(alpha, 't', alternative, df=df),
        df=df,
        sample_size=n1 + n2,
        sample_mean=diff,
        sample_sd=pooled_sd,
        confidence_interval=(diff - margin, diff + margin),
        alpha=alpha,
        alternative=alternative,
        conclusion=conclusion_for(significant),
        interpretation=_interpretation.two_sample_mean(
            alpha, significant, alternative, mean1, mean2,
        ),
        mean_difference=diff,
        pooled_sd=pooled_sd,
        group_means=(mean1, mean2),
        sample_sizes=(n1, n2),
    ), warnings_list


# --- Helpers ---

def _t_margin(se: float, df: float, alpha: float, alternative: str) -> float:
    """Half-width of the interval around the estimate."""
    tail = alpha / 2.0 if alternative == "two.sided" else alpha
    return t_critical(tail, df) * se


def _note_large_df(df: float, warnings_list: list[str]) -> None:
    if df >= LARGE_DF:
        warnings_list.append(
            f"df = {df:g} >= {LARGE_DF}: the normal approximation to the "
            f"t distribution would give nearly the same result"
        )
