"""Binomial distribution with ``n`` trials and success probability ``p``."""

import math

from scipy.special import xlog1py, xlogy

from variates.config.constants import (
    BINOMIAL_INVERSION_MAX_TERMS,
    BINOMIAL_INVERSION_THRESHOLD,
    BINOMIAL_SQUEEZE_THRESHOLD,
)
from variates.distributions.base import DiscreteDistribution
from variates.exceptions import KOutOfRange, ParamTooBig, ParamTooSmall, TrialsInvalid
from variates.source import UniformSource
from variates.special_functions import log_factorial
from variates.support_utils import is_integer


def check_binomial_params(n, p) -> tuple[int, float]:
    p = float(p)
    if not p >= 0.0:
        raise ParamTooSmall(f"p must be at least 0, got {p}.")
    if p > 1.0:
        raise ParamTooBig(f"p must be at most 1, got {p}.")
    if not is_integer(n) or int(n) < 0:
        raise TrialsInvalid(f"n must be a non-negative integer, got {n!r}.")
    return int(n), p


def _stirling_tail(x: float) -> float:
    """Correction term of the Stirling series used by the BTPE final test."""
    x2 = x * x
    return (13860.0 - (462.0 - (132.0 - (99.0 - 140.0 / x2) / x2) / x2) / x2) / x / 166320.0


class Binomial(DiscreteDistribution):
    """Binomial(n, p) sampler and mass function.

    Reference:
        Voratas Kachitvichyanukul, Bruce Schmeiser,
        "Binomial Random Variate Generation",
        Communications of the ACM, 31(2), February 1988, 216-222.

    With ``p0 = min(p, 1 - p)``, ``n * p0 < 30`` is handled by inversion;
    anything larger by BTPE (triangle, parallelogram, exponential tails).
    Draws for ``p > 0.5`` are made with ``p0`` and reflected as ``n - x``.
    """

    name = "binomial"

    def _prepare(self, n, p):
        return check_binomial_params(n, p)

    def _method(self, n, p) -> str:
        if n * min(p, 1.0 - p) < BINOMIAL_INVERSION_THRESHOLD:
            return "inversion"
        return "btpe"

    def _draw(self, n, p, source: UniformSource):
        p0 = min(p, 1.0 - p)
        q = 1.0 - p0
        xnp = n * p0

        if xnp < BINOMIAL_INVERSION_THRESHOLD:
            ix = self._inversion(n, p0, q, source)
        else:
            ix = self._btpe(n, p0, q, xnp, source)

        if 0.5 < p:
            ix = n - ix
        return ix

    def _inversion(self, n: int, p0: float, q: float, source: UniformSource) -> int:
        qn = q**n
        r = p0 / q
        g = r * (n + 1)

        for _ in self._attempts("binomial inversion"):
            ix = 0
            f = qn
            u = source.next_uniform()
            while True:
                if u < f:
                    return ix
                if BINOMIAL_INVERSION_MAX_TERMS < ix:
                    break
                u -= f
                ix += 1
                f *= g / ix - r

    def _btpe(
        self, n: int, p0: float, q: float, xnp: float, source: UniformSource
    ) -> int:
        # Setup: the triangle, parallelogram and tail regions around the mode
        ffm = xnp + p0
        m = int(ffm)
        fm = float(m)
        xnpq = xnp * q
        p1 = int(2.195 * math.sqrt(xnpq) - 4.6 * q) + 0.5
        xm = fm + 0.5
        xl = xm - p1
        xr = xm + p1
        c = 0.134 + 20.5 / (15.3 + fm)
        al = (ffm - xl) / (ffm - xl * p0)
        xll = al * (1.0 + 0.5 * al)
        al = (xr - ffm) / (xr * q)
        xlr = al * (1.0 + 0.5 * al)
        p2 = p1 * (1.0 + c + c)
        p3 = p2 + c / xll
        p4 = p3 + c / xlr

        for _ in self._attempts("binomial BTPE"):
            u = source.next_uniform() * p4
            v = source.next_uniform()

            # Triangle
            if u < p1:
                return math.floor(xm - p1 * v + u)

            if u <= p2:
                # Parallelogram
                x = xl + (u - p1) / c
                v = v * c + 1.0 - abs(xm - x) / p1
                if v <= 0.0 or 1.0 < v:
                    continue
                ix = math.floor(x)
            elif u <= p3:
                # Left exponential tail
                if v <= 0.0:
                    continue
                ix = math.floor(xl + math.log(v) / xll)
                if ix < 0:
                    continue
                v = v * (u - p2) * xll
            else:
                # Right exponential tail
                if v <= 0.0:
                    continue
                ix = math.floor(xr - math.log(v) / xlr)
                if n < ix:
                    continue
                v = v * (u - p3) * xlr

            k = abs(ix - m)
            if k <= BINOMIAL_SQUEEZE_THRESHOLD or xnpq / 2.0 - 1.0 <= k:
                # Explicit evaluation of f(ix) / f(m) by recursion
                f = 1.0
                r = p0 / q
                g = (n + 1) * r
                if m < ix:
                    for i in range(m + 1, ix + 1):
                        f *= g / i - r
                elif ix < m:
                    for i in range(ix + 1, m + 1):
                        f /= g / i - r
                if v <= f:
                    return ix
                continue

            # Squeeze on log(f(ix) / f(m)) using the normal approximation
            amaxp = (k / xnpq) * ((k * (k / 3.0 + 0.625) + 0.1666666666666) / xnpq + 0.5)
            ynorm = -(k * k) / (2.0 * xnpq)
            alv = math.log(v)
            if alv < ynorm - amaxp:
                return ix
            if ynorm + amaxp < alv:
                continue

            # Final acceptance test with Stirling's formula
            x1 = ix + 1.0
            f1 = fm + 1.0
            z = n + 1.0 - fm
            w = n - ix + 1.0
            t = (
                xm * math.log(f1 / x1)
                + (n - m + 0.5) * math.log(z / w)
                + (ix - m) * math.log(w * p0 / (x1 * q))
                + _stirling_tail(f1)
                + _stirling_tail(z)
                + _stirling_tail(x1)
                + _stirling_tail(w)
            )
            if alv <= t:
                return ix

    def ln_pmf(self, k, n, p) -> float:
        n, p = check_binomial_params(n, p)
        if not is_integer(k) or not 0 <= int(k) <= n:
            raise KOutOfRange(f"k must be an integer in [0, {n}], got {k!r}.")
        k = int(k)
        ln_coeff = log_factorial(n) - log_factorial(k) - log_factorial(n - k)
        return ln_coeff + float(xlogy(k, p)) + float(xlog1py(n - k, -p))
