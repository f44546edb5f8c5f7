"""Decimal contexts shared by the engines and models."""

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Inexact, localcontext


def exact_context():
    """Context in which sums, differences and products are never rounded.

    Inexact is trapped, so an operation that would have to round raises
    ``decimal.Inexact`` instead of losing digits.
    """
    ctx = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)
    ctx.traps[Inexact] = True
    return localcontext(ctx)


def rounded_context(precision: int):
    """Context for division, rounding to ``precision`` significant digits."""
    ctx = Context(prec=precision)
    ctx.traps[Inexact] = False
    return localcontext(ctx)
