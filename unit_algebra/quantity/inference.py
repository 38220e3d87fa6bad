"""Unit inference for multiplication and division of quantities.

The rules are checked in order and the first match wins. They cancel or
combine only the outermost layer of the left operand; nothing is normalised.
"""

import logging

from ..units import NONE, Power, Product, Ratio, UnitExpr

logger = logging.getLogger(__name__)


def multiply_units(left: UnitExpr, right: UnitExpr) -> UnitExpr:
    """Infer the unit of ``left * right``.

    Rules:
        1. ``u^p * u`` gives ``u^(p+1)``.
        2. ``u1/u2 * u2`` gives ``u1``.
        3. ``u * u`` gives ``u^2``.
        4. Anything else gives ``left*right``.

    Rule 1 runs before rule 3 so repeated multiplication grows the exponent
    instead of nesting powers.

    Args:
        left: Unit of the left operand.
        right: Unit of the right operand.

    Returns:
        The unit of the product.
    """
    match left:
        case Power(base, exponent) if base == right:
            logger.debug("%s * %s: raising exponent", left, right)
            return Power(base, exponent + 1)
        case Ratio(numerator, denominator) if denominator == right:
            logger.debug("%s * %s: cancelling denominator", left, right)
            return numerator
    if left == right:
        logger.debug("%s * %s: squaring", left, right)
        return Power(left, 2)
    logger.debug("%s * %s: forming product", left, right)
    return Product(left, right)


def divide_units(left: UnitExpr, right: UnitExpr) -> UnitExpr:
    """Infer the unit of ``left / right``.

    Rules:
        1. ``u1*u2 / u2`` gives ``u1``.
        2. ``u / u`` gives the dimensionless unit.
        3. Anything else gives ``left/right``.

    Powers are not special-cased: ``m^3 / m`` is ``m^3/m``.

    Args:
        left: Unit of the dividend.
        right: Unit of the divisor.

    Returns:
        The unit of the quotient.
    """
    match left:
        case Product(factor, cancelled) if cancelled == right:
            logger.debug("%s / %s: cancelling factor", left, right)
            return factor
    if left == right:
        logger.debug("%s / %s: cancelling to dimensionless", left, right)
        return NONE
    logger.debug("%s / %s: forming ratio", left, right)
    return Ratio(left, right)
