"""
Domain package for the formatting helpers.

Exports the value types shared by validators and formatters. Keep this
package focused on data definitions and validation concerns.
"""

from src.domain.models import DatePattern, DomainAllowList

__all__ = [
    "DatePattern",
    "DomainAllowList",
]
