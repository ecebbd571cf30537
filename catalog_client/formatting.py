"""
Display formatting for product records.

Numbers and dates are localized through Django's format machinery, so
output follows the active language and time zone.
"""

import json
from decimal import Decimal, ROUND_HALF_UP

from django.conf import settings
from django.utils import formats, timezone

from .forms import number_to_text

MISSING = '-'


def _client_setting(name):
    return settings.CATALOG_CLIENT[name]


def format_currency(price, currency=None):
    """Price as localized currency text with no fractional digits, e.g. 'LKR 1,500'"""
    currency = currency or _client_setting('CURRENCY')
    amount = Decimal(str(price)).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    number = formats.number_format(amount, decimal_pos=0, use_l10n=True, force_grouping=True)
    return f'{currency} {number}'


def format_weight(weight, unit=None):
    unit = unit or _client_setting('WEIGHT_UNIT')
    return f'{number_to_text(weight)} {unit}'


def format_timestamp(value):
    """Locale-aware short date and time in the active time zone; '-' when missing"""
    if not value:
        return MISSING
    return formats.date_format(timezone.localtime(value), 'SHORT_DATETIME_FORMAT')


def format_record(record):
    """Full record as indented JSON"""
    return json.dumps(record.to_json(), indent=2)
