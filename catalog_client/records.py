from dataclasses import dataclass
from datetime import datetime, timezone as dt_timezone
from typing import Optional

from django.utils import timezone
from django.utils.dateparse import parse_datetime


def parse_timestamp(value):
    """Parse an ISO-8601 string into an aware datetime, or None"""
    if not value:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = parse_datetime(value)
        if parsed is None:
            return None
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, dt_timezone.utc)
    return parsed


def iso_timestamp(value):
    """
    Render a datetime as UTC ISO-8601 with millisecond precision,
    e.g. 2024-05-01T10:20:30.123Z. Returns '' for None.
    """
    if value is None:
        return ''
    value = value.astimezone(dt_timezone.utc)
    return value.strftime('%Y-%m-%dT%H:%M:%S') + f'.{value.microsecond // 1000:03d}Z'


@dataclass(frozen=True)
class ProductRecord:
    """One product as mirrored by the client."""
    id: str
    name: str
    weight: float
    price: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_json(cls, data):
        return cls(
            id=str(data['id']),
            name=data.get('name') or '',
            weight=data.get('weight'),
            price=data.get('price'),
            created_at=parse_timestamp(data.get('createdAt')),
            updated_at=parse_timestamp(data.get('updatedAt')),
        )

    def to_json(self):
        return {
            'id': self.id,
            'name': self.name,
            'weight': self.weight,
            'price': self.price,
            'createdAt': iso_timestamp(self.created_at) or None,
            'updatedAt': iso_timestamp(self.updated_at) or None,
        }
