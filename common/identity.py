"""
Caller identity resolution.

Request bodies carry the caller as raw ``id``/``email``/``name`` fields,
either at the top level or nested under ``userInfo.user``. No token is
verified: the payload is trusted as-is.
"""
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Optional

from django.db import models
from rest_framework import serializers

from common.exceptions import ValidationError

ANONYMOUS_NAME = 'Anonymous'


class MemberRole(models.TextChoices):
    USER = 'user', 'User'
    ADMIN = 'admin', 'Admin'
    MODERATOR = 'moderator', 'Moderator'


def normalize_email(email: Optional[str]) -> str:
    """Trim and lowercase an email; ``None`` becomes an empty string."""
    return (email or '').strip().lower()


@dataclass(frozen=True)
class Identity:
    """The caller as described by the request payload."""

    id: str
    email: str
    name: str = ''
    role: str = MemberRole.USER

    @property
    def display_name(self) -> str:
        return self.name or ANONYMOUS_NAME

    def is_complete(self) -> bool:
        return bool(self.id and self.email)

    def as_member(self) -> dict:
        data = asdict(self)
        data['role'] = str(self.role)
        return data


class IdentitySerializer(serializers.Serializer):
    """Shape check for identity fields taken from a request body."""

    id = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    email = serializers.EmailField(max_length=255, required=False, allow_blank=True, default='')
    name = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    # Older clients send the display name as ``username``
    username = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    role = serializers.ChoiceField(choices=MemberRole.choices, required=False, default=MemberRole.USER)


def resolve_identity(data, *, required: bool = True, key: Optional[str] = None) -> Optional[Identity]:
    """
    Build an ``Identity`` from a request payload.

    A nested ``userInfo.user`` object always wins. Otherwise the fields are
    read from ``data[key]`` when ``key`` is given (for bodies whose own
    ``name`` field means something else), or from the top level.

    Args:
        data: Parsed request body
        required: Raise if ``id`` or ``email`` is missing
        key: Name of a nested object holding the identity fields

    Returns:
        Identity, or None when nothing was supplied and ``required`` is False

    Raises:
        ValidationError: If the fields are malformed, or missing while required
    """
    if not isinstance(data, Mapping):
        raise ValidationError('Invalid request body')

    source = data
    user_info = data.get('userInfo')
    if isinstance(user_info, dict) and isinstance(user_info.get('user'), dict):
        source = user_info['user']
    elif key is not None:
        nested = data.get(key)
        source = nested if isinstance(nested, dict) else {}

    serializer = IdentitySerializer(data=source)
    if not serializer.is_valid():
        field, errors = next(iter(serializer.errors.items()))
        raise ValidationError(f"Invalid identity field '{field}': {errors[0]}")

    fields = serializer.validated_data
    identity = Identity(
        id=fields['id'],
        email=normalize_email(fields['email']),
        name=fields['name'] or fields['username'],
        role=fields['role'],
    )

    if not identity.is_complete():
        if required:
            raise ValidationError('ID and email are required')
        if not identity.id and not identity.email:
            return None
    return identity
