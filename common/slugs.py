"""
Slug generation for groups and discussions.
"""
from django.utils.text import slugify


def unique_slug(model, value: str, *, fallback: str, field: str = 'slug') -> str:
    """
    Derive a URL-safe slug from ``value`` that no ``model`` row uses yet.

    The base slug is tried first, then ``base-1``, ``base-2`` and so on.
    The base is cut so that base and suffix together fit the column.
    Uniqueness is also enforced by the column, so callers must still be
    ready for an IntegrityError when two requests race for the same slug.

    Args:
        model: Django model class owning the slug column
        value: Display name or title
        fallback: Base used when ``value`` has no slug-able characters
        field: Name of the slug column

    Returns:
        A slug that was free at the time of the check
    """
    max_length = model._meta.get_field(field).max_length
    base = slugify(value)[:max_length].strip('-') or fallback
    slug = base
    counter = 1
    while model.objects.filter(**{field: slug}).exists():
        suffix = f"-{counter}"
        slug = f"{base[:max_length - len(suffix)].rstrip('-')}{suffix}"
        counter += 1
    return slug
