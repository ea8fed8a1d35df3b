"""
Feed filter compilation
"""

from sqlalchemy import ColumnElement, or_, true

from ..dbmodels import Links


def compile_filter(needle: str | None) -> ColumnElement[bool]:
    """
    Build the feed predicate for an optional search needle.

    An absent or empty needle matches every link. Otherwise a link matches
    when its description or its url contains the needle; LIKE wildcards in
    the needle are matched literally.
    """
    if not needle:
        return true()

    return or_(
        Links.description.contains(needle, autoescape=True),
        Links.url.contains(needle, autoescape=True),
    )
