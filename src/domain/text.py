import re

_UNSLUGGABLE = re.compile(r"[^-a-z0-9~\s.:;+=_]")
_SEPARATORS = re.compile(r"[\s.:;=+]+")


def to_slug(text: str) -> str:
    """
    Turn a title into a URL slug.

    >>> to_slug("My Site: Home")
    'my-site-home'
    """
    slug = _UNSLUGGABLE.sub("", text.strip().lower())
    return _SEPARATORS.sub("-", slug)
