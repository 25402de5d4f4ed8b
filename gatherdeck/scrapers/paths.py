"""
Relative link resolution for scraped pages.

Gatherer result pages link to card pages with relative hrefs such as
"../Card/Details.aspx?multiverseid=1234". These are merged with the path of
the page they were found on, following RFC 3986 dot-segment rules.
"""


def resolve_path(base: str, ref: str) -> str:
    """
    Resolve a reference against a base path.

    Args:
        base: Absolute path of the page the reference came from
        ref: Reference as found in the page (may carry a query string)

    Returns:
        Absolute path with "." and ".." segments removed. "" if both base
        and ref are empty.

    Examples:
        >>> resolve_path("/a/b/c", "../d")
        '/a/d'
        >>> resolve_path("/Pages/Search/Default.aspx", "../Card/Details.aspx?multiverseid=1")
        '/Pages/Card/Details.aspx?multiverseid=1'
    """
    if not ref:
        full = base
    elif ref.startswith("/"):
        full = ref
    else:
        # Keep the base up to and including its last slash
        full = base[: base.rfind("/") + 1] + ref

    if not full:
        return ""

    segments = full.split("/")
    resolved: list[str] = []
    for segment in segments:
        if segment == ".":
            continue
        if segment == "..":
            # ".." above the root is dropped silently
            if resolved:
                resolved.pop()
            continue
        resolved.append(segment)

    # "a/b/.." resolves to the directory, so keep a trailing slash
    if segments[-1] in (".", ".."):
        resolved.append("")

    return "/" + "/".join(resolved).lstrip("/")
