"""Link relation filtering for Atom links embedded in RSS items."""

CONTENT_LINK_RELATIONS = frozenset({"", "alternate", "enclosure", "related", "self", "via"})


def is_valid_link_relation(rel: str) -> bool:
    """Check whether a link's rel attribute points at content.

    Registered content relations and extension relation URIs (anything
    starting with "http") are accepted. Stylesheet, hub, payment and other
    keyword relations are not.
    """
    if rel in CONTENT_LINK_RELATIONS:
        return True
    return rel.startswith("http")
