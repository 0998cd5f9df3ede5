"""English strings for the Vimeo repository."""

STRINGS = {
    "pluginname": "Vimeo videos",
    "search": "Search videos",
    "vimeo:view": "Use vimeo in file picker",
    "configplugin": "Vimeo repository type configuration",
    "sortby": "Sort By",
    "sortpublished": "Date Published",
    "sortrating": "Rating",
    "sortrelevance": "Relevance",
    "sortviewcount": "View Count",
    "searchbutton": "Search",
}


def get_string(key: str) -> str:
    """Look up a display string. Raises KeyError for unknown keys."""
    return STRINGS[key]
