def name_sort_key(name: str):
    """Case-insensitive ordering of sport names; exact text breaks casefold ties."""
    text = str(name)
    return (text.casefold(), text)
