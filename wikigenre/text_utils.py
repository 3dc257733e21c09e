"""Text normalization utilities for scraped genre names."""


def title_case(text: str) -> str:
    """Upper-case the first letter of each space-separated word.

    Unlike ``str.title`` the rest of each word is left untouched, so
    "post-punk" becomes "Post-punk" and "UK garage" stays "UK Garage".
    """
    return ' '.join(part[:1].upper() + part[1:] for part in text.split(' '))
