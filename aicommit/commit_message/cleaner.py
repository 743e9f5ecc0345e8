"""Clean-up of the text returned by the completion endpoint."""


def clean_completion(content: str) -> str:
    """Strip one wrapping double quote on each side, then surrounding whitespace.

    Models often answer with the message quoted, e.g. ``"Fix bug"``. Only a
    single leading and a single trailing quote are removed, each
    independently, so quotes inside the message survive.
    """
    if content.startswith('"'):
        content = content[1:]
    if content.endswith('"'):
        content = content[:-1]
    return content.strip()
