"""Placeholder substitution: replaces $name tokens with resolved variable values."""


def substitute(text: str, variables: dict[str, str]) -> str:
    """Replace every ``$<key>`` occurrence in *text* with ``variables[key]``.

    Keys are applied one after another in mapping order, each on the result
    of the previous replacement. Matching is literal and by prefix, so
    ``$entityName`` inside ``$entityNameRepository`` is replaced too.
    Tokens whose key is not in *variables* are left untouched.
    """
    result = text
    for key, value in variables.items():
        result = result.replace(f"${key}", value)
    return result
