import re
from dataclasses import dataclass
from typing import Optional, Tuple

# Legacy responses put the route reference in a trailing parenthetical: "Main St (NH 101)"
TRAILING_PARENTHETICAL = re.compile(r"\(.+?\)$")

# Current responses prefix destinations with their refs: "I 95 South: Boston, Providence"
DESTINATION_CODE_SEPARATOR = ": "

TagValues = Optional[Tuple[str, ...]]

def split_tag_values(value: str, separator: str) -> Tuple[str, ...]:
    """
    Split a tag value on separator, trimming whitespace and dropping empty pieces.
    "A; ;B" -> ("A", "B")
    """
    pieces = (piece.strip() for piece in value.split(separator))
    return tuple(piece for piece in pieces if piece)

@dataclass(frozen=True)
class Road:
    """
    Normalized naming information for the road a step leads onto.
    Every field is None when the response said nothing about it.
    """

    names: TagValues = None
    codes: TagValues = None
    destinations: TagValues = None
    destination_codes: TagValues = None
    rotary_names: TagValues = None

def _names_without(name: str, ref: Optional[str], parenthetical: str) -> TagValues:
    if name == ref:
        return None
    names = split_tag_values(name.replace(parenthetical, ""), ";")
    return names or None

def disambiguate_road(
    name: str,
    ref: Optional[str] = None,
    destination: Optional[str] = None,
    rotary_name: Optional[str] = None,
) -> Road:
    """
    Separate road names from route reference codes and destination names
    from destination codes.

    Current responses carry ref separately but still echo it inside name,
    legacy responses only have it as a trailing parenthetical in name.
    Either way the ref is removed from the names.
    """
    match = TRAILING_PARENTHETICAL.search(name) if name else None

    if name and ref is not None:
        names = _names_without(name, ref, f"({ref})")
        codes = split_tag_values(ref, ";")
    elif match:
        parenthetical = match.group(0)
        names = _names_without(name, ref, parenthetical)
        codes = split_tag_values(parenthetical.strip("()"), ";")
    else:
        names = split_tag_values(name, ";") if name else None
        codes = split_tag_values(ref, ";") if ref is not None else None

    if destination is not None and DESTINATION_CODE_SEPARATOR in destination:
        code_part, _, name_part = destination.partition(DESTINATION_CODE_SEPARATOR)
        destination_codes = split_tag_values(code_part, ",")
        destinations = split_tag_values(name_part, ",")
    else:
        destination_codes = None
        destinations = split_tag_values(destination, ",") if destination is not None else None

    rotary_names = split_tag_values(rotary_name, ";") if rotary_name is not None else None

    return Road(
        names=names,
        codes=codes,
        destinations=destinations,
        destination_codes=destination_codes,
        rotary_names=rotary_names,
    )
