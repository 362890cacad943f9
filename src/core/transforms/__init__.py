"""Case styles, removal filters, escaping and rearrangement utilities."""

from .casing import (
    swap_case,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_sarcasm,
    to_snake_case,
    to_title_case,
)
from .escaping import to_json_escaped, to_xml_escaped
from .filters import (
    remove_digits,
    remove_letters,
    remove_non_alphanumeric,
    remove_non_ascii,
    remove_special_characters,
)
from .rearrange import reverse, shuffle

__all__ = [
    "remove_digits",
    "remove_letters",
    "remove_non_alphanumeric",
    "remove_non_ascii",
    "remove_special_characters",
    "reverse",
    "shuffle",
    "swap_case",
    "to_camel_case",
    "to_json_escaped",
    "to_kebab_case",
    "to_pascal_case",
    "to_sarcasm",
    "to_snake_case",
    "to_title_case",
    "to_xml_escaped",
]
