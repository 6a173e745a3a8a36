from listkit.folding import (
    reduce_left,
    reduce_left_from_first,
    reduce_while,
    reduce_while_from_first,
    scan_left,
    scan_left_from_first,
    scan_left_while,
    scan_left_while_from_first,
)
from listkit.grouping import group, group_by
from listkit.mapping import (
    cat_optional,
    map_optional,
    map_optional_zipped,
    sequence,
    take_while_optional,
    traverse,
)
from listkit.optional import head_option, last_option
from listkit.shape import flatten, int_range, to_list_of_list
from listkit.utils import always, identity, setup_logging
from listkit.zipping import map_with_index, zip_with, zip_with_optional

__all__ = (
    "always",
    "cat_optional",
    "flatten",
    "group",
    "group_by",
    "head_option",
    "identity",
    "int_range",
    "last_option",
    "map_optional",
    "map_optional_zipped",
    "map_with_index",
    "reduce_left",
    "reduce_left_from_first",
    "reduce_while",
    "reduce_while_from_first",
    "scan_left",
    "scan_left_from_first",
    "scan_left_while",
    "scan_left_while_from_first",
    "sequence",
    "setup_logging",
    "take_while_optional",
    "to_list_of_list",
    "traverse",
    "zip_with",
    "zip_with_optional",
)
