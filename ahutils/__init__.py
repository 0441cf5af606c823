"""
ahUtils - Python utility library.

Every function is available flat and grouped by domain:

    import ahutils

    ahutils.add(0.1, 0.2)            # 0.3
    ahutils.math.add(0.1, 0.2, 2)    # "0.30"
    ahutils.array.array_to_tree(rows)
    ahutils.object.get(data, "a.b.c")

Note: the flat namespace exports sum, round, range and set, which shadow
the builtins when imported with `from ahutils import *`.
"""
from ahutils.exceptions import (
    AhUtilsError,
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidOperandError,
    ResultOverflowError,
    )
from ahutils.schemas.tree import ArrayToTreeOptions
from ahutils.utils import array_utils as array
from ahutils.utils import base_utils as base
from ahutils.utils import math_utils as math
from ahutils.utils import object_utils as object
from ahutils.utils import string_utils as string
from ahutils.utils.array_utils import (
    array_sum,
    array_to_tree,
    difference,
    flatten,
    group,
    intersection,
    mean,
    range,
    sample,
    tree_to_array,
    union,
    unique,
    )
from ahutils.utils.base_utils import (
    get_type,
    is_array,
    is_boolean,
    is_date,
    is_empty,
    is_equals,
    is_function,
    is_null,
    is_number,
    is_object,
    is_regexp,
    is_string,
    is_type,
    )
from ahutils.utils.math_utils import (
    CompareResult,
    MathResult,
    MathValue,
    add,
    compare,
    configure_decimal_context,
    divide,
    get_decimal_context,
    is_valid_number,
    multiply,
    product,
    round,
    subtract,
    sum,
    to_decimal,
    )
from ahutils.utils.object_utils import (
    deep_clone,
    get,
    has,
    merge,
    omit,
    pick,
    remove,
    set,
    )
from ahutils.utils.string_utils import (
    camel_case,
    capitalize,
    escape,
    kebab_case,
    random_hex_color,
    random_string,
    snake_case,
    truncate,
    unescape,
    uuid,
    )

__version__ = "1.0.0"
