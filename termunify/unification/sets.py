"""Reading equation files and splitting them into expression sets.

An input file looks like::

    #
    ?x1 = g(?x2)
    f(?x1,h(?x1),?x2) = f(g(?x3),?x4,?x3)
    #
    ?y = h(a(),b(),c())

Every line holding the delimiter opens a new set; other non-blank lines are
equations of the current set, kept verbatim.
"""

import logging
from typing import List, Optional

from termunify.global_params import global_config
from termunify.unification.core import ExpressionSet
from termunify.utils.exceptions import InputError

logger = logging.getLogger(__name__)


def read_input(file_name: str) -> str:
    """Read the whole input file.

    Raises:
        InputError: If the file cannot be read.
    """
    try:
        with open(file_name, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {file_name}. Exiting.") from e


def build_expression_sets(text: str, delimiter: Optional[str] = None) -> List[ExpressionSet]:
    """Split raw input into expression sets numbered from 1.

    Equations that come before the first delimiter line go into an
    implicit first set.

    Raises:
        InputError: If the input has fewer than two lines.
    """
    if delimiter is None:
        delimiter = global_config.set_delimiter
    lines = text.split("\n")
    if len(lines) < 2:
        raise InputError("Need >= 2 expressions to unify.")

    expression_sets: List[ExpressionSet] = []
    current: Optional[ExpressionSet] = None
    for line in lines:
        if delimiter in line:
            current = ExpressionSet(id=len(expression_sets) + 1)
            expression_sets.append(current)
        elif line.strip():
            if current is None:
                logger.warning("Equation before the first %r line, opening set 1", delimiter)
                current = ExpressionSet(id=1)
                expression_sets.append(current)
            current.expressions.append(line)

    logger.info("Read %d expression sets", len(expression_sets))
    return expression_sets
