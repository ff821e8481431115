"""
src/functional_core/demo.py
Demostración de la API de ConsList.
Uso: python -m functional_core.demo
"""
import logging
from typing import List, Tuple

from .ds.list import Cons, NIL, of
from .ds.folds import fold_left, fold_right
from .ds import ops

logger = logging.getLogger(__name__)


def _is_even(x: int) -> bool:
    return x % 2 == 0


def build_report() -> List[Tuple[str, object]]:
    """Pares (descripción, resultado). Separado de la impresión para poder testearlo."""
    return [
        ("Tail of List(1, 2, 3)", ops.tail(of(1, 2, 3))),
        ("Setting the head of List(1, 2, 3) with 0", ops.set_head(of(1, 2, 3), 0)),
        ("Dropping 2 elements from List(1, 2, 3)", ops.drop(of(1, 2, 3), 2)),
        ("Drop while even from List(2, 4, 6, 1, 3, 5)", ops.drop_while(of(2, 4, 6, 1, 3, 5), _is_even)),
        ("Init of List(1, 2, 3, 4)", ops.init(of(1, 2, 3, 4))),
        # Nil como semilla y Cons como combinador reconstruyen la lista original
        ("fold_right(List(1, 2, 3), Nil, Cons)", fold_right(of(1, 2, 3), NIL, Cons)),
        ("Length of List(1, 2, 3)", ops.length(of(1, 2, 3))),
        ("fold_left List(2, 4, 6) with 0 and +", fold_left(of(2, 4, 6), 0, lambda acc, x: acc + x)),
        ("Reverse List(1, 2, 3)", ops.reverse(of(1, 2, 3))),
        ("Append List(1, 2) with List(3, 4)", ops.append(of(1, 2), of(3, 4))),
        ("Concat List(List(1, 2), List(3), Nil, List(4))", ops.concat(of(of(1, 2), of(3), NIL, of(4)))),
        ("Increment List(1, 2, 3)", ops.increment(of(1, 2, 3))),
        ("Map square on List(1, 2, 3)", ops.map(of(1, 2, 3), lambda x: x * x)),
        ("Filter even from List(1, 2, 3)", ops.filter(of(1, 2, 3), _is_even)),
        ("flat_map List(1, 2, 3) with repeat", ops.flat_map(of(1, 2, 3), lambda i: of(i, i))),
        ("Zip List(1, 2, 3) with List(4, 5)", ops.zip(of(1, 2, 3), of(4, 5))),
        ("zip_with_sum(List(1, 2, 3), List(4, 5, 6))", ops.zip_with_sum(of(1, 2, 3), of(4, 5, 6))),
        ("Sum of List(1, 2, 3)", ops.sum(of(1, 2, 3))),
        ("Product of List(1.0, 2.0, 0.0, 5.0)", ops.product(of(1.0, 2.0, 0.0, 5.0))),
        ("List(1, 2, 3, 4) has subsequence List(2, 3)", ops.has_subsequence(of(1, 2, 3, 4), of(2, 3))),
    ]


def run_demo() -> None:
    report = build_report()
    for label, value in report:
        print(f"{label}: {value!r}")
    logger.debug("Demo: %d resultados", len(report))


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    run_demo()
