"""
src/functional_core/ds/folds.py
Combinadores primitivos de recorrido: Fold Left y Fold Right.

- fold_left:            iterativo, seguro para cualquier tamaño.
- fold_right:           stack-safe. Invierte la lista (fold_left) y vuelve a
                        plegar por la izquierda con los argumentos permutados.
- fold_right_recursive: recursión estructural pura. Un frame por elemento:
                        listas más largas que el límite de recursión lanzan
                        RecursionError.

Los tres son totales: solo 'combine' puede fallar, y su excepción se propaga
sin envolver.
"""
from typing import Callable, TypeVar

from .list import ConsList, Cons, NIL

T = TypeVar('T')
R = TypeVar('R')


def fold_left(lst: ConsList[T], seed: R, combine: Callable[[R, T], R]) -> R:
    """combine(combine(combine(seed, x1), x2), x3)"""
    acc = seed
    curr = lst
    while not curr.is_empty:
        acc = combine(acc, curr.head)
        curr = curr.tail
    return acc


def fold_right(lst: ConsList[T], seed: R, combine: Callable[[T, R], R]) -> R:
    """
    combine(x1, combine(x2, combine(x3, seed)))
    El último elemento se combina primero con 'seed'.
    Coste: una lista invertida temporal O(N) a cambio de no consumir stack.
    """
    reversed_lst = fold_left(lst, NIL, lambda acc, item: Cons(item, acc))
    return fold_left(reversed_lst, seed, lambda acc, item: combine(item, acc))


def fold_right_recursive(lst: ConsList[T], seed: R, combine: Callable[[T, R], R]) -> R:
    """Versión naive. Limitada por sys.getrecursionlimit()."""
    if lst.is_empty:
        return seed
    return combine(lst.head, fold_right_recursive(lst.tail, seed, combine))
