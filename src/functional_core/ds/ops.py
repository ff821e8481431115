"""
src/functional_core/ds/ops.py
Librería de operaciones derivadas sobre ConsList.
Todas son puras y se expresan sobre los folds primitivos (folds.py).

NOTA: Los nombres sum/map/filter/zip ocultan los builtins dentro de este
módulo a propósito (API estilo `ops.map(lst, fn)`). No usar los builtins aquí.

Seguridad de stack:
- Sin riesgo (iterativas o basadas en fold_left / fold_right stack-safe):
  todas las funciones salvo las que terminan en '_recursive'.
- Acotadas por el límite de recursión: sum_recursive, product_recursive,
  append_recursive.
"""
import operator
from typing import Any, Callable, Tuple, TypeVar

from .list import ConsList, Cons, NIL
from .folds import fold_left, fold_right, fold_right_recursive

T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')


# =============================================================================
# AGREGADOS NUMÉRICOS
# =============================================================================

def sum(ints: ConsList) -> Any:
    return fold_right(ints, 0, operator.add)


def sum_left(ints: ConsList) -> Any:
    return fold_left(ints, 0, operator.add)


def sum_recursive(ints: ConsList) -> Any:
    return fold_right_recursive(ints, 0, operator.add)


def product(ds: ConsList) -> Any:
    """
    Producto en aritmética de doble precisión: product(Nil) == 1.0.
    Cortocircuito: al encontrar un cero literal retorna 0.0 sin mirar el resto.
    """
    acc = 1.0
    curr = ds
    while not curr.is_empty:
        x = curr.head
        if x == 0:
            return 0.0
        acc = acc * x
        curr = curr.tail
    return acc


def product_left(ds: ConsList) -> Any:
    return fold_left(ds, 1.0, operator.mul)


def product_recursive(ds: ConsList) -> Any:
    if ds.is_empty:
        return 1.0
    if ds.head == 0:
        return 0.0
    return ds.head * product_recursive(ds.tail)


def length(lst: ConsList) -> int:
    return fold_right(lst, 0, lambda _, acc: acc + 1)


# =============================================================================
# ACCESO ESTRUCTURAL (Totales: nunca fallan con Nil)
# =============================================================================

def tail(lst: ConsList[T]) -> ConsList[T]:
    """tail(Nil) == Nil."""
    if lst.is_empty: return NIL
    return lst.tail


def set_head(lst: ConsList[T], head: T) -> ConsList[T]:
    """Reemplaza el primer elemento. No-op sobre Nil. Comparte la cola."""
    if lst.is_empty: return NIL
    return Cons(head, lst.tail)


def drop(lst: ConsList[T], n: int) -> ConsList[T]:
    """
    Elimina los primeros n elementos. O(n), sin copiar: retorna un sufijo.
    n <= 0 retorna la misma lista; n > len(lst) retorna Nil.
    """
    # operator.index rechaza floats y strings con TypeError
    remaining = operator.index(n)
    curr = lst
    while remaining > 0 and not curr.is_empty:
        curr = curr.tail
        remaining -= 1
    return curr


def drop_while(lst: ConsList[T], predicate: Callable[[T], bool]) -> ConsList[T]:
    """Elimina del frente mientras predicate(x) sea cierto. Retorna un sufijo."""
    curr = lst
    while not curr.is_empty and predicate(curr.head):
        curr = curr.tail
    return curr


def init(lst: ConsList[T]) -> ConsList[T]:
    """Todos menos el último. init(Nil) == init([x]) == Nil."""
    if lst.is_empty or lst.tail.is_empty:
        return NIL

    # Se acumula el prefijo invertido; la última celda se descarta
    rev_prefix = NIL
    curr = lst
    while not curr.tail.is_empty:
        rev_prefix = Cons(curr.head, rev_prefix)
        curr = curr.tail
    return reverse(rev_prefix)


# =============================================================================
# COMBINACIÓN
# =============================================================================

def append(a1: ConsList[T], a2: ConsList[T]) -> ConsList[T]:
    """
    Concatena. Solo recorre a1; a2 se comparte físicamente como cola.
    append(Nil, b) is b.
    """
    return fold_right(a1, a2, Cons)


def append_recursive(a1: ConsList[T], a2: ConsList[T]) -> ConsList[T]:
    if a1.is_empty:
        return a2
    return Cons(a1.head, append_recursive(a1.tail, a2))


def concat(lists: ConsList[ConsList[T]]) -> ConsList[T]:
    """
    Aplana una lista de listas mediante append sucesivos.
    Plegado por la derecha: cada sublista se recorre una sola vez y la
    última se comparte como cola.
    """
    return fold_right(lists, NIL, append)


def reverse(lst: ConsList[T]) -> ConsList[T]:
    return fold_left(lst, NIL, lambda acc, item: Cons(item, acc))


# =============================================================================
# TRANSFORMACIÓN (High Order Functions)
# =============================================================================

def map(lst: ConsList[T], fn: Callable[[T], R]) -> ConsList[R]:
    """
    Aplica fn a cada elemento conservando orden y longitud.
    fn se invoca de cabeza a cola (una vez por elemento).
    """
    if lst.is_empty: return NIL
    rev = fold_left(lst, NIL, lambda acc, item: Cons(fn(item), acc))
    return reverse(rev)


def filter(lst: ConsList[T], predicate: Callable[[T], bool]) -> ConsList[T]:
    """Conserva los elementos que cumplen predicate, en su orden relativo."""
    if lst.is_empty: return NIL
    rev = fold_left(lst, NIL, lambda acc, item: Cons(item, acc) if predicate(item) else acc)
    return reverse(rev)


def flat_map(lst: ConsList[T], fn: Callable[[T], ConsList[R]]) -> ConsList[R]:
    """Equivale a concat(map(lst, fn))."""
    return concat(map(lst, fn))


def filter_via_flat_map(lst: ConsList[T], predicate: Callable[[T], bool]) -> ConsList[T]:
    return flat_map(lst, lambda item: Cons(item, NIL) if predicate(item) else NIL)


def increment(ns: ConsList) -> ConsList:
    return map(ns, lambda n: n + 1)


def to_strings(ds: ConsList) -> ConsList[str]:
    return map(ds, str)


# =============================================================================
# ZIP
# =============================================================================

def zip_with(first: ConsList[T], second: ConsList[U], fn: Callable[[T, U], R]) -> ConsList[R]:
    """
    Combina posicionalmente con fn(x, y).
    Longitud del resultado = min(len(first), len(second)); el exceso se descarta.
    """
    rev = NIL
    a, b = first, second
    while not a.is_empty and not b.is_empty:
        rev = Cons(fn(a.head, b.head), rev)
        a, b = a.tail, b.tail
    return reverse(rev)


def zip(first: ConsList[T], second: ConsList[U]) -> ConsList[Tuple[T, U]]:
    return zip_with(first, second, lambda x, y: (x, y))


def zip_with_sum(ns: ConsList, nns: ConsList) -> ConsList:
    return zip_with(ns, nns, operator.add)


# =============================================================================
# BÚSQUEDA
# =============================================================================

def starts_with(lst: ConsList[T], prefix: ConsList[T]) -> bool:
    """True si los primeros len(prefix) elementos de lst coinciden con prefix."""
    a, b = lst, prefix
    while not b.is_empty:
        if a.is_empty or a.head != b.head:
            return False
        a, b = a.tail, b.tail
    return True


def has_subsequence(sup: ConsList[T], sub: ConsList[T]) -> bool:
    """
    ¿Aparece 'sub' como tramo CONTIGUO de 'sup', en orden?
    has_subsequence(_, Nil) == True. O(len(sup) * len(sub)).
    """
    curr = sup
    while True:
        if starts_with(curr, sub):
            return True
        if curr.is_empty:
            return False
        curr = curr.tail
