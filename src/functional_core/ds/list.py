"""
src/functional_core/ds/list.py
Estructura de Datos Persistente: Lista Enlazada (Cons List).
Tipo suma con dos variantes: Nil (lista vacía, singleton) y Cons (cabeza + cola).
Inmutable, covariante y con compartición estructural de colas.
"""
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from ..invariants import REPR_LIMIT

T = TypeVar('T')
R = TypeVar('R')
T_co = TypeVar('T_co', covariant=True)


class ConsList(Generic[T_co]):
    """
    Lista Inmutable Persistente.
    Clase base abstracta: las únicas variantes son Nil y Cons.
    Todas las operaciones de recorrido son ITERATIVAS (seguras para listas de 100k+).
    """
    __slots__ = ()

    # --- CONSTRUCTORES ---

    @staticmethod
    def nil() -> 'ConsList[Any]':
        return NIL

    @staticmethod
    def cons(head: T, tail: 'ConsList[T]') -> 'ConsList[T]':
        """O(1) Prepend."""
        return Cons(head, tail)

    @staticmethod
    def of(*items: T) -> 'ConsList[T]':
        """of(1, 2, 3) -> List[1, 2, 3]. Sin argumentos retorna Nil."""
        return ConsList.from_python(items)

    @staticmethod
    def from_python(items: Iterable[T]) -> 'ConsList[T]':
        """O(N). Construye desde cualquier iterable Python conservando el orden."""
        acc = NIL
        # Iteración inversa para construir O(N) sin recursión
        for item in reversed(list(items)):
            acc = Cons(item, acc)
        return acc

    # --- ACCESO ---

    @property
    def is_empty(self) -> bool:
        raise NotImplementedError

    @property
    def head(self) -> T_co:
        raise NotImplementedError

    @property
    def tail(self) -> 'ConsList[T_co]':
        raise NotImplementedError

    # --- FUNCTIONAL API (delegan en ops para no duplicar lógica) ---

    def map(self, fn: Callable[[T_co], R]) -> 'ConsList[R]':
        from . import ops
        return ops.map(self, fn)

    def filter(self, predicate: Callable[[T_co], bool]) -> 'ConsList[T_co]':
        from . import ops
        return ops.filter(self, predicate)

    def fold(self, fn: Callable[[R, T_co], R], initial: R) -> R:
        """Reduce la lista a un valor acumulado (Left Fold)."""
        from .folds import fold_left
        return fold_left(self, initial, fn)

    # --- PYTHON MAGIC METHODS ---

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} es inmutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} es inmutable")

    def __iter__(self) -> Iterator[T_co]:
        """Iterador seguro O(N)."""
        curr = self
        while not curr.is_empty:
            yield curr.head
            curr = curr.tail

    def __len__(self) -> int:
        """O(N) Iterativo."""
        count = 0
        curr = self
        while not curr.is_empty:
            count += 1
            curr = curr.tail
        return count

    def __bool__(self) -> bool:
        # Evita que bool() recorra la lista entera vía __len__
        return not self.is_empty

    def __eq__(self, other):
        """Igualdad estructural O(N), elemento a elemento."""
        if not isinstance(other, ConsList): return False
        a, b = self, other
        while True:
            if a is b: return True
            if a.is_empty or b.is_empty: return False
            if a.head != b.head: return False
            a, b = a.tail, b.tail

    def __hash__(self):
        # Mismo contrato que tuple: falla si algún elemento no es hashable
        return hash(tuple(self))

    def __repr__(self):
        """Impresión segura. Trunca si es muy larga."""
        if self.is_empty: return "Nil"

        items = []
        count = 0
        curr = self
        while not curr.is_empty and count < REPR_LIMIT:
            items.append(repr(curr.head))
            curr = curr.tail
            count += 1

        if not curr.is_empty:
            items.append("...")

        return f"List[{', '.join(items)}]"


class Nil(ConsList[Any]):
    """Lista vacía. Nil() siempre retorna la misma instancia (NIL)."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return (Nil, ())

    @property
    def is_empty(self) -> bool:
        return True

    @property
    def head(self):
        raise IndexError("Head of empty list")

    @property
    def tail(self):
        raise IndexError("Tail of empty list")


class Cons(ConsList[T_co]):
    """Nodo: un elemento y la referencia al resto de la lista."""
    __slots__ = ('_head', '_tail')

    def __init__(self, head: T_co, tail: ConsList[T_co]):
        # Validación: tail debe ser una lista (garantiza finitud, no hay ciclos)
        if not isinstance(tail, ConsList):
            raise TypeError(f"Tail must be ConsList, got {type(tail)}")
        object.__setattr__(self, '_head', head)
        object.__setattr__(self, '_tail', tail)

    def __reduce__(self):
        # Reconstrucción iterativa: pickle recursivo desbordaría en listas largas
        return (from_python, (tuple(self),))

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def head(self) -> T_co:
        return self._head

    @property
    def tail(self) -> ConsList[T_co]:
        return self._tail


NIL: ConsList[Any] = Nil()

# Alias de módulo (API funcional)
empty = ConsList.nil
cons = ConsList.cons
of = ConsList.of
from_python = ConsList.from_python


def is_well_formed(obj: Any) -> bool:
    """
    Verifica que obj sea una cadena de Cons terminada en NIL.
    Con los constructores de este módulo siempre se cumple; sirve para auditar
    objetos de procedencia desconocida.
    """
    curr = obj
    while isinstance(curr, Cons):
        curr = curr.tail
    return curr is NIL
