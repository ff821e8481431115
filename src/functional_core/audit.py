"""
src/functional_core/audit.py
Auditoría de Leyes Algebraicas sobre ConsList.
Genera listas aleatorias deterministas (por semilla) y verifica que la
librería cumpla sus leyes. Verdad de referencia:
- listas Python nativas para el contenido,
- SymPy para el orden de asociación de los folds.

Uso: python -m functional_core.audit
"""
import sys
import time
import random
import logging
from multiprocessing import Pool, cpu_count
from typing import Callable, Dict, List, Optional, Tuple

import sympy

from .ds.list import ConsList, Cons, NIL, from_python, is_well_formed
from .ds.folds import fold_left, fold_right, fold_right_recursive
from .ds import ops
from .invariants import AUDIT_SAMPLES, AUDIT_MAX_LENGTH, AUDIT_SEED, AUDIT_BATCHES

logger = logging.getLogger(__name__)

# (nombre de la ley, repr(a), repr(b))
Violation = Tuple[str, str, str]


def _is_even(x) -> bool:
    return x % 2 == 0


# =============================================================================
# LEYES (a, b: ConsList de enteros; py_a, py_b: sus espejos Python)
# =============================================================================

LAWS: Dict[str, Callable[[ConsList, ConsList, list, list], bool]] = {
    "well_formed":
        lambda a, b, py_a, py_b: is_well_formed(a) and is_well_formed(ops.reverse(a)),
    "length_reverse":
        lambda a, b, py_a, py_b: ops.length(a) == ops.length(ops.reverse(a)) == len(py_a),
    "reverse_involution":
        lambda a, b, py_a, py_b: ops.reverse(ops.reverse(a)) == a,
    "append_length":
        lambda a, b, py_a, py_b: ops.length(ops.append(a, b)) == ops.length(a) + ops.length(b),
    "append_identity":
        lambda a, b, py_a, py_b: ops.append(a, NIL) == a and ops.append(NIL, b) is b,
    "append_tail_sharing":
        lambda a, b, py_a, py_b: ops.drop(ops.append(a, b), len(py_a)) is b,
    "map_length":
        lambda a, b, py_a, py_b: ops.length(ops.map(a, lambda x: x * x)) == ops.length(a),
    "filter_true":
        lambda a, b, py_a, py_b: ops.filter(a, lambda x: True) == a,
    "filter_false":
        lambda a, b, py_a, py_b: ops.filter(a, lambda x: False) is NIL,
    "filter_matches_python":
        lambda a, b, py_a, py_b: list(ops.filter(a, _is_even)) == [x for x in py_a if _is_even(x)],
    "fold_identity":
        lambda a, b, py_a, py_b: fold_right(a, NIL, Cons) == a,
    "fold_right_strategies":
        lambda a, b, py_a, py_b: (fold_right(a, 0, lambda x, acc: x - acc)
                                  == fold_right_recursive(a, 0, lambda x, acc: x - acc)),
    "sum_strategies":
        lambda a, b, py_a, py_b: ops.sum(a) == ops.sum_left(a) == ops.sum_recursive(a) == sum(py_a),
    "drop_suffix":
        lambda a, b, py_a, py_b: list(ops.drop(a, len(py_b))) == py_a[len(py_b):],
    "drop_while_python":
        lambda a, b, py_a, py_b: (list(ops.drop_while(a, _is_even))
                                  == py_a[next((i for i, x in enumerate(py_a) if not _is_even(x)), len(py_a)):]),
    "init_python":
        lambda a, b, py_a, py_b: list(ops.init(a)) == py_a[:-1],
    "zip_length":
        lambda a, b, py_a, py_b: list(ops.zip(a, b)) == list(zip(py_a, py_b)),
    "flat_map_concat":
        lambda a, b, py_a, py_b: (ops.flat_map(a, lambda x: from_python([x, -x]))
                                  == ops.concat(ops.map(a, lambda x: from_python([x, -x])))),
    "subsequence_of_append":
        lambda a, b, py_a, py_b: ops.has_subsequence(ops.append(a, b), a) and ops.has_subsequence(ops.append(a, b), b),
}


def check_laws(a: ConsList, b: ConsList) -> List[str]:
    """Retorna los nombres de las leyes violadas por el par (a, b)."""
    py_a, py_b = list(a), list(b)
    return [name for name, law in LAWS.items() if not law(a, b, py_a, py_b)]


def check_symbolic_folds() -> List[str]:
    """
    Verifica la ASOCIATIVIDAD de los folds con un operador no asociativo (Pow).
    fold_right(a, b, c; z) -> a**(b**(c**z))
    fold_left (a, b, c; z) -> ((z**a)**b)**c
    """
    a, b, c, z = sympy.symbols('a b c z')
    lst = from_python([a, b, c])
    fails = []

    right = fold_right(lst, z, lambda x, acc: x ** acc)
    if right != a ** (b ** (c ** z)):
        fails.append("symbolic_fold_right")

    left = fold_left(lst, z, lambda acc, x: acc ** x)
    if left != ((z ** a) ** b) ** c:
        fails.append("symbolic_fold_left")

    if ops.sum(from_python([a, b, a])) != 2 * a + b:
        fails.append("symbolic_sum")

    return fails


def _random_list(rng: random.Random, max_length: int) -> ConsList[int]:
    size = rng.randint(0, max_length)
    return from_python([rng.randint(-50, 50) for _ in range(size)])


def audit_worker(args: Tuple[int, int, int, int]) -> List[Violation]:
    batch_id, seed, samples, max_length = args
    rng = random.Random(seed)

    fails = []
    for _ in range(samples):
        a = _random_list(rng, max_length)
        b = _random_list(rng, max_length)
        for name in check_laws(a, b):
            fails.append((name, repr(a), repr(b)))
            logger.warning("Violación: lote=%d ley=%s a=%r b=%r", batch_id, name, a, b)
    return fails


def run_audit(batches: int = AUDIT_BATCHES,
              samples: int = AUDIT_SAMPLES,
              max_length: int = AUDIT_MAX_LENGTH,
              seed: int = AUDIT_SEED,
              processes: Optional[int] = None) -> List[Violation]:
    """
    Ejecuta la auditoría completa. processes=1 la ejecuta en el proceso actual.
    Retorna la lista de violaciones (vacía si todo cumple).
    """
    tasks = [(i + 1, seed + i, samples, max_length) for i in range(batches)]
    violations: List[Violation] = [(name, "", "") for name in check_symbolic_folds()]

    if processes is None:
        processes = min(cpu_count(), batches) or 1

    t0 = time.time()
    if processes <= 1:
        results = [audit_worker(task) for task in tasks]
    else:
        with Pool(processes) as pool:
            results = pool.map(audit_worker, tasks)

    for i, res in enumerate(results):
        violations.extend(res)
        logger.info("Lote %d/%d: %d violaciones", i + 1, batches, len(res))

    logger.info("Auditoría: %d listas en %.2fs", batches * samples * 2, time.time() - t0)
    return violations


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    print("[*] AUDITORÍA DE LEYES: ConsList")
    print(f"[*] Leyes: {len(LAWS)} estructurales + folds simbólicos (SymPy)")
    print("-" * 65)

    violations = run_audit()

    print("-" * 65)
    if not violations:
        print("LEYES VALIDADAS: CERO VIOLACIONES.")
        return 0
    print(f"VIOLACIONES DETECTADAS: {len(violations)}")
    return 1


if __name__ == '__main__':
    sys.exit(main())
