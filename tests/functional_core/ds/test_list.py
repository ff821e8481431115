"""
tests/functional_core/ds/test_list.py
Tests para el tipo ConsList (Nil / Cons).
"""
import copy
import pickle
import time
import unittest
from functional_core.ds.list import ConsList, Cons, Nil, NIL, empty, of, cons, from_python, is_well_formed
from functional_core.invariants import REPR_LIMIT, STRESS_LENGTH


class TestConsList(unittest.TestCase):

    def test_creation_and_traversal(self):
        """
        Verifica cons manual y head/tail.
        """
        nil = ConsList.nil()
        self.assertTrue(nil.is_empty)
        self.assertIs(nil, NIL)
        self.assertIs(empty(), NIL)

        # L = [2]
        l1 = cons(2, nil)
        self.assertFalse(l1.is_empty)
        self.assertEqual(l1.head, 2)
        self.assertIs(l1.tail, nil)

        # L = [1, 2]
        l2 = ConsList.cons(1, l1)
        self.assertEqual(l2.head, 1)
        self.assertIs(l2.tail, l1) # Identidad estructural con l1

    def test_nil_is_singleton(self):
        self.assertIs(Nil(), NIL)
        self.assertIs(of(), NIL)
        self.assertIs(from_python([]), NIL)

    def test_of_preserves_order(self):
        lst = of(1, 2, 3)
        self.assertEqual(list(lst), [1, 2, 3])
        self.assertEqual(lst, Cons(1, Cons(2, Cons(3, NIL))))
        self.assertEqual(from_python(x for x in "abc"), of("a", "b", "c"))

    def test_nil_field_access_raises(self):
        with self.assertRaises(IndexError):
            NIL.head
        with self.assertRaises(IndexError):
            NIL.tail

    def test_tail_must_be_list(self):
        """Cons valida la cola: impide ciclos y estructuras mal formadas."""
        with self.assertRaises(TypeError):
            Cons(1, [2, 3])
        with self.assertRaises(TypeError):
            Cons(1, None)

    def test_immutability(self):
        """
        Asegura que no se puede alterar una lista ya construida.
        """
        original = of(1, 2)
        with self.assertRaises(AttributeError):
            original._head = 99
        with self.assertRaises(AttributeError):
            original.extra = 1
        with self.assertRaises(AttributeError):
            del original._tail
        with self.assertRaises(AttributeError):
            NIL.anything = 1

        _ = Cons(0, original)
        self.assertEqual(list(original), [1, 2])

    def test_persistence_branching(self):
        """
        Verifica la ramificación de listas (Y-Shape).
              /-> [10, ...] (L2)
        Base -> [20, 30]
              \\-> [99, ...] (L3)
        """
        base = of(20, 30)
        l2 = Cons(10, base)
        l3 = Cons(99, base)

        self.assertIs(l2.tail, base)
        self.assertIs(l3.tail, base)
        self.assertNotEqual(l2, l3)

    def test_structural_equality(self):
        self.assertEqual(of(1, 2, 3), of(1, 2, 3))
        self.assertNotEqual(of(1, 2, 3), of(1, 2))
        self.assertNotEqual(of(1, 2), of(1, 2, 3))
        self.assertNotEqual(of(1, 2), of(1, 3))
        self.assertNotEqual(of(1, 2), [1, 2])
        self.assertEqual(NIL, of())
        self.assertNotEqual(NIL, of(1))

    def test_hash_consistent_with_eq(self):
        self.assertEqual(hash(of(1, 2)), hash(from_python([1, 2])))
        self.assertEqual(len({of(1, 2), of(1, 2), of(2, 1)}), 2)
        with self.assertRaises(TypeError):
            hash(of([1], [2]))

    def test_covariant_nil_reuse(self):
        """El mismo NIL sirve de terminal para listas de cualquier tipo."""
        ints = Cons(1, NIL)
        strs = Cons("a", NIL)
        self.assertIs(ints.tail, strs.tail)

    def test_len_bool_iter(self):
        self.assertEqual(len(NIL), 0)
        self.assertEqual(len(of(1, 2, 3)), 3)
        self.assertFalse(NIL)
        self.assertTrue(of(0))
        self.assertEqual([x for x in of("x", "y")], ["x", "y"])

    def test_fluent_api(self):
        lst = of(1, 2, 3, 4)
        self.assertEqual(lst.map(lambda x: x * 2), of(2, 4, 6, 8))
        self.assertEqual(lst.filter(lambda x: x % 2 == 0), of(2, 4))
        self.assertEqual(lst.fold(lambda acc, x: acc * 10 + x, 0), 1234)

    def test_well_formed(self):
        self.assertTrue(is_well_formed(NIL))
        self.assertTrue(is_well_formed(of(1, 2, 3)))
        self.assertFalse(is_well_formed([1, 2, 3]))
        self.assertFalse(is_well_formed(None))

    def test_pickle_and_copy_roundtrip(self):
        lst = of(1, "dos", 3.0)
        self.assertEqual(pickle.loads(pickle.dumps(lst)), lst)
        self.assertIs(pickle.loads(pickle.dumps(NIL)), NIL)
        self.assertEqual(copy.deepcopy(lst), lst)

    def test_safety_repr_limit(self):
        """
        Asegura que imprimir una lista gigante no colapse la terminal.
        """
        self.assertEqual(repr(NIL), "Nil")
        self.assertEqual(repr(of(1, 2)), "List[1, 2]")

        giant = from_python(range(100))
        s = repr(giant)
        self.assertIn("...", s)
        self.assertEqual(s.count(","), REPR_LIMIT)

    def test_stress_massive_list(self):
        """
        ESTRÉS: Crear, medir, comparar y serializar una lista enorme sin Stack Overflow.
        """
        start = time.time()
        massive = from_python(range(STRESS_LENGTH))
        duration = time.time() - start
        print(f"\n[PERF] Crear ConsList({STRESS_LENGTH}): {duration:.4f}s")

        self.assertEqual(len(massive), STRESS_LENGTH)
        self.assertEqual(massive.head, 0)
        self.assertEqual(massive, from_python(range(STRESS_LENGTH)))
        self.assertEqual(pickle.loads(pickle.dumps(massive)), massive)


if __name__ == '__main__':
    unittest.main()
